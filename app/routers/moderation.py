"""
Livecomment moderation endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.core.database import get_db
from app.core.security import verify_user_session
from app.models import Livestream, Livecomment, LivecommentReport
from app.utils.datetime_utils import now_unix
from app.utils.responses import (
    fill_livecomment_report_response, fill_livecomment_report_responses
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/livestream", tags=["moderation"])


def get_livestream_or_404(db: Session, livestream_id: int) -> Livestream:
    livestream = db.query(Livestream).filter(Livestream.id == livestream_id).first()
    if not livestream:
        raise HTTPException(status_code=404, detail="not found livestream that has the given id")
    return livestream


@router.get("/{livestream_id}/report")
async def get_livecomment_reports(
    livestream_id: int,
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    """
    Reports filed against a livestream's comments (owner only)
    """
    try:
        livestream = get_livestream_or_404(db, livestream_id)
        if livestream.user_id != user_id:
            raise HTTPException(status_code=403, detail="can't get other streamer's livecomment reports")

        reports = db.query(LivecommentReport).filter(
            LivecommentReport.livestream_id == livestream_id
        ).order_by(LivecommentReport.id).all()

        response = fill_livecomment_report_responses(db, reports)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=500, detail=f"failed to get livecomment reports: {e}")

    return response


@router.post("/{livestream_id}/livecomment/{livecomment_id}/report", status_code=201)
async def report_livecomment(
    livestream_id: int,
    livecomment_id: int,
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    """
    Report a livecomment to the livestream owner
    """
    try:
        get_livestream_or_404(db, livestream_id)

        livecomment = db.query(Livecomment).filter(
            Livecomment.id == livecomment_id,
            Livecomment.livestream_id == livestream_id
        ).first()
        if not livecomment:
            raise HTTPException(status_code=404, detail="livecomment not found")

        report = LivecommentReport(
            user_id=user_id,
            livestream_id=livestream_id,
            livecomment_id=livecomment_id,
            created_at=now_unix(),
        )
        db.add(report)
        db.flush()

        response = fill_livecomment_report_response(db, report)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to report livecomment {livecomment_id}: {e}")
        raise HTTPException(status_code=500, detail=f"failed to insert livecomment report: {e}")

    logger.info(f"User {user_id} reported livecomment {livecomment_id} on livestream {livestream_id}")
    return response

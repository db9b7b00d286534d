"""
Livestream endpoints: reservation, search, listing, viewer entry/exit
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.core.database import get_db
from app.core.config import settings
from app.core.security import verify_user_session
from app.models import (
    User, Tag, Livestream, LivestreamTag, ReservationSlot, LivestreamViewerHistory
)
from app.schemas import ReserveLivestreamRequest
from app.utils.datetime_utils import now_unix, parse_unix
from app.utils.slots import lock_reservation_slots, reservation_slots_in_range
from app.utils.responses import (
    tag_response, fill_livestream_response, fill_livestream_responses
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["livestream"])


@router.post("/livestream/reservation", status_code=201)
async def reserve_livestream(
    body: ReserveLivestreamRequest,
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    """
    Reserve a livestream over [start_at, end_at].

    Every reservation slot inside the range is locked, checked for remaining
    capacity and decremented in the same transaction as the livestream insert.
    """
    term_start_at = parse_unix(settings.RESERVATION_TERM_START)
    term_end_at = parse_unix(settings.RESERVATION_TERM_END)
    if body.start_at >= term_end_at or body.end_at <= term_start_at:
        raise HTTPException(status_code=400, detail="bad reservation time range")

    try:
        slots = lock_reservation_slots(db, body.start_at, body.end_at).all()

        for slot in slots:
            logger.info(f"Reservation slot {slot.start_at} ~ {slot.end_at}: {slot.slot} remaining")
            if slot.slot < 1:
                db.rollback()
                raise HTTPException(
                    status_code=400,
                    detail=(
                        f"reservation range {body.start_at} ~ {body.end_at} cannot be booked "
                        f"within term {term_start_at} ~ {term_end_at}"
                    )
                )

        reservation_slots_in_range(db, body.start_at, body.end_at).update(
            {ReservationSlot.slot: ReservationSlot.slot - 1}, synchronize_session=False
        )

        livestream = Livestream(
            user_id=user_id,
            title=body.title,
            description=body.description,
            playlist_url=body.playlist_url,
            thumbnail_url=body.thumbnail_url,
            start_at=body.start_at,
            end_at=body.end_at,
        )
        db.add(livestream)
        db.flush()

        for tag_id in body.tags:
            db.add(LivestreamTag(livestream_id=livestream.id, tag_id=tag_id))
        db.flush()

        response = fill_livestream_response(db, livestream)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"Reservation failed for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail=f"failed to reserve livestream: {e}")

    logger.info(f"User {user_id} reserved livestream {response['id']} ({body.start_at} ~ {body.end_at})")
    return response


@router.get("/livestream/search")
async def search_livestreams(
    tag: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Search livestreams by tag name, or list the latest ones.
    limit only applies when no tag is given.
    """
    try:
        if tag:
            key_tag = db.query(Tag).filter(Tag.name == tag).first()
            if not key_tag:
                return []

            tagged_ids = [
                row.livestream_id for row in db.query(LivestreamTag.livestream_id).filter(
                    LivestreamTag.tag_id == key_tag.id
                ).order_by(LivestreamTag.livestream_id.desc()).all()
            ]
            livestreams = []
            if tagged_ids:
                livestreams = db.query(Livestream).filter(
                    Livestream.id.in_(tagged_ids)
                ).order_by(Livestream.id.desc()).all()
        else:
            query = db.query(Livestream).order_by(Livestream.id.desc())
            if limit:
                try:
                    n = int(limit)
                except ValueError:
                    raise HTTPException(status_code=400, detail="limit query parameter must be integer")
                if n < 0:
                    raise HTTPException(status_code=400, detail="limit query parameter must not be negative")
                query = query.limit(n)
            livestreams = query.all()

        response = fill_livestream_responses(db, livestreams)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Livestream search failed: {e}")
        raise HTTPException(status_code=500, detail=f"failed to get livestreams: {e}")

    return response


@router.get("/livestream")
async def get_my_livestreams(
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    """Livestreams owned by the session user"""
    try:
        livestreams = db.query(Livestream).filter(
            Livestream.user_id == user_id
        ).order_by(Livestream.id).all()
        response = fill_livestream_responses(db, livestreams)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=500, detail=f"failed to get livestreams: {e}")

    return response


@router.get("/user/{username}/livestream")
async def get_user_livestreams(
    username: str,
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    """Livestreams owned by the named user"""
    try:
        user = db.query(User).filter(User.name == username).first()
        if not user:
            raise HTTPException(status_code=404, detail="user not found")

        livestreams = db.query(Livestream).filter(
            Livestream.user_id == user.id
        ).order_by(Livestream.id).all()
        response = fill_livestream_responses(db, livestreams)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=500, detail=f"failed to get livestreams: {e}")

    return response


@router.get("/livestream/{livestream_id}")
async def get_livestream(
    livestream_id: int,
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    try:
        livestream = db.query(Livestream).filter(Livestream.id == livestream_id).first()
        if not livestream:
            raise HTTPException(status_code=404, detail="not found livestream that has the given id")

        response = fill_livestream_response(db, livestream)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=500, detail=f"failed to get livestream: {e}")

    return response


@router.post("/livestream/{livestream_id}/enter")
async def enter_livestream(
    livestream_id: int,
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    """
    Record that the session user started watching
    """
    try:
        db.add(LivestreamViewerHistory(
            user_id=user_id,
            livestream_id=livestream_id,
            created_at=now_unix(),
        ))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to record viewer {user_id} entering livestream {livestream_id}: {e}")
        raise HTTPException(status_code=500, detail=f"failed to insert livestream_view_history: {e}")

    return Response(status_code=200)


@router.delete("/livestream/{livestream_id}/exit")
async def exit_livestream(
    livestream_id: int,
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db)
):
    """
    Record that the session user stopped watching
    """
    try:
        db.query(LivestreamViewerHistory).filter(
            LivestreamViewerHistory.user_id == user_id,
            LivestreamViewerHistory.livestream_id == livestream_id
        ).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to record viewer {user_id} leaving livestream {livestream_id}: {e}")
        raise HTTPException(status_code=500, detail=f"failed to delete livestream_view_history: {e}")

    return Response(status_code=200)


@router.get("/tag")
async def get_tags(db: Session = Depends(get_db)):
    """
    All tags
    """
    tags = db.query(Tag).order_by(Tag.id).all()
    return {"tags": [tag_response(t) for t in tags]}

"""
Cleanup tasks for stale data
"""
import logging
from celery import shared_task
from datetime import timedelta
from app.core.config import settings
from app.core.database import SessionLocal
from app.models import LivestreamViewerHistory
from app.utils.datetime_utils import now_unix

logger = logging.getLogger(__name__)


@shared_task(name="app.tasks.cleanup.cleanup_stale_viewers")
def cleanup_stale_viewers():
    """
    Delete viewer history rows for viewers that never sent an exit,
    older than VIEWER_LOG_RETENTION_DAYS
    """
    db = SessionLocal()
    try:
        retention = int(timedelta(days=settings.VIEWER_LOG_RETENTION_DAYS).total_seconds())
        threshold = now_unix() - retention
        count = db.query(LivestreamViewerHistory).filter(
            LivestreamViewerHistory.created_at < threshold
        ).delete(synchronize_session=False)
        db.commit()
        logger.info(f"[CLEANUP] Deleted {count} stale viewer history rows")
        return {"success": True, "deleted_count": count}
    except Exception as e:
        db.rollback()
        logger.error(f"[CLEANUP] Error deleting stale viewer history: {e}")
        return {"success": False, "error": str(e)}
    finally:
        db.close()

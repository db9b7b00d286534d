"""
Celery Tasks
"""
from .cleanup import cleanup_stale_viewers

__all__ = [
    "cleanup_stale_viewers",
]

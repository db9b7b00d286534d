"""
Database Models
"""
from .user import User, Theme, Icon
from .livestream import Livestream, Tag, LivestreamTag, ReservationSlot
from .viewer import LivestreamViewerHistory
from .comment import Livecomment, LivecommentReport

__all__ = [
    "User",
    "Theme",
    "Icon",
    "Livestream",
    "Tag",
    "LivestreamTag",
    "ReservationSlot",
    "LivestreamViewerHistory",
    "Livecomment",
    "LivecommentReport",
]

# Export Base from database
from app.core.database import Base

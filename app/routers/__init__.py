"""
API Routers
"""
from .auth import router as auth_router
from .livestream import router as livestream_router
from .moderation import router as moderation_router

__all__ = ["auth_router", "livestream_router", "moderation_router"]

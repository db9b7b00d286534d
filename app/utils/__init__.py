"""
Utility Functions
"""
from .datetime_utils import now_unix, to_unix, parse_unix

__all__ = ["now_unix", "to_unix", "parse_unix"]

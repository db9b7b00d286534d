"""
Request bodies
"""
from pydantic import BaseModel
from typing import List


class ReserveLivestreamRequest(BaseModel):
    tags: List[int] = []
    title: str
    description: str = ""
    playlist_url: str
    thumbnail_url: str
    start_at: int
    end_at: int


class ThemeRequest(BaseModel):
    dark_mode: bool = False


class RegisterRequest(BaseModel):
    name: str
    display_name: str = ""
    description: str = ""
    password: str
    theme: ThemeRequest = ThemeRequest()


class LoginRequest(BaseModel):
    username: str
    password: str

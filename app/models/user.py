"""
User Models
"""
from typing import Optional
from sqlalchemy import Integer, String, Boolean, ForeignKey, LargeBinary, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    display_name: Mapped[str] = mapped_column(String(255))
    password: Mapped[str] = mapped_column(String(255))  # bcrypt hash
    description: Mapped[str] = mapped_column(Text, default="")

    def __repr__(self):
        return f"<User(id={self.id}, name={self.name})>"


class Theme(Base):
    __tablename__ = "themes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    dark_mode: Mapped[bool] = mapped_column(Boolean, default=False)


class Icon(Base):
    __tablename__ = "icons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    image: Mapped[Optional[bytes]] = mapped_column(LargeBinary, nullable=True)
    icon_hash: Mapped[str] = mapped_column(String(64))  # sha256 hex of image

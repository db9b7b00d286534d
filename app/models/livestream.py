from sqlalchemy import BigInteger, Integer, String, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base


class Livestream(Base):
    __tablename__ = "livestreams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    playlist_url: Mapped[str] = mapped_column(String(255))
    thumbnail_url: Mapped[str] = mapped_column(String(255))
    start_at: Mapped[int] = mapped_column(BigInteger)  # unix seconds
    end_at: Mapped[int] = mapped_column(BigInteger)


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True)


class LivestreamTag(Base):
    __tablename__ = "livestream_tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    tag_id: Mapped[int] = mapped_column(Integer, index=True)  # unknown tag ids are stored and skipped on read


class ReservationSlot(Base):
    __tablename__ = "reservation_slots"
    __table_args__ = (UniqueConstraint("start_at", "end_at", name="uq_reservation_slot_window"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slot: Mapped[int] = mapped_column(Integer)  # remaining capacity
    start_at: Mapped[int] = mapped_column(BigInteger, index=True)
    end_at: Mapped[int] = mapped_column(BigInteger, index=True)

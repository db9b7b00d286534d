from sqlalchemy import BigInteger, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base


class LivestreamViewerHistory(Base):
    """A row exists while the user is watching the livestream"""
    __tablename__ = "livestream_viewers_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    livestream_id: Mapped[int] = mapped_column(Integer, index=True)  # not checked against livestreams
    created_at: Mapped[int] = mapped_column(BigInteger, index=True)  # unix seconds

from sqlalchemy import BigInteger, Integer, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base


class Livecomment(Base):
    __tablename__ = "livecomments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    comment: Mapped[str] = mapped_column(Text)
    tip: Mapped[int] = mapped_column(BigInteger, default=0)
    created_at: Mapped[int] = mapped_column(BigInteger)


class LivecommentReport(Base):
    __tablename__ = "livecomment_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)  # reporter
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    livecomment_id: Mapped[int] = mapped_column(ForeignKey("livecomments.id"), index=True)
    created_at: Mapped[int] = mapped_column(BigInteger)

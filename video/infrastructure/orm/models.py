from datetime import datetime, timezone

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from config.database.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VideoRecordORM(Base):
    __tablename__ = "video_record"

    video_id = Column(String(100), primary_key=True)
    title = Column(String(500))
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    samples = relationship(
        "VideoViewSampleORM",
        order_by="VideoViewSampleORM.id",
        lazy="selectin",
    )


class VideoViewSampleORM(Base):
    __tablename__ = "video_view_sample"

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_id = Column(String(100), ForeignKey("video_record.video_id"), index=True, nullable=False)
    sampled_at = Column(DateTime(timezone=True), nullable=False)
    view_count = Column(BigInteger, nullable=False)

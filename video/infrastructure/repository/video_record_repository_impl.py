from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from video.application.port.video_record_repository_port import VideoRecordRepositoryPort
from video.domain.exceptions import DuplicateKeyError, StoreError
from video.domain.video_record import VideoRecord, ViewSample
from video.infrastructure.orm.models import VideoRecordORM, VideoViewSampleORM


class VideoRecordRepositoryImpl(VideoRecordRepositoryPort):
    """
    video_record / video_view_sample 테이블 기반의 조회수 시계열 저장소.
    요청 스레드와 배치 스레드가 함께 사용하므로 연산마다 세션을 새로 열고 닫는다.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def find_by_video_id(self, video_id: str) -> Optional[VideoRecord]:
        try:
            with self.session_factory() as db:
                orm = db.get(VideoRecordORM, video_id)
                if orm is None:
                    return None
                return self._to_domain(orm)
        except SQLAlchemyError as exc:
            raise StoreError(f"video record lookup failed: {exc}") from exc

    def find_all(self) -> List[VideoRecord]:
        try:
            with self.session_factory() as db:
                rows = db.execute(select(VideoRecordORM).order_by(VideoRecordORM.video_id)).scalars().all()
                return [self._to_domain(orm) for orm in rows]
        except SQLAlchemyError as exc:
            raise StoreError(f"video record listing failed: {exc}") from exc

    def create(self, video_id: str, title: str, initial_sample: ViewSample) -> VideoRecord:
        with self.session_factory() as db:
            orm = VideoRecordORM(video_id=video_id, title=title)
            db.add(orm)
            try:
                # 기본키 충돌을 샘플 삽입 전에 감지하도록 레코드를 먼저 flush 합니다.
                db.flush()
                db.add(self._sample_to_orm(video_id, initial_sample))
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateKeyError(f"video record already exists: {video_id}") from exc
            except SQLAlchemyError as exc:
                db.rollback()
                raise StoreError(f"video record create failed: {exc}") from exc

        return VideoRecord(video_id=video_id, title=title, samples=[initial_sample])

    def append_sample(self, record: VideoRecord, sample: ViewSample) -> None:
        with self.session_factory() as db:
            db.add(self._sample_to_orm(record.video_id, sample))
            try:
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                raise StoreError(f"sample append failed for {record.video_id}: {exc}") from exc
        record.add_sample(sample)

    @staticmethod
    def _sample_to_orm(video_id: str, sample: ViewSample) -> VideoViewSampleORM:
        return VideoViewSampleORM(
            video_id=video_id,
            sampled_at=sample.sampled_at,
            view_count=sample.view_count,
        )

    @staticmethod
    def _to_domain(orm: VideoRecordORM) -> VideoRecord:
        return VideoRecord(
            video_id=orm.video_id,
            title=orm.title,
            samples=[
                ViewSample(sampled_at=_as_utc(sample.sampled_at), view_count=sample.view_count)
                for sample in orm.samples
            ],
        )


def _as_utc(value: datetime) -> datetime:
    # sqlite 등 timezone 을 보존하지 않는 드라이버는 naive datetime 을 돌려준다.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

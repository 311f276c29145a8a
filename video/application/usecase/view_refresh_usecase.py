import logging
from dataclasses import dataclass, field
from typing import List, Optional

from video.application.port.clock_port import ClockPort
from video.application.port.video_api_port import VideoApiPort
from video.application.port.video_record_repository_port import VideoRecordRepositoryPort
from video.domain.video_record import VideoRecord, ViewSample

logger = logging.getLogger(__name__)


@dataclass
class RefreshResult:
    video_id: str
    ok: bool
    view_count: Optional[int] = None
    error: Optional[str] = None


@dataclass
class RefreshSummary:
    results: List[RefreshResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    def failed_video_ids(self) -> List[str]:
        return [result.video_id for result in self.results if not result.ok]


class ViewRefreshUseCase:
    def __init__(
        self,
        video_api: VideoApiPort,
        repository: VideoRecordRepositoryPort,
        clock: ClockPort,
    ):
        self.video_api = video_api
        self.repo = repository
        self.clock = clock

    def refresh_all(self) -> RefreshSummary:
        """
        저장된 모든 레코드에 현재 조회수 샘플을 하나씩 추가한다.
        레코드 단위로 실패를 격리하므로 한 영상의 실패가 나머지 영상 갱신을 막지 않으며,
        같은 실행 안에서 재시도하지 않는다.
        레코드 목록 조회 자체가 실패하면 StoreError 가 그대로 전파된다.
        """
        summary = RefreshSummary()
        for record in self.repo.find_all():
            summary.results.append(self._refresh_one(record))
        return summary

    def _refresh_one(self, record: VideoRecord) -> RefreshResult:
        try:
            stats = self.video_api.fetch_stats(record.video_id)
            sample = ViewSample(sampled_at=self.clock.now(), view_count=stats.view_count)
            self.repo.append_sample(record, sample)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("view refresh failed | video_id=%s, error=%s", record.video_id, exc)
            return RefreshResult(video_id=record.video_id, ok=False, error=str(exc))
        return RefreshResult(video_id=record.video_id, ok=True, view_count=stats.view_count)

import logging

from video.application.port.clock_port import ClockPort
from video.application.port.video_api_port import VideoApiPort
from video.application.port.video_record_repository_port import VideoRecordRepositoryPort
from video.domain.period import one_year_before
from video.domain.video_history import VideoHistory
from video.domain.video_record import ViewSample

logger = logging.getLogger(__name__)


class VideoHistoryUseCase:
    def __init__(
        self,
        video_api: VideoApiPort,
        repository: VideoRecordRepositoryPort,
        clock: ClockPort,
    ):
        self.video_api = video_api
        self.repo = repository
        self.clock = clock

    def get_video_history(self, title: str) -> VideoHistory:
        """
        제목으로 video_id 를 찾고, 저장된 레코드가 없으면 현재 조회수를 시드 샘플로 하여 새로 만든다.
        반환값에는 최근 1년 이내의 샘플만 포함된다.

        제목 -> video_id 조회는 매 호출마다 수행하며, 조회수 fetch 는 최초 조회 시에만 발생한다.
        외부 API/저장소 오류는 복구하지 않고 그대로 호출자에게 전달한다.
        """
        video_id = self.video_api.resolve_video_id_by_title(title)
        record = self.repo.find_by_video_id(video_id)

        if record is None:
            stats = self.video_api.fetch_stats(video_id)
            seed = ViewSample(sampled_at=self.clock.now(), view_count=stats.view_count)
            record = self.repo.create(video_id, stats.title, seed)
            logger.info("created video record | video_id=%s, title=%s", video_id, stats.title)
        else:
            logger.debug("video record already stored | title=%s, video_id=%s", title, video_id)

        since = one_year_before(self.clock.now())
        return VideoHistory(
            video_id=record.video_id,
            title=record.title,
            stats=record.samples_since(since),
        )

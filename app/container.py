from dataclasses import dataclass, field

from sqlalchemy.engine import Engine

from config.database.session import create_db_engine, create_session_factory
from config.settings import BatchSettings, DatabaseSettings, YouTubeSettings
from video.application.port.clock_port import ClockPort
from video.application.usecase.video_history_usecase import VideoHistoryUseCase
from video.application.usecase.view_refresh_usecase import ViewRefreshUseCase
from video.infrastructure.client.youtube_client import YouTubeClient
from video.infrastructure.clock.system_clock import SystemClock
from video.infrastructure.repository.video_record_repository_impl import VideoRecordRepositoryImpl


@dataclass
class AppContainer:
    """
    프로세스 기동 시 한 번 구성되어 요청 핸들러와 배치에 주입되는 서비스 묶음입니다.
    """
    video_history_usecase: VideoHistoryUseCase
    view_refresh_usecase: ViewRefreshUseCase
    clock: ClockPort
    batch_settings: BatchSettings = field(default_factory=BatchSettings)
    engine: Engine | None = None

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


def build_container(
    youtube_settings: YouTubeSettings | None = None,
    database_settings: DatabaseSettings | None = None,
    batch_settings: BatchSettings | None = None,
) -> AppContainer:
    engine = create_db_engine(database_settings or DatabaseSettings())
    repository = VideoRecordRepositoryImpl(create_session_factory(engine))
    client = YouTubeClient(youtube_settings or YouTubeSettings())
    clock = SystemClock()
    return AppContainer(
        video_history_usecase=VideoHistoryUseCase(client, repository, clock),
        view_refresh_usecase=ViewRefreshUseCase(client, repository, clock),
        clock=clock,
        batch_settings=batch_settings or BatchSettings(),
        engine=engine,
    )

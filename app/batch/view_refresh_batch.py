import asyncio
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable

from video.application.port.clock_port import ClockPort
from video.application.usecase.view_refresh_usecase import RefreshSummary, ViewRefreshUseCase

logger = logging.getLogger(__name__)


def next_run_after(now: datetime, minute: int = 0) -> datetime:
    """
    now 이후 처음 돌아오는 '매 시 minute 분' 시각. 정각에 호출되면 다음 시간으로 넘긴다.
    """
    next_run = now.replace(minute=minute, second=0, microsecond=0)
    if next_run <= now:
        next_run += timedelta(hours=1)
    return next_run


async def run_view_refresh_batch_once(usecase: ViewRefreshUseCase) -> RefreshSummary | None:
    """
    조회수 갱신 배치의 단일 실행 진입점.
    동기 DB/외부 API 호출이 이벤트 루프를 막지 않도록 워커 스레드에서 실행한다.
    """
    logger.info("[VIEW-REFRESH-BATCH] run started")
    try:
        summary = await asyncio.to_thread(usecase.refresh_all)
    except Exception as exc:  # pylint: disable=broad-except
        # 레코드 목록 조회 실패 등 배치 전체 실패도 다음 주기에는 다시 실행되도록 예외를 삼킨다.
        logger.error("[VIEW-REFRESH-BATCH] run failed: %s", exc)
        return None

    logger.info(
        "[VIEW-REFRESH-BATCH] run finished | total=%d, succeeded=%d, failed=%d",
        summary.total,
        summary.succeeded,
        summary.failed,
    )
    if summary.failed:
        logger.warning("[VIEW-REFRESH-BATCH] failed video_ids=%s", summary.failed_video_ids())
    return summary


async def start_view_refresh_scheduler(
    usecase: ViewRefreshUseCase,
    clock: ClockPort,
    minute: int = 0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> None:
    """
    매 시 minute 분(기본 정각)마다 run_view_refresh_batch_once 를 실행하는 asyncio 스케줄러.

    - 각 실행은 별도 태스크로 띄우므로, 이전 실행이 끝나지 않아도 다음 실행이 겹쳐 시작될 수 있다.
    - 애플리케이션 종료 시 lifespan 에서 취소되며, 진행 중인 실행도 함께 취소한다.
    """
    logger.info("[VIEW-REFRESH-BATCH] scheduler started | minute=%d", minute)
    in_flight: set[asyncio.Task] = set()
    next_run = next_run_after(clock.now(), minute)
    try:
        while True:
            # sleep 은 monotonic 시계 기준이므로 벽시계가 목표 시각에 도달할 때까지 다시 잔다.
            now = clock.now()
            while now < next_run:
                await sleep((next_run - now).total_seconds())
                now = clock.now()

            task = asyncio.create_task(run_view_refresh_batch_once(usecase))
            in_flight.add(task)
            task.add_done_callback(in_flight.discard)

            # 목표 시각 기준으로 한 시간씩 진행하고, 놓친 시각은 건너뛴다.
            next_run += timedelta(hours=1)
            if next_run <= now:
                next_run = next_run_after(now, minute)
    except asyncio.CancelledError:
        for task in list(in_flight):
            task.cancel()
        logger.info("[VIEW-REFRESH-BATCH] scheduler stopped")
        raise


if __name__ == "__main__":
    # 수동 실행: python -m app.batch.view_refresh_batch
    from app.container import build_container
    from config.database.session import init_db_schema
    from config.logging_config import setup_logging
    from config.settings import AppSettings

    setup_logging(AppSettings().log_level)
    container = build_container()
    init_db_schema(container.engine)
    try:
        asyncio.run(run_view_refresh_batch_once(container.view_refresh_usecase))
    finally:
        container.close()

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.batch.view_refresh_batch import start_view_refresh_scheduler
from app.container import AppContainer, build_container
from config.database.session import init_db_schema
from config.logging_config import setup_logging
from config.settings import AppSettings
from video.adapter.input.web.video_router import video_router

logger = logging.getLogger(__name__)


def create_app(container: AppContainer | None = None, settings: AppSettings | None = None) -> FastAPI:
    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        FastAPI lifespan 훅을 활용해 서비스 구성, 스키마 생성, 배치 태스크를 관리합니다.
        """
        if container is None:
            setup_logging(settings.log_level)
        app.state.container = container or build_container()
        if app.state.container.engine is not None:
            # DB 스키마 미존재 시 자동 생성하여 UndefinedTable 오류를 예방합니다.
            init_db_schema(app.state.container.engine)

        batch_settings = app.state.container.batch_settings
        app.state.refresh_task = None
        if batch_settings.enable_view_refresh:
            app.state.refresh_task = asyncio.create_task(
                start_view_refresh_scheduler(
                    app.state.container.view_refresh_usecase,
                    app.state.container.clock,
                    minute=batch_settings.view_refresh_minute,
                )
            )
        try:
            yield
        finally:
            task = getattr(app.state, "refresh_task", None)
            if task:
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
            app.state.container.close()

    app = FastAPI(title="View Tracker Server", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(video_router, prefix="/video")

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """
        헬스체크 엔드포인트입니다.
        """
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    app_settings = AppSettings()
    setup_logging(app_settings.log_level)
    logger.info("Server starting at http://%s:%d", app_settings.host, app_settings.port)
    uvicorn.run(app, host=app_settings.host, port=app_settings.port)

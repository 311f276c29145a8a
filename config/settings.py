import os
import urllib.parse
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _default_database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    # SQL_USER, SQL_PASSWORD, SQL_HOST, SQL_PORT, SQL_DATABASE
    password = urllib.parse.quote_plus(os.getenv("SQL_PASSWORD", ""))
    return (
        f"postgresql+psycopg2://{os.getenv('SQL_USER', 'postgres')}:{password}"
        f"@{os.getenv('SQL_HOST', 'localhost')}:{os.getenv('SQL_PORT', '5432')}"
        f"/{os.getenv('SQL_DATABASE', 'view_tracker')}"
    )


def _default_cors_origins() -> list[str]:
    origins_env = os.getenv("CORS_ORIGINS")
    if not origins_env:
        return ["http://localhost:3000"]
    return [origin for origin in origins_env.split(",") if origin]


@dataclass
class AppSettings:
    host: str = field(default_factory=lambda: os.getenv("APP_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("APP_PORT", "8000")))
    cors_origins: list[str] = field(default_factory=_default_cors_origins)
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@dataclass
class YouTubeSettings:
    api_key: str = field(default_factory=lambda: os.getenv("YOUTUBE_API_KEY", ""))
    request_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("YOUTUBE_REQUEST_TIMEOUT_SECONDS", "10"))
    )


@dataclass
class DatabaseSettings:
    url: str = field(default_factory=_default_database_url)
    echo: bool = field(default_factory=lambda: _env_flag("SQL_ECHO", "false"))


@dataclass
class BatchSettings:
    enable_view_refresh: bool = field(
        default_factory=lambda: _env_flag("ENABLE_VIEW_REFRESH_BATCH", "true")
    )
    # 매 시간 이 분(minute)에 조회수 갱신 배치를 실행합니다.
    view_refresh_minute: int = field(
        default_factory=lambda: int(os.getenv("VIEW_REFRESH_MINUTE", "0"))
    )

    def __post_init__(self):
        if not 0 <= self.view_refresh_minute <= 59:
            raise ValueError(
                f"VIEW_REFRESH_MINUTE must be between 0 and 59, got {self.view_refresh_minute}"
            )

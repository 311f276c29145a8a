import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from config.database.session import create_session_factory, init_db_schema
from tests.fakes import FakeVideoApi, FixedClock
from video.infrastructure.repository.video_record_repository_impl import VideoRecordRepositoryImpl


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def video_api() -> FakeVideoApi:
    return FakeVideoApi()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine) -> VideoRecordRepositoryImpl:
    return VideoRecordRepositoryImpl(create_session_factory(engine))

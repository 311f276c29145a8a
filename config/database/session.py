from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import DatabaseSettings

Base = declarative_base()


def create_db_engine(settings: DatabaseSettings) -> Engine:
    # PostgreSQL(psycopg2) 접속 문자열을 기본으로 사용하며, 테스트에서는 sqlite URL 도 허용합니다.
    return create_engine(
        settings.url,
        echo=settings.echo,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db_schema(engine: Engine) -> None:
    """
    애플리케이션 기동 시 테이블이 없을 경우를 대비해 스키마를 생성합니다.
    """
    # ORM 모델이 Base.metadata 에 등록되도록 임포트합니다.
    from video.infrastructure.orm import models  # noqa: F401

    Base.metadata.create_all(bind=engine)

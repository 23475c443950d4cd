import os

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    options: dict = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url or url == "sqlite://":
        # Una única conexión compartida, si no cada hilo vería su propia BDD vacía.
        options["poolclass"] = StaticPool
    return options


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()


def init_db() -> None:
    from infrastructure.sqlalchemy.model import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_session() -> Session:
    return SessionLocal()

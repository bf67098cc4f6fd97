"""Database engine, session factory and declarative base."""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # FastAPI serves sync endpoints from a threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def _make_sqlite_transactional(sqlite_engine) -> None:
    """pysqlite commits before DDL on its own; let SQLAlchemy emit BEGIN instead."""

    @event.listens_for(sqlite_engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(sqlite_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
if engine.dialect.name == "sqlite":
    _make_sqlite_transactional(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency yielding one session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create tables that don't exist yet."""
    from ..models import car_model, customization_model  # noqa: F401

    Base.metadata.create_all(bind=engine)

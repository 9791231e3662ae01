from typing import Any, Dict

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from formbuilder_core.app.config import settings


def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


def make_engine(url: str) -> Engine:
    kwargs: Dict[str, Any] = {"pool_pre_ping": True}
    if is_sqlite_url(url):
        # Sessions are handed across FastAPI's worker threads
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = settings.DB_SESSION_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_SESSION_POOL_MAX_OVERFLOW_SIZE
    engine = create_engine(url, **kwargs)
    if is_sqlite_url(url):
        # SQLite leaves ON DELETE CASCADE unenforced unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = make_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
ReadSessionLocal = SessionLocal

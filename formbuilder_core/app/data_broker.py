from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.orm import Session, sessionmaker

from formbuilder_core.db.session import ReadSessionLocal, SessionLocal


# Data broker hands out database sessions to the service layer.
# Every session it opens goes back to the pool when the block exits.
class DataBroker(object):
    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        read_session_factory: Optional[sessionmaker] = None,
    ) -> None:
        self.session_factory = session_factory or SessionLocal
        self.read_session_factory = (
            read_session_factory or session_factory or ReadSessionLocal
        )

    @contextmanager
    def read_session(self) -> Iterator[Session]:
        db = self.read_session_factory()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

# books/sa/database.py
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool

from books.config import Config
from books.errors import StorageError
from books.sa.models import Base

logger = logging.getLogger(__name__)

def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()

class Database:
    def __init__(self, db_path: Union[str, Path], **engine_kwargs):
        """Initialize database connection

        Args:
            db_path: Path to the SQLite database file
            engine_kwargs: Additional keyword arguments to pass to create_engine
        """
        self.db_path = Path(db_path)

        # One connection per session, opened and closed with it
        engine_kwargs.setdefault("poolclass", NullPool)
        engine_kwargs.setdefault("echo", False)  # Set to True to see SQL queries

        self.engine = create_engine(f"sqlite:///{self.db_path}", **engine_kwargs)
        event.listen(self.engine, "connect", _enable_foreign_keys)

        # Create sessionmaker
        self._SessionFactory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False
        )

    @classmethod
    def from_config(cls, config: Config) -> "Database":
        """Create a database for the configured storage directory, creating it if needed"""
        return cls(config.ensure_storage())

    @contextmanager
    def get_db(self) -> Iterator[Session]:
        """Context manager for a unit of work.

        Commits when the block finishes, rolls back if it raises. Storage
        errors surfacing from the commit itself are wrapped in StorageError.
        """
        session: Session = self._SessionFactory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(str(e)) from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self) -> None:
        """Initialize database schema. Safe to call on an existing store."""
        logger.info("Initialising schema in %s", self.db_path)
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not initialise database at {self.db_path}: {e}") from e

    def get_session(self) -> Session:
        return self._SessionFactory()

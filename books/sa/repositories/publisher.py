# books/sa/repositories/publisher.py
import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from books.errors import StorageError
from books.models import book as entities
from ..models import Publisher

logger = logging.getLogger(__name__)

class PublisherRepository:
    """Repository for the shared, append-only publisher rows."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_name(self, name: str) -> Optional[entities.Publisher]:
        """Get a publisher by its exact name"""
        row = self.session.execute(
            select(Publisher).where(Publisher.name == name)
        ).scalar_one_or_none()
        return entities.Publisher.model_validate(row) if row else None

    def upsert(self, name: str) -> int:
        """Insert the publisher unless one with this name exists.

        Args:
            name: Publisher name, matched exactly

        Returns:
            The id of the new or already stored publisher
        """
        try:
            self.session.execute(
                insert(Publisher)
                .values(name=name)
                .on_conflict_do_nothing(index_elements=['name'])
            )
            publisher_id = self.session.execute(
                select(Publisher.id).where(Publisher.name == name)
            ).scalar_one()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not save publisher '{name}': {e}") from e

        logger.debug("Publisher '%s' resolved to id %s", name, publisher_id)
        return publisher_id

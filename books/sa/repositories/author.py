# books/sa/repositories/author.py
import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from books.errors import StorageError
from books.models import book as entities
from ..models import Author

logger = logging.getLogger(__name__)

class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_name(self, forename: str, surname: str) -> Optional[entities.Author]:
        """Get an author by exact forename and surname"""
        row = self.session.execute(
            select(Author).where(Author.forename == forename, Author.surname == surname)
        ).scalar_one_or_none()
        return entities.Author.model_validate(row) if row else None

    def upsert(self, forename: str, surname: str) -> int:
        """Insert the author unless the (forename, surname) pair is already stored.

        Returns:
            The id of the new or already stored author
        """
        try:
            self.session.execute(
                insert(Author)
                .values(forename=forename, surname=surname)
                .on_conflict_do_nothing(index_elements=['forename', 'surname'])
            )
            author_id = self.session.execute(
                select(Author.id).where(Author.forename == forename, Author.surname == surname)
            ).scalar_one()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not save author '{surname}, {forename}': {e}") from e

        logger.debug("Author '%s, %s' resolved to id %s", surname, forename, author_id)
        return author_id

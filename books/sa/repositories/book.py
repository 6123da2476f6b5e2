# books/sa/repositories/book.py
import logging
from typing import List, Optional
from sqlalchemy import insert, literal_column, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from books.errors import DuplicateBookError, NotFoundError, StorageError
from books.models import book as entities
from ..models import Author, Book, books_authors

logger = logging.getLogger(__name__)

TITLE_EDITION_CONFLICT = "UNIQUE constraint failed: books.title, books.edition"

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def save(self, book: entities.Book) -> int:
        """Insert a book and link it to its authors.

        The publisher and every author must already carry an id; resolving
        them is the caller's job (see BookCreator).

        Args:
            book: Book whose related entities have been persisted

        Returns:
            The id assigned to the new book

        Raises:
            DuplicateBookError: If a book with the same title and edition exists
            StorageError: For any other storage failure
        """
        if book.publisher.id is None:
            raise ValueError(f"Publisher '{book.publisher.name}' has not been saved")
        unsaved = [author.display_name for author in book.authors if author.id is None]
        if unsaved:
            raise ValueError(f"Authors have not been saved: {'; '.join(unsaved)}")

        row = Book(
            publisher_id=book.publisher.id,
            title=book.title,
            edition=book.edition,
            date_published=book.date_published,
            original_date_published=book.original_date_published,
            price=book.price,
            binding=book.binding,
            isbn=book.isbn,
            pages=book.pages,
            owned=int(book.owned),
        )

        try:
            self.session.add(row)
            self.session.flush()
            # Insertion order of the link rows is the author order
            self.session.execute(
                insert(books_authors),
                [{'book_id': row.id, 'author_id': author.id} for author in book.authors]
            )
        except IntegrityError as e:
            if TITLE_EDITION_CONFLICT in str(e.orig):
                raise DuplicateBookError(book.title, book.edition) from e
            raise StorageError(f"Could not save book '{book.title}': {e}") from e
        except SQLAlchemyError as e:
            raise StorageError(f"Could not save book '{book.title}': {e}") from e

        logger.debug("Saved book '%s' (%s) with id %s", book.title, book.edition, row.id)
        return row.id

    def get_by_id(self, book_id: int) -> entities.Book:
        """Get a book with its publisher and authors.

        Raises:
            NotFoundError: If no book has this id
        """
        try:
            row = self.session.execute(
                select(Book)
                .options(joinedload(Book.publisher))
                .where(Book.id == book_id)
            ).scalar_one_or_none()
            if row is None:
                raise NotFoundError(book_id)
            authors = self._get_authors(book_id)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not load book {book_id}: {e}") from e

        return self._to_entity(row, authors)

    def get_by_title_and_edition(self, title: str, edition: str) -> Optional[entities.Book]:
        """Get a book by its (title, edition) natural key, or None"""
        try:
            book_id = self.session.execute(
                select(Book.id).where(Book.title == title, Book.edition == edition)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not look up book '{title}': {e}") from e
        return self.get_by_id(book_id) if book_id is not None else None

    def _get_authors(self, book_id: int) -> List[Author]:
        return list(
            self.session.execute(
                select(Author)
                .join(books_authors, books_authors.c.author_id == Author.id)
                .where(books_authors.c.book_id == book_id)
                .order_by(literal_column('books_authors.rowid'))
            ).scalars().all()
        )

    def _to_entity(self, row: Book, authors: List[Author]) -> entities.Book:
        if row.publisher is None:
            raise StorageError(f"Book {row.id} has no publisher")

        return entities.Book(
            id=row.id,
            authors=[entities.Author.model_validate(author) for author in authors],
            publisher=entities.Publisher.model_validate(row.publisher),
            title=row.title,
            edition=row.edition,
            date_published=row.date_published,
            original_date_published=row.original_date_published,
            price=row.price,
            binding=row.binding,
            isbn=row.isbn,
            pages=row.pages,
            owned=bool(row.owned),
        )

# books/resolvers/book_creator.py
import logging
from sqlalchemy.orm import Session

from ..models.book import AddBookModel, Book
from ..sa.repositories import AuthorRepository, BookRepository, PublisherRepository

logger = logging.getLogger(__name__)

class BookCreator:
    """Creates book records, resolving publisher and authors on the way."""

    def __init__(self, session: Session):
        """
        Initialize the book creator.

        Args:
            session: SQLAlchemy session. Everything add_book writes goes
                through it, so the caller decides when it is committed.
        """
        self.session = session
        self.book_repository = BookRepository(session)
        self.author_repository = AuthorRepository(session)
        self.publisher_repository = PublisherRepository(session)

    def add_book(self, model: AddBookModel) -> Book:
        """
        Persist the book described by an edited model.

        Publisher and authors are upserted by their natural keys before the
        book row is inserted, so books by the same author share one row.

        Args:
            model: Book details as fetched or edited

        Returns:
            The saved book with the ids of all its entities filled in

        Raises:
            ParseError: If the authors or publisher cannot be parsed
            DuplicateBookError: If the title and edition are already stored
        """
        book = Book.from_add_book_model(model)

        publisher = book.publisher.with_id(
            self.publisher_repository.upsert(book.publisher.name)
        )
        authors = [
            author.with_id(self.author_repository.upsert(author.forename, author.surname))
            for author in book.authors
        ]
        book = book.model_copy(update={'publisher': publisher, 'authors': authors})

        book_id = self.book_repository.save(book)
        logger.info(f"Added book {book_id}: {book.title}")
        return book.model_copy(update={'id': book_id})

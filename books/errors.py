# books/errors.py
from typing import Optional


class BooksError(Exception):
    """Base class for all errors raised by the books package"""
    pass


class ConfigError(BooksError):
    """A required setting could not be obtained"""
    pass


class StorageError(BooksError):
    """Failure reported by the persistence layer"""
    pass


class DuplicateBookError(StorageError):
    """A book with the same title and edition is already stored"""

    def __init__(self, title: str, edition: Optional[str]):
        self.title = title
        self.edition = edition
        super().__init__(f"A book titled '{title}' ({edition} edition) already exists")


class ParseError(BooksError, ValueError):
    """Editable text or intermediate model could not be parsed.

    The name of the offending field is kept in ``field`` so the user can be
    pointed at the line they need to fix.
    """

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Could not parse {field}")


class FetchError(BooksError):
    """The bibliographic record could not be retrieved"""
    pass


class NotFoundError(BooksError, LookupError):
    """No book is stored under the requested identifier"""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"No book found with id {book_id}")

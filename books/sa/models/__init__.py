# books/sa/models/__init__.py
from .base import Base
from .publisher import Publisher
from .author import Author
from .book import Book, books_authors

__all__ = [
    'Base',
    'Publisher',
    'Author',
    'Book',
    'books_authors'
]

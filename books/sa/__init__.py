# books/sa/__init__.py
from .database import Database
from .models import Base, Book, Author, Publisher, books_authors

__all__ = [
    'Database',
    'Base',
    'Book',
    'Author',
    'Publisher',
    'books_authors'
]

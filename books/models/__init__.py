# books/models/__init__.py
from .isbndb import IsbnDbBook
from .book import AddBookModel, Author, Book, Publisher, parse_authors

__all__ = [
    'IsbnDbBook',
    'AddBookModel',
    'Author',
    'Book',
    'Publisher',
    'parse_authors'
]

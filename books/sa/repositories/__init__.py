# books/sa/repositories/__init__.py
from .book import BookRepository
from .author import AuthorRepository
from .publisher import PublisherRepository

__all__ = ['BookRepository', 'AuthorRepository', 'PublisherRepository']

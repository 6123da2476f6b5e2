# books/sa/models/book.py
from sqlalchemy import Column, DECIMAL, ForeignKey, Integer, Table, Text, UniqueConstraint, text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

# Plain join table; the on-disk layout has no primary key here
books_authors = Table(
    'books_authors',
    Base.metadata,
    Column('book_id', Integer, ForeignKey('books.id')),
    Column('author_id', Integer, ForeignKey('authors.id')),
)

class Book(Base):
    __tablename__ = 'books'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    publisher_id: Mapped[int | None] = mapped_column(Integer, ForeignKey('publishers.id'), nullable=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    edition: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_published: Mapped[str] = mapped_column(Text, nullable=False)
    original_date_published: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float | None] = mapped_column(DECIMAL(asdecimal=False), nullable=True)
    binding: Mapped[str] = mapped_column(Text, nullable=False)
    isbn: Mapped[str] = mapped_column(Text, nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text('0'))
    # Stored as 0/1 in an INTEGER column
    owned: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text('0'))

    # Relationships
    publisher = relationship('Publisher', back_populates='books')

    # Convenience relationship; unordered, use BookRepository for author order
    authors = relationship('Author', secondary=books_authors, viewonly=True)

    __table_args__ = (
        UniqueConstraint('title', 'edition'),

        {'sqlite_autoincrement': True},
    )

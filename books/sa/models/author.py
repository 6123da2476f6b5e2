# books/sa/models/author.py
from sqlalchemy import Integer, Text, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Author(Base):
    __tablename__ = 'authors'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    forename: Mapped[str] = mapped_column(Text, nullable=False)
    surname: Mapped[str] = mapped_column(Text, nullable=False)

    # Convenience relationship
    books = relationship('Book', secondary='books_authors', viewonly=True)

    __table_args__ = (
        # Natural key used for deduplication
        UniqueConstraint('forename', 'surname'),

        {'sqlite_autoincrement': True},
    )

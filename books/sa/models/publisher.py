# books/sa/models/publisher.py
from sqlalchemy import Integer, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Publisher(Base):
    __tablename__ = 'publishers'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    # Relationships
    books = relationship('Book', back_populates='publisher')

    __table_args__ = (
        {'sqlite_autoincrement': True},
    )

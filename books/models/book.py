# books/models/book.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple

from ..errors import ParseError
from .isbndb import IsbnDbBook

FIRST_EDITION = "1st"

class AddBookModel(BaseModel):
    """Editable book details, before authors and publisher are resolved.

    ``authors`` holds ``"Surname, Forename"`` pairs separated by semicolons,
    exactly as the user sees and edits them.
    """
    authors: str
    publisher: str
    title: str
    edition: str
    date_published: str
    original_date_published: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    binding: str
    isbn: str
    pages: int = Field(ge=0)
    owned: bool = True

    @classmethod
    def from_isbndb_book(cls, record: IsbnDbBook) -> "AddBookModel":
        """Build the editable model from a fetched ISBNdb record.

        A first edition's publication date is taken as the original one; any
        other edition needs it entered by hand. Price is never taken from the
        record because the list price is not what was paid.
        """
        if record.edition == FIRST_EDITION:
            original_date_published = record.date_published
        else:
            original_date_published = None

        return cls(
            authors="; ".join(record.authors),
            publisher=record.publisher,
            title=record.title_long,
            edition=record.edition,
            date_published=record.date_published,
            original_date_published=original_date_published,
            price=None,
            binding=record.binding,
            isbn=record.isbn13,
            pages=record.pages,
            owned=True,
        )

    def summary_rows(self) -> List[Tuple[str, str]]:
        return [
            ("Title", self.title),
            ("Author(s)", self.authors),
            ("Edition", self.edition),
            ("Date Published", self.date_published),
            ("Binding", self.binding),
            ("ISBN", self.isbn),
            ("Pages", str(self.pages)),
            ("Owned", "true" if self.owned else "false"),
        ]

class Publisher(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: Optional[int] = None
    name: str

    def with_id(self, id: int) -> "Publisher":
        return self.model_copy(update={"id": id})

class Author(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: Optional[int] = None
    forename: str
    surname: str

    def with_id(self, id: int) -> "Author":
        return self.model_copy(update={"id": id})

    @property
    def display_name(self) -> str:
        return f"{self.surname}, {self.forename}"

def parse_authors(authors: str) -> List[Author]:
    """Split ``"Surname, Forename; ..."`` into unsaved authors, keeping order"""
    parsed = []
    for part in authors.split(";"):
        part = part.strip()
        if not part:
            continue
        surname, sep, forename = part.partition(",")
        if not sep:
            raise ParseError("authors", f"Author '{part}' is not in 'Surname, Forename' form")
        parsed.append(Author(forename=forename.strip(), surname=surname.strip()))

    if not parsed:
        raise ParseError("authors", "At least one author is required")
    return parsed

class Book(BaseModel):
    """A book together with its publisher and authors.

    ``id`` and the ids of the related entities stay ``None`` until the book
    has been persisted.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: Optional[int] = None
    authors: List[Author] = Field(min_length=1)
    publisher: Publisher
    title: str
    edition: str
    date_published: str
    original_date_published: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    binding: str
    isbn: str
    pages: int = Field(ge=0)
    owned: bool

    @classmethod
    def from_add_book_model(cls, model: AddBookModel) -> "Book":
        publisher_name = model.publisher.strip()
        if not publisher_name:
            raise ParseError("publisher", "A publisher is required")

        return cls(
            authors=parse_authors(model.authors),
            publisher=Publisher(name=publisher_name),
            title=model.title,
            edition=model.edition,
            date_published=model.date_published,
            original_date_published=model.original_date_published,
            price=model.price,
            binding=model.binding,
            isbn=model.isbn,
            pages=model.pages,
            owned=model.owned,
        )

    def detail_rows(self) -> List[Tuple[str, str]]:
        return [
            ("Id", str(self.id) if self.id is not None else ""),
            ("Title", self.title),
            ("Author(s)", "; ".join(author.display_name for author in self.authors)),
            ("Publisher", self.publisher.name),
            ("Edition", self.edition),
            ("Date Published", self.date_published),
            ("Original Date Published", self.original_date_published or ""),
            ("Price", "" if self.price is None else str(self.price)),
            ("Binding", self.binding),
            ("ISBN", self.isbn),
            ("Pages", str(self.pages)),
            ("Owned", "true" if self.owned else "false"),
        ]

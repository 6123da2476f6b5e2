# books/models/isbndb.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple

class IsbnDbBook(BaseModel):
    """Book record as returned by the ISBNdb ``/book/{isbn}`` endpoint"""
    model_config = ConfigDict(populate_by_name=True)

    publisher: str
    language: str
    image_url: str = Field(alias="image")
    title_long: str
    edition: str
    dimensions: str
    pages: int = Field(ge=0)
    date_published: str
    authors: List[str]
    title: str
    isbn13: str
    msrp: float
    binding: str
    isbn: str
    isbn10: str
    subjects: Optional[List[str]] = None
    synopsis: Optional[str] = None

    def display_rows(self) -> List[Tuple[str, str]]:
        """Labelled rows shown by ``books get``"""
        rows = [("Title", self.title)]
        if self.title_long != self.title:
            rows.append(("Title (Long)", self.title_long))
        rows.extend([
            ("Author(s)", "; ".join(self.authors)),
            ("Date Published", self.date_published),
            ("Binding", self.binding),
            ("Edition", self.edition),
            ("Pages", str(self.pages)),
            ("Publisher", self.publisher),
            ("Language", self.language),
            ("Subjects", ", ".join(self.subjects) if self.subjects else "N/A"),
            ("Synopsis", self.synopsis or "N/A"),
            ("MSRP", f"{self.msrp:g}"),
            ("ISBN13", self.isbn13),
            ("ISBN", self.isbn),
            ("ISBN10", self.isbn10),
            ("Dimensions", self.dimensions),
        ])
        return rows

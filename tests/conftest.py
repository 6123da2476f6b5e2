# tests/conftest.py
import json
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from books.models.book import AddBookModel
from books.models.isbndb import IsbnDbBook
from books.sa.database import Database

FIXTURES_DIR = Path(__file__).parent / 'fixtures'

def load_fixture(name: str) -> dict:
    with open(FIXTURES_DIR / name, 'r', encoding='utf-8') as f:
        return json.load(f)

@pytest.fixture
def db_path(tmp_path):
    """Path of a fresh SQLite file for each test"""
    return tmp_path / "books.db"

@pytest.fixture
def database(db_path):
    """Create a test database with the schema in place"""
    db = Database(db_path)
    db.init_db()
    yield db
    db.engine.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def single_author_response():
    return load_fixture('book_response_body.json')

@pytest.fixture
def multiple_authors_response():
    return load_fixture('book_with_multiple_authors_and_optional_fields_response_body.json')

@pytest.fixture
def single_author_record(single_author_response):
    return IsbnDbBook.model_validate(single_author_response['book'])

@pytest.fixture
def multiple_authors_record(multiple_authors_response):
    return IsbnDbBook.model_validate(multiple_authors_response['book'])

@pytest.fixture
def single_author_model():
    """Edited model for The New Jackals, with the fields ISBNdb cannot supply filled in"""
    return AddBookModel(
        authors="Reeve, Simon",
        publisher="Carlton Publishing Group",
        title="The New Jackals: Osama Bin Laden and the Future of Terrorism",
        edition="2nd",
        date_published="2001",
        original_date_published="1999",
        price=20.0,
        binding="Paperback",
        isbn="9780233050485",
        pages=352,
        owned=True,
    )

@pytest.fixture
def multiple_authors_model():
    return AddBookModel(
        authors="Dwyer, Jim; Murphy, Deidre; Tyre, Peg; Kocieniewski, David",
        publisher="Crown",
        title="Two Seconds Under the World:Terror Comes to America-The Conspiracy Behind the World Trade Center Bombing",
        edition="1st",
        date_published="1997",
        original_date_published=None,
        price=20.0,
        binding="Hardcover",
        isbn="9780517597675",
        pages=322,
        owned=True,
    )

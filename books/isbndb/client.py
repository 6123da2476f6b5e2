# books/isbndb/client.py
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from books.config import Config
from books.errors import FetchError
from books.models.isbndb import IsbnDbBook

logger = logging.getLogger(__name__)

class IsbnDbClient:
    """Looks books up on the ISBNdb REST API"""

    def __init__(self, base_url: str, api_key: str, timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: Config) -> "IsbnDbClient":
        return cls(config.isbndb_url, config.isbndb_key, timeout=config.timeout)

    def get_book_by_isbn(self, isbn: str) -> IsbnDbBook:
        """
        Fetch the ISBNdb record for a book.

        Args:
            isbn: ISBN-10 or ISBN-13 of the book

        Returns:
            The validated record

        Raises:
            FetchError: If the request fails or the response lacks a required field
        """
        url = f"{self.base_url}/book/{isbn}"
        headers = {
            'accept': 'application/json',
            'Authorization': self.api_key,
        }

        logger.info(f"Fetching ISBNdb record: {url}")
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.warning(f"ISBNdb request failed for {isbn}: {e}")
            raise FetchError(f"Could not retrieve book {isbn} from ISBNdb: {e}") from e
        except ValueError as e:
            raise FetchError(f"ISBNdb returned a malformed response for {isbn}") from e

        record = payload.get('book') if isinstance(payload, dict) else None
        if not isinstance(record, dict):
            raise FetchError(f"ISBNdb response for {isbn} contains no book record")

        try:
            return IsbnDbBook.model_validate(record)
        except ValidationError as e:
            fields = ', '.join('.'.join(str(part) for part in error['loc']) for error in e.errors())
            raise FetchError(f"ISBNdb record for {isbn} is missing or has invalid fields: {fields}") from e

# books/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

import click

from .errors import ConfigError

ISBNDB_URL = "https://api2.isbndb.com"
ISBNDB_KEY_VAR = "ISBNDB_KEY"
DATABASE_FILENAME = "books.db"


def default_storage_path() -> Path:
    """Per-user data directory used when no storage path is given"""
    return Path(click.get_app_dir("books-db"))


@dataclass
class Config:
    """Settings handed to the core by whoever is driving it.

    Nothing below ``books.cli`` reads the process environment; the CLI builds
    one of these with ``from_env`` and passes it down.
    """
    isbndb_key: str
    storage_path: Path
    isbndb_url: str = ISBNDB_URL
    timeout: float = 10

    @classmethod
    def from_env(
        cls,
        storage_path: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        environ = os.environ if environ is None else environ
        key = environ.get(ISBNDB_KEY_VAR)
        if not key:
            raise ConfigError(
                "Could not obtain a key for the ISBNdb database. "
                f"Please set the {ISBNDB_KEY_VAR} variable to your key"
            )
        path = Path(storage_path) if storage_path else default_storage_path()
        return cls(isbndb_key=key, storage_path=path)

    @property
    def database_path(self) -> Path:
        return self.storage_path / DATABASE_FILENAME

    def ensure_storage(self) -> Path:
        """Create the storage directory if needed and return the database path"""
        self.storage_path.mkdir(parents=True, exist_ok=True)
        return self.database_path

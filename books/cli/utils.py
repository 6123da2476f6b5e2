# books/cli/utils.py
import textwrap
from contextlib import contextmanager
from typing import Iterator, List, Tuple
import click
from books.errors import BooksError, DuplicateBookError

WRAP_LENGTH = 80

def print_rows(rows: List[Tuple[str, str]]) -> None:
    """Print labelled values as an aligned two-column table, wrapping long values"""
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        lines = textwrap.wrap(value, WRAP_LENGTH) or ['']
        click.echo(click.style(label.ljust(width), fg='blue') + '  ' + lines[0])
        for line in lines[1:]:
            click.echo(' ' * (width + 2) + line)

@contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn domain errors into a clean CLI failure"""
    try:
        yield
    except DuplicateBookError as e:
        raise click.ClickException(f"This book already exists: {e.title} ({e.edition} edition)")
    except BooksError as e:
        raise click.ClickException(str(e))

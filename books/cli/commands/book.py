# books/cli/commands/book.py
import click
from books.config import Config
from books.isbndb.client import IsbnDbClient
from books.models.book import AddBookModel
from books.resolvers.book_creator import BookCreator
from books.sa.database import Database
from books.sa.repositories import BookRepository
from books.utils.editor_text import parse_editable, render_editable
from ..utils import print_rows, reporting_errors

@click.command()
@click.argument('isbn')
@click.pass_obj
def get(config: Config, isbn: str):
    """Get the ISBNdb record for a book

    This will print the record for the book on the ISBNdb without saving it
    to the local database.

    Example:
        books get 9780233050485
    """
    with reporting_errors():
        record = IsbnDbClient.from_config(config).get_book_by_isbn(isbn)
    print_rows(record.display_rows())

@click.command()
@click.argument('isbn')
@click.pass_obj
def add(config: Config, isbn: str):
    """Add a book to the database

    The record is fetched from ISBNdb and shown; it can be edited in your
    $EDITOR before it is saved.

    Example:
        books add 9780517597675
    """
    with reporting_errors():
        record = IsbnDbClient.from_config(config).get_book_by_isbn(isbn)
        model = AddBookModel.from_isbndb_book(record)

        click.echo(f"Retrieved book with ISBN {isbn}")
        print_rows(model.summary_rows())

        if click.confirm("Edit details before saving?"):
            # click.edit handles platform newlines itself
            edited = click.edit(render_editable(model, newline='\n'))
            if edited is not None:
                model = parse_editable(edited)

        db = Database.from_config(config)
        with db.get_db() as session:
            book = BookCreator(session).add_book(model)

    click.echo(click.style("Saved book to the database.", fg='green') +
               click.style(f" (id {book.id})", fg='cyan'))

@click.command()
@click.argument('book_id', type=int)
@click.pass_obj
def show(config: Config, book_id: int):
    """Show a saved book by its id

    Example:
        books show 1
    """
    with reporting_errors():
        db = Database.from_config(config)
        with db.get_db() as session:
            book = BookRepository(session).get_by_id(book_id)
    print_rows(book.detail_rows())

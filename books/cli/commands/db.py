# books/cli/commands/db.py
import click
from books.config import Config
from books.sa.database import Database
from ..utils import reporting_errors

@click.command()
@click.pass_obj
def init(config: Config):
    """Create the database schema"""
    with reporting_errors():
        db = Database.from_config(config)
        db.init_db()
    click.echo(click.style("Initialised database at ", fg='blue') +
               click.style(str(db.db_path), fg='cyan'))

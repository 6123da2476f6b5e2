# books/cli/main.py
import logging
import click
from books.config import Config
from books.errors import ConfigError
from .commands.book import add, get, show
from .commands.db import init

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

@click.group()
@click.option('--storage-path', type=click.Path(file_okay=False), default=None,
              help='Provide a custom directory for database storage')
@click.option('--verbose/--no-verbose', default=False, help='Show detailed logging output')
@click.pass_context
def cli(ctx, storage_path, verbose):
    """Catalogue your books using records from ISBNdb"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    try:
        ctx.obj = Config.from_env(storage_path)
    except ConfigError as e:
        raise click.ClickException(str(e))

cli.add_command(init)
cli.add_command(get)
cli.add_command(add)
cli.add_command(show)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()

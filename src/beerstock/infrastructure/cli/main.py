import click

from beerstock.infrastructure.cli.beer_commands import (
    beer_create,
    beer_delete,
    beer_increment,
    beer_list,
    beer_show,
)
from beerstock.infrastructure.config import get_settings
from beerstock.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """BeerStock: beer inventory"""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@cli.group()
def beer() -> None:
    """Manage beers."""


# Register subcommands
beer.add_command(beer_create)
beer.add_command(beer_delete)
beer.add_command(beer_increment)
beer.add_command(beer_list)
beer.add_command(beer_show)

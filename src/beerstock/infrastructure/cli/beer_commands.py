"""CLI commands for the beer inventory."""

from __future__ import annotations

import functools

import click

from beerstock.application.dto import BeerDTO
from beerstock.domain.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    DomainException,
    ValidationError,
)
from beerstock.domain.model.beer import BeerType
from beerstock.domain.result import unwrap
from beerstock.infrastructure.bootstrap import beer_service

# Exit codes per error kind; click itself uses 1 (generic) and 2 (usage).
EXIT_CONFLICT = 3
EXIT_NOT_FOUND = 4
EXIT_BAD_REQUEST = 5

_EXIT_CODES: dict[type[DomainException], int] = {
    BeerAlreadyRegisteredError: EXIT_CONFLICT,
    BeerNotFoundError: EXIT_NOT_FOUND,
    BeerStockExceededError: EXIT_BAD_REQUEST,
    ValidationError: EXIT_BAD_REQUEST,
}


def _fail(error: DomainException) -> click.ClickException:
    exc = click.ClickException(str(error))
    exc.exit_code = _EXIT_CODES.get(type(error), 1)
    return exc


def _domain_errors(command):
    """Turn any DomainException raised by *command* into a ClickException.

    Covers both error results passed to ``unwrap`` and invalid records
    coming back from the store.
    """

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except DomainException as exc:
            raise _fail(exc)

    return wrapper


def _display_table(beers: list[BeerDTO]) -> None:
    click.echo(f"{'ID':<6} {'Name':<20} {'Brand':<15} {'Type':<10} {'Qty':>5} {'Max':>5}")
    click.echo("-" * 66)
    for b in beers:
        click.echo(
            f"{b.id:<6} {b.name:<20} {b.brand:<15} {b.type:<10} {b.quantity:>5} {b.max:>5}"
        )


@click.command("create")
@click.option("--name", required=True, help="Beer name (must be unique).")
@click.option("--brand", default="", help="Brand.")
@click.option(
    "--type", "beer_type",
    type=click.Choice([t.value for t in BeerType], case_sensitive=False),
    default=BeerType.LAGER.value,
    show_default=True,
    help="Beer style.",
)
@click.option("--quantity", default=0, type=int, show_default=True, help="Stock on hand.")
@click.option("--max", "max_quantity", required=True, type=int, help="Stock capacity.")
@_domain_errors
def beer_create(name: str, brand: str, beer_type: str, quantity: int, max_quantity: int) -> None:
    """Register a new beer."""
    dto = unwrap(
        beer_service().create_beer(
            BeerDTO(name=name, brand=brand, type=beer_type, quantity=quantity, max=max_quantity)
        )
    )
    click.echo(f"Beer #{dto.id} '{dto.name}' created ({dto.quantity}/{dto.max})")


@click.command("show")
@click.option("--id", "beer_id", type=int, default=None, help="Beer ID.")
@click.option("--name", default=None, help="Beer name.")
@_domain_errors
def beer_show(beer_id: int | None, name: str | None) -> None:
    """Show a single beer, looked up by ID or by name."""
    if (beer_id is None) == (name is None):
        raise click.UsageError("Pass exactly one of --id or --name.")

    service = beer_service()
    if beer_id is not None:
        dto = unwrap(service.find_by_id(beer_id))
    else:
        dto = unwrap(service.find_by_name(name))

    _display_table([dto])


@click.command("list")
@_domain_errors
def beer_list() -> None:
    """List all beers."""
    beers = unwrap(beer_service().list_all())

    if not beers:
        click.echo("No beers found.")
        return

    _display_table(beers)


@click.command("delete")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID to delete.")
@_domain_errors
def beer_delete(beer_id: int) -> None:
    """Delete a beer."""
    unwrap(beer_service().delete_by_id(beer_id))
    click.echo(f"Beer #{beer_id} deleted.")


@click.command("increment")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@click.option(
    "--quantity", required=True, type=click.IntRange(min=0), help="Units to add."
)
@_domain_errors
def beer_increment(beer_id: int, quantity: int) -> None:
    """Add stock to a beer, up to its max."""
    dto = unwrap(beer_service().increment(beer_id, quantity))
    click.echo(f"Beer #{dto.id} '{dto.name}' stock is now {dto.quantity}/{dto.max}")

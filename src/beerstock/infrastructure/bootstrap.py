"""Composition root. Wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from beerstock.application.beer_service import BeerService
from beerstock.application.mapper import BeerMapper
from beerstock.infrastructure.config import get_settings
from beerstock.infrastructure.persistence.json_beer_repository import (
    JsonBeerRepository,
)


def beer_repository() -> JsonBeerRepository:
    return JsonBeerRepository(get_settings().data_file)


def beer_service() -> BeerService:
    return BeerService(beer_repository(), BeerMapper())

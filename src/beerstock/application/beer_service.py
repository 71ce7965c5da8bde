"""Application service: the beer inventory.

Wraps a BeerRepository with the two business rules of the inventory:
names are unique, and stock never goes past a beer's max.

Every operation returns a Result.  Business failures come back as error
values and are never raised; every check happens before the first call
that mutates the repository, so a failed operation leaves it untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from beerstock.application.dto import BeerDTO
from beerstock.application.mapper import BeerMapper
from beerstock.domain.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    ValidationError,
)
from beerstock.domain.repository.beer_repository import BeerRepository
from beerstock.domain.result import Ok, Result

log = logging.getLogger(__name__)


class BeerService:

    def __init__(
        self,
        beer_repo: BeerRepository,
        mapper: BeerMapper | None = None,
    ) -> None:
        self._beer_repo = beer_repo
        self._mapper = mapper if mapper is not None else BeerMapper()

    def create_beer(self, beer_dto: BeerDTO) -> Result[BeerDTO]:
        """Register a new beer.  Any ``id`` on the input is ignored."""
        if self._beer_repo.get_by_name(beer_dto.name) is not None:
            log.warning("Beer %r already registered", beer_dto.name)
            return BeerAlreadyRegisteredError(beer_dto.name)

        beer = self._mapper.to_model(replace(beer_dto, id=None))
        saved = self._beer_repo.save(beer)
        log.info("Created beer #%s %r", saved.id, saved.name)
        return Ok(self._mapper.to_dto(saved))

    def find_by_name(self, name: str) -> Result[BeerDTO]:
        beer = self._beer_repo.get_by_name(name)
        if beer is None:
            return BeerNotFoundError(name)
        return Ok(self._mapper.to_dto(beer))

    def find_by_id(self, beer_id: int) -> Result[BeerDTO]:
        beer = self._beer_repo.get_by_id(beer_id)
        if beer is None:
            return BeerNotFoundError(beer_id)
        return Ok(self._mapper.to_dto(beer))

    def list_all(self) -> Ok[list[BeerDTO]]:
        return Ok([self._mapper.to_dto(beer) for beer in self._beer_repo.list_all()])

    def delete_by_id(self, beer_id: int) -> Result[None]:
        if self._beer_repo.get_by_id(beer_id) is None:
            log.warning("Cannot delete beer #%s: not found", beer_id)
            return BeerNotFoundError(beer_id)

        self._beer_repo.delete_by_id(beer_id)
        log.info("Deleted beer #%s", beer_id)
        return Ok(None)

    def increment(self, beer_id: int, quantity_to_increment: int) -> Result[BeerDTO]:
        """Add stock to a beer.

        The existence check comes first, so a missing beer is reported
        as not found rather than as exceeded.  Reaching exactly ``max``
        is allowed.
        """
        beer = self._beer_repo.get_by_id(beer_id)
        if beer is None:
            log.warning("Cannot increment beer #%s: not found", beer_id)
            return BeerNotFoundError(beer_id)

        if quantity_to_increment < 0:
            raise ValidationError("Increment quantity cannot be negative")

        if not beer.can_increment(quantity_to_increment):
            log.warning(
                "Stock of beer #%s would exceed max %s (have %s, requested %s)",
                beer_id, beer.max, beer.quantity, quantity_to_increment,
            )
            return BeerStockExceededError(beer_id, quantity_to_increment)

        beer.increment(quantity_to_increment)
        saved = self._beer_repo.save(beer)
        log.info(
            "Incremented beer #%s by %s to %s",
            beer_id, quantity_to_increment, saved.quantity,
        )
        return Ok(self._mapper.to_dto(saved))

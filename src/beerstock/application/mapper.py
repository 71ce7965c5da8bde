"""Field-by-field conversion between BeerDTO and the Beer record."""

from __future__ import annotations

from beerstock.application.dto import BeerDTO
from beerstock.domain.model.beer import Beer


class BeerMapper:
    """Stateless; build one and hand it to whoever needs it."""

    @staticmethod
    def to_model(dto: BeerDTO) -> Beer:
        return Beer(
            id=dto.id,
            name=dto.name,
            brand=dto.brand,
            type=dto.type,
            quantity=dto.quantity,
            max=dto.max,
        )

    @staticmethod
    def to_dto(beer: Beer) -> BeerDTO:
        return BeerDTO(
            id=beer.id,
            name=beer.name,
            brand=beer.brand,
            type=beer.type,
            quantity=beer.quantity,
            max=beer.max,
        )

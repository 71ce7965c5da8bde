"""Unit tests for BeerMapper."""

from beerstock.application.dto import BeerDTO
from beerstock.application.mapper import BeerMapper
from beerstock.domain.model.beer import Beer


class TestBeerMapper:

    def test_dto_to_model_copies_every_field(self):
        dto = BeerDTO(id=1, name="Brahma", brand="Ambev", type="Lager", quantity=10, max=50)
        beer = BeerMapper().to_model(dto)
        assert beer == Beer(id=1, name="Brahma", brand="Ambev", type="Lager", quantity=10, max=50)

    def test_model_to_dto_copies_every_field(self):
        beer = Beer(id=3, name="Colorado", brand="Ambev", type="IPA", quantity=0, max=20)
        assert BeerMapper().to_dto(beer) == BeerDTO(
            id=3, name="Colorado", brand="Ambev", type="IPA", quantity=0, max=20
        )

    def test_missing_id_stays_missing(self):
        dto = BeerDTO(name="Brahma", brand="Ambev", type="Lager", quantity=10, max=50)
        assert BeerMapper().to_model(dto).id is None

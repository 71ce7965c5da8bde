"""Unit tests for result values and the business errors they carry."""

import pytest

from beerstock.domain.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    DomainException,
)
from beerstock.domain.result import Ok, unwrap


class TestErrors:

    def test_already_registered_message(self):
        err = BeerAlreadyRegisteredError("Brahma")
        assert err.name == "Brahma"
        assert str(err) == "Beer with name Brahma already registered in the system."

    def test_not_found_keeps_identifier(self):
        assert BeerNotFoundError(2).identifier == 2
        assert BeerNotFoundError("Brahma").identifier == "Brahma"
        assert str(BeerNotFoundError(2)) == "Beer with identifier 2 not found in the system."

    def test_stock_exceeded_keeps_id_and_amount(self):
        err = BeerStockExceededError(1, 50)
        assert (err.beer_id, err.quantity_to_increment) == (1, 50)
        assert str(err) == "Beer with ID 1 stock exceeded. Requested: 50."

    def test_errors_compare_by_kind_and_arguments(self):
        assert BeerNotFoundError(2) == BeerNotFoundError(2)
        assert BeerNotFoundError(2) != BeerNotFoundError(3)
        assert BeerNotFoundError("x") != BeerAlreadyRegisteredError("x")
        assert hash(BeerStockExceededError(1, 5)) == hash(BeerStockExceededError(1, 5))

    def test_all_errors_are_domain_exceptions(self):
        for err in (
            BeerAlreadyRegisteredError("a"),
            BeerNotFoundError(1),
            BeerStockExceededError(1, 1),
        ):
            assert isinstance(err, DomainException)


class TestResult:

    def test_ok_unwraps_to_value(self):
        assert unwrap(Ok(5)) == 5

    def test_ok_equality(self):
        assert Ok([1, 2]) == Ok([1, 2])

    def test_unwrap_raises_error_value(self):
        result = BeerNotFoundError(7)
        with pytest.raises(BeerNotFoundError, match="identifier 7"):
            unwrap(result)

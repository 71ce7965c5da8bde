"""Domain-level exceptions.

All business rule violations are subclasses of DomainException.  The
inventory service hands the three business failures back as values
(see ``beerstock.domain.result``); ValidationError is raised directly
because it means the caller passed malformed input.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors.

    Two errors are equal when they are the same kind and carry the same
    arguments, so results can be compared in tests and callers.
    """

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ValidationError(DomainException):
    """A business rule or invariant was violated by the input."""


class BeerAlreadyRegisteredError(DomainException):
    """A beer with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Beer with name {self.name} already registered in the system."


class BeerNotFoundError(DomainException):
    """No beer matches the id or name used in the lookup."""

    def __init__(self, identifier: int | str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Beer with identifier {self.identifier} not found in the system."


class BeerStockExceededError(DomainException):
    """Incrementing would push the stock past the beer's max."""

    def __init__(self, beer_id: int, quantity_to_increment: int) -> None:
        super().__init__(beer_id, quantity_to_increment)
        self.beer_id = beer_id
        self.quantity_to_increment = quantity_to_increment

    def __str__(self) -> str:
        return (
            f"Beer with ID {self.beer_id} stock exceeded. "
            f"Requested: {self.quantity_to_increment}."
        )

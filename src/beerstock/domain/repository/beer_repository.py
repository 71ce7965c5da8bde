"""Abstract repository for Beer records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from beerstock.domain.model.beer import Beer


class BeerRepository(ABC):

    @abstractmethod
    def get_by_id(self, beer_id: int) -> Beer | None:
        """Return a beer by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Beer | None:
        """Return a beer by its exact (case-sensitive) name, or None."""

    @abstractmethod
    def list_all(self) -> list[Beer]:
        """Return every beer, in storage order."""

    @abstractmethod
    def save(self, beer: Beer) -> Beer:
        """Insert a beer with no ID (assigning one) or update an existing one."""

    @abstractmethod
    def delete_by_id(self, beer_id: int) -> None:
        """Remove the beer with the given ID."""

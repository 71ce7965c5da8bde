"""Beer record: a single item of the inventory.

Beers have their own lifecycle: they are registered once, their stock is
topped up by increments, and they are eventually removed.  Nothing else
about a beer changes after it is registered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from beerstock.domain.exceptions import ValidationError


class BeerType(Enum):
    """Known beer styles.

    Offered as choices at the edges; the record itself stores the plain
    label and does not reject unknown ones.
    """

    LAGER = "Lager"
    MALZBIER = "Malzbier"
    WITBIER = "Witbier"
    WEISS = "Weiss"
    ALE = "Ale"
    IPA = "IPA"
    STOUT = "Stout"


@dataclass
class Beer:
    """A beer in the inventory.

    Invariants:
    - ``name`` is never blank
    - ``0 <= quantity <= max``

    ``id`` is None until the repository assigns one on first save.
    """

    id: int | None
    name: str
    brand: str
    type: str
    quantity: int
    max: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Beer name is required")
        if self.max <= 0:
            raise ValidationError(f"Beer max must be positive, got {self.max}")
        if self.quantity < 0:
            raise ValidationError(
                f"Beer quantity cannot be negative, got {self.quantity}"
            )
        if self.quantity > self.max:
            raise ValidationError(
                f"Beer quantity {self.quantity} exceeds max {self.max}"
            )

    def can_increment(self, quantity_to_increment: int) -> bool:
        """True if adding *quantity_to_increment* keeps stock within max."""
        return self.quantity + quantity_to_increment <= self.max

    def increment(self, quantity_to_increment: int) -> None:
        """Add stock.  Callers check ``can_increment`` first."""
        self.quantity += quantity_to_increment

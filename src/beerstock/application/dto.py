"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BeerDTO:
    """A beer as received from or shown to the user.

    ``id`` is left out on input to create; the repository assigns it.
    """

    name: str
    brand: str
    type: str
    quantity: int
    max: int
    id: int | None = None

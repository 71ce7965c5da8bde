"""Typed outcomes of inventory operations.

A service call returns either ``Ok(value)`` or one of the business
errors as a plain value.  Nothing is raised across the layer boundary
unless the caller asks for it with ``unwrap``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from beerstock.domain.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


Failure = Union[BeerAlreadyRegisteredError, BeerNotFoundError, BeerStockExceededError]

Result = Union[Ok[T], Failure]


def unwrap(result: Result[T]) -> T:
    """Return the wrapped value, or raise the error carried by *result*."""
    if isinstance(result, Ok):
        return result.value
    raise result

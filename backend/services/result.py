"""Explicit success/failure values for service calls.

Services return ``Ok`` or ``Err`` instead of raising, so route handlers can
branch on the outcome with ``isinstance``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]

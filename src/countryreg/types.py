"""
Type definitions and exception hierarchy for the country registry.

Every error raised by a registry operation derives from RegistryError, so
callers can catch the whole family or pick the specific failure:

InvalidArgumentError: query value has the wrong shape for its key (raised before any scan)
NotFoundError: well-formed query value with no matching record
DomainError: unknown key name passed to keyed iteration
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from .domain.models import CountryRecord

# (key value, record) pairs produced by keyed iteration
CountryPair = tuple[str, CountryRecord]
CountryPairs = Iterator[CountryPair]


class RegistryError(Exception):
    """Base exception for registry operations."""
    pass


class InvalidArgumentError(RegistryError, ValueError):
    """Lookup value fails the shape precondition for its key."""
    def __init__(self, key: str, value: Any, message: str):
        self.key = key
        self.value = value
        super().__init__(message)


class NotFoundError(RegistryError, LookupError):
    """No record in the dataset matches a well-formed lookup value."""
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f'No "{key}" key found matching: {value}')


class DomainError(RegistryError, ValueError):
    """Unknown key name passed where a lookup key is expected."""
    def __init__(self, key: Any, valid_keys: Sequence[str]):
        self.key = key
        self.valid_keys = tuple(valid_keys)
        super().__init__(
            f'Invalid value for key, got "{key}", expected one of: {", ".join(self.valid_keys)}'
        )

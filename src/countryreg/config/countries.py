"""
ISO 3166-1 Country Registry

Lookup and iteration over an immutable, ordered table of country records.
A registry holds either the built-in dataset (ISO 3166-1 identifiers with
ISO 4217 currency codes) or a caller-supplied replacement given at
construction time.

Lookups scan the table in order and return the first record whose field
matches the query value under ASCII case-insensitive comparison.
"""

import logging
import string
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional, Union

from ..domain.enums import LookupKey
from ..domain.models import CountryRecord
from ..guards import GUARDS
from ..types import CountryPairs, DomainError, NotFoundError

logger = logging.getLogger(__name__)

# Folds A-Z only; non-ASCII letters compare exactly
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def _as_key(key: Union[str, LookupKey]) -> LookupKey:
    try:
        return LookupKey(key)
    except ValueError:
        raise DomainError(key, LookupKey.values()) from None


class CountryDataProvider(ABC):
    """Contract for sources able to resolve a country by any ISO 3166-1 identifier."""

    @abstractmethod
    def name(self, value: str) -> CountryRecord:
        """Country whose display name matches value."""

    @abstractmethod
    def alpha2(self, value: str) -> CountryRecord:
        """Country whose alpha-2 code matches value."""

    @abstractmethod
    def alpha3(self, value: str) -> CountryRecord:
        """Country whose alpha-3 code matches value."""

    @abstractmethod
    def numeric(self, value: Union[str, int]) -> CountryRecord:
        """Country whose numeric code matches value."""


class CountryRegistry(CountryDataProvider):
    """
    Registry for country lookups and iteration.

    Example:
        registry = CountryRegistry()
        registry.alpha2("se").name          # 'Sverige'
        registry.numeric("4").alpha3        # 'AFG'
        dict(registry.iterator("alpha3"))   # {'AFG': CountryRecord(...), ...}
    """

    def __init__(self, countries: Optional[Iterable[Union[CountryRecord, Mapping[str, Any]]]] = None):
        """
        Create a registry over the built-in dataset or a replacement.

        Args:
            countries: Records replacing the built-in dataset. Omitted, None or
                empty selects the built-in dataset. Mappings are converted to
                CountryRecord; the sequence is copied so later changes to the
                caller's container do not reach the registry.
        """
        supplied = tuple(
            country if isinstance(country, CountryRecord) else CountryRecord.model_validate(country)
            for country in (countries or ())
        )

        if supplied:
            self._countries = supplied
            logger.debug(f"Registry created with {len(supplied)} supplied countries")
        else:
            from ..config_loader import load_default_countries
            self._countries = load_default_countries()
            logger.debug(f"Registry created with built-in dataset ({len(self._countries)} countries)")

    def name(self, value: str) -> CountryRecord:
        """
        Get country by display name.

        Args:
            value: Name to match, case-insensitively (ASCII letters only)

        Returns:
            First matching country in dataset order

        Raises:
            InvalidArgumentError: If value is blank or not a string
            NotFoundError: If no country has this name
        """
        return self._lookup(LookupKey.NAME, value)

    def alpha2(self, value: str) -> CountryRecord:
        """Get country by two-letter code, e.g. ``"SE"`` or ``"se"``."""
        return self._lookup(LookupKey.ALPHA2, value)

    def alpha3(self, value: str) -> CountryRecord:
        """Get country by three-letter code, e.g. ``"SWE"``."""
        return self._lookup(LookupKey.ALPHA3, value)

    def numeric(self, value: Union[str, int]) -> CountryRecord:
        """Get country by numeric code; ``"4"``, ``"004"`` and ``4`` are equivalent."""
        return self._lookup(LookupKey.NUMERIC, value)

    def lookup(self, key: Union[str, LookupKey], value: Any) -> CountryRecord:
        """
        Get country by any supported key.

        Raises:
            DomainError: If key is not a supported lookup key
        """
        return self._lookup(_as_key(key), value)

    def has(self, key: Union[str, LookupKey], value: Any) -> bool:
        """Check whether a lookup by key would find a country."""
        try:
            self.lookup(key, value)
        except NotFoundError:
            return False
        return True

    def all(self) -> tuple[CountryRecord, ...]:
        """All countries in dataset order."""
        return self._countries

    def count(self) -> int:
        return len(self._countries)

    def iterator(self, key: Union[str, LookupKey] = LookupKey.ALPHA2) -> CountryPairs:
        """
        Iterate countries as (key value, country) pairs in dataset order.

        No sorting or de-duplication is applied. Each call starts a fresh
        traversal.

        Args:
            key: Field whose value becomes the first element of each pair

        Raises:
            DomainError: If key is not one of alpha2, alpha3, numeric, name
        """
        index_key = _as_key(key)
        return ((country[index_key], country) for country in self._countries)

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[CountryRecord]:
        return iter(self._countries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(countries={len(self._countries)})"

    def _lookup(self, key: LookupKey, value: Any) -> CountryRecord:
        """
        Scan the dataset for the first country whose key field matches value.

        The query value is checked and normalised by the key's guard before
        any record is examined.
        """
        needle = _fold(GUARDS[key](value))

        for country in self._countries:
            if _fold(country[key]) == needle:
                return country

        logger.debug(f"No country found for {key.value}={value!r}")
        raise NotFoundError(key.value, value)

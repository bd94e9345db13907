"""
Query value guards for registry lookups.

Each guard checks the shape of a caller-supplied lookup value and returns the
normalised form to search with, or raises InvalidArgumentError. Guards only
look at the query value; stored records are never checked.
"""

import re

from .domain.enums import LookupKey
from .types import InvalidArgumentError

_ALPHA2_PATTERN = re.compile(r"[A-Za-z]{2}")
_ALPHA3_PATTERN = re.compile(r"[A-Za-z]{3}")
_NUMERIC_PATTERN = re.compile(r"[0-9]+")

NUMERIC_MAX = 999


def _require_string(key: LookupKey, value) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            key.value, value,
            f"Expected {key.value} to be of type string, got: {type(value).__name__}"
        )
    return value.strip()


def guard_name(value) -> str:
    """
    Validate a name lookup value.

    Args:
        value: Display name to search for

    Returns:
        The value with surrounding whitespace removed

    Raises:
        InvalidArgumentError: If value is not a string or is blank
    """
    stripped = _require_string(LookupKey.NAME, value)
    if not stripped:
        raise InvalidArgumentError(
            LookupKey.NAME.value, value, "Expected name to be a non-empty string"
        )
    return stripped


def guard_alpha2(value) -> str:
    """Validate an alpha-2 lookup value: exactly two ASCII letters."""
    stripped = _require_string(LookupKey.ALPHA2, value)
    if not _ALPHA2_PATTERN.fullmatch(stripped):
        raise InvalidArgumentError(
            LookupKey.ALPHA2.value, value,
            f"Expected alpha2 to match a set of 2 alphabetic characters, got: {value!r}"
        )
    return stripped


def guard_alpha3(value) -> str:
    """Validate an alpha-3 lookup value: exactly three ASCII letters."""
    stripped = _require_string(LookupKey.ALPHA3, value)
    if not _ALPHA3_PATTERN.fullmatch(stripped):
        raise InvalidArgumentError(
            LookupKey.ALPHA3.value, value,
            f"Expected alpha3 to match a set of 3 alphabetic characters, got: {value!r}"
        )
    return stripped


def guard_numeric(value) -> str:
    """
    Validate a numeric lookup value and zero-pad it to three digits.

    Integers are accepted as well as digit strings, so ``4``, ``"4"``,
    ``"04"`` and ``"004"`` all normalise to ``"004"``.

    Args:
        value: Numeric code as a digit string or int

    Returns:
        Three-digit zero-padded code

    Raises:
        InvalidArgumentError: If value has non-digit characters or is outside 0-999
    """
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        stripped = _require_string(LookupKey.NUMERIC, value)
        if not _NUMERIC_PATTERN.fullmatch(stripped):
            raise InvalidArgumentError(
                LookupKey.NUMERIC.value, value,
                f"Expected numeric to be a set of digits, got: {value!r}"
            )
        significant = stripped.lstrip("0") or "0"
        if len(significant) > len(str(NUMERIC_MAX)):
            raise InvalidArgumentError(
                LookupKey.NUMERIC.value, value,
                f"Expected numeric to be between 0 and {NUMERIC_MAX}, got: {stripped[:10]}..."
            )
        number = int(significant)

    if not 0 <= number <= NUMERIC_MAX:
        raise InvalidArgumentError(
            LookupKey.NUMERIC.value, value,
            f"Expected numeric to be between 0 and {NUMERIC_MAX}, got: {value!r}"
        )
    return f"{number:03d}"


GUARDS = {
    LookupKey.NAME: guard_name,
    LookupKey.ALPHA2: guard_alpha2,
    LookupKey.ALPHA3: guard_alpha3,
    LookupKey.NUMERIC: guard_numeric,
}

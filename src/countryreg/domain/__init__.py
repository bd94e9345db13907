"""
Domain Models and Types

Core record model and enumerations used throughout the registry.

Models:
- CountryRecord: Immutable ISO 3166-1 country record with currency codes

Enums:
- LookupKey: Fields usable for lookups and keyed iteration
- OutputFormat: CLI output formats (text, json, yaml)
"""

from .enums import LookupKey, OutputFormat
from .models import CountryRecord

__all__ = ["CountryRecord", "LookupKey", "OutputFormat"]

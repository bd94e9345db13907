"""
Registry Enumerations

Closed sets of lookup keys and output formats shared by the registry and CLI.
"""

from enum import Enum


class LookupKey(str, Enum):
    """Record fields a country can be looked up or indexed by."""
    ALPHA2 = "alpha2"       # ISO 3166-1 alpha-2
    ALPHA3 = "alpha3"       # ISO 3166-1 alpha-3
    NUMERIC = "numeric"     # ISO 3166-1 numeric, zero-padded to 3 digits
    NAME = "name"           # Display name

    @classmethod
    def values(cls) -> list[str]:
        """Key names in declaration order."""
        return [member.value for member in cls]


class OutputFormat(str, Enum):
    """Output format options for CLI rendering."""
    TEXT = "text"           # Tab-separated, one record per line
    JSON = "json"           # JSON document
    YAML = "yaml"           # YAML document

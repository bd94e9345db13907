"""
countryreg: ISO 3166-1 country lookups over a static dataset.

    from countryreg import CountryRegistry
    CountryRegistry().alpha2("se").name  # 'Sverige'
"""

from .domain import CountryRecord, LookupKey
from .types import DomainError, InvalidArgumentError, NotFoundError, RegistryError
from .config import Config, ConfigurationError, CountryDataProvider, CountryRegistry

__version__ = "1.0.0"

__all__ = [
    "CountryRegistry",
    "CountryDataProvider",
    "CountryRecord",
    "LookupKey",
    "RegistryError",
    "InvalidArgumentError",
    "NotFoundError",
    "DomainError",
    "Config",
    "ConfigurationError",
    "__version__",
]

"""
Configuration module for the country registry.
Environment-driven settings plus the registry over the built-in dataset.
"""

from .settings import (
    Config,
    ConfigurationError,
    DatasetConfig,
    LoggingConfig,
)
from .countries import CountryDataProvider, CountryRegistry

__all__ = [
    'Config',
    'ConfigurationError',
    'DatasetConfig',
    'LoggingConfig',
    'CountryDataProvider',
    'CountryRegistry',
]

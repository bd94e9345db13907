"""
Configuration management for the country registry.

Usage:
    from countryreg.config.settings import Config
    config = Config()
    registry = config.create_registry()

Environment Variables:
    ENVIRONMENT: Environment name used to pick .env.{ENVIRONMENT} (default: development)
    COUNTRYREG_DATASET: Path to a YAML or JSON dataset replacing the built-in one
    COUNTRYREG_LOG_LEVEL: Log level for CLI use (default: WARNING)
    COUNTRYREG_LOG_FILE: Optional file receiving CLI log records
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from dotenv import load_dotenv

if TYPE_CHECKING:
    from .countries import CountryRegistry

logger = logging.getLogger(__name__)

DATASET_SUFFIXES = ('.yml', '.yaml', '.json')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigurationError(Exception):
    """Raised when configuration or a dataset file is invalid or incomplete."""
    pass


@dataclass
class DatasetConfig:
    """Replacement dataset configuration."""
    path: Optional[str] = None

    def __post_init__(self):
        """Validate dataset file type."""
        if self.path and Path(self.path).suffix.lower() not in DATASET_SUFFIXES:
            raise ValueError(
                f"Dataset file must be one of {', '.join(DATASET_SUFFIXES)}, got '{self.path}'"
            )


@dataclass
class LoggingConfig:
    """Log output configuration for command-line use."""
    level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Normalise and validate the level name."""
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")


class Config:
    """
    Centralized configuration for the country registry.

    Environment variables loaded (in order of preference):
    1. Explicit environment file passed to constructor
    2. .env.{ENVIRONMENT} (where ENVIRONMENT=development|production|staging)
    3. .env file in project root
    4. System environment variables

    Variables already present in the process environment are never
    overridden by .env files.

    Example:
        # Built-in dataset, auto-detected environment
        registry = Config().create_registry()

        # Explicit env file pointing COUNTRYREG_DATASET at a custom table
        registry = Config(env_file=Path("deploy/countries.env")).create_registry()
    """

    def __init__(self,
                 environment: Optional[str] = None,
                 env_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            environment: Target environment (development|staging|production)
            env_file: Explicit path to environment file
        """
        self.environment = environment or os.getenv("ENVIRONMENT", "development")
        self.project_root = self._find_project_root()

        self._load_environment_variables(env_file)

        self._load_dataset_config()
        self._load_logging_config()

    def _find_project_root(self) -> Path:
        """Find the nearest directory, from the working directory up, holding a project marker."""
        current = Path.cwd().resolve()

        for parent in (current, *current.parents):
            if any((parent / marker).exists() for marker in ['.env', 'pyproject.toml', '.git']):
                return parent

        return current

    def _env_files(self, env_file: Optional[Path]) -> list[Path]:
        """Candidate .env files, most specific first."""
        if env_file:
            env_file = Path(env_file)
            if not env_file.exists():
                raise ConfigurationError(f"Specified env file not found: {env_file}")
            return [env_file]

        candidates = [
            self.project_root / f".env.{self.environment}",
            self.project_root / ".env",
        ]
        return [candidate for candidate in candidates if candidate.exists()]

    def _load_environment_variables(self, env_file: Optional[Path]) -> None:
        """Apply .env files without overriding variables already set in the process."""
        self._loaded_env_files = []
        for path in self._env_files(env_file):
            load_dotenv(path)
            self._loaded_env_files.append(str(path))
            logger.info(f"Loaded settings from {path}")

        logger.debug(
            f"Environment {self.environment!r} rooted at {self.project_root}, "
            f"env files: {self._loaded_env_files or 'none'}"
        )

    def _load_dataset_config(self) -> None:
        """Load replacement dataset configuration."""
        path = os.getenv("COUNTRYREG_DATASET") or None

        try:
            self.dataset = DatasetConfig(path=path)
        except ValueError as e:
            raise ConfigurationError(f"Invalid dataset configuration: {e}")

    def _load_logging_config(self) -> None:
        """Load logging configuration."""
        level = os.getenv("COUNTRYREG_LOG_LEVEL", "WARNING")
        log_file = os.getenv("COUNTRYREG_LOG_FILE") or None

        try:
            self.logging = LoggingConfig(level=level, log_file=log_file)
        except ValueError as e:
            raise ConfigurationError(f"Invalid logging configuration: {e}")

    def create_registry(self, dataset_path: Optional[Path] = None) -> "CountryRegistry":
        """
        Build a CountryRegistry from the configured dataset.

        Args:
            dataset_path: Dataset file overriding COUNTRYREG_DATASET

        Returns:
            CountryRegistry holding the configured dataset, or the built-in
            dataset when none is configured

        Raises:
            ConfigurationError: If the dataset file cannot be loaded
        """
        from ..config_loader import load_countries
        from .countries import CountryRegistry

        path = dataset_path or self.dataset.path
        if not path:
            return CountryRegistry()

        try:
            DatasetConfig(path=str(path))
        except ValueError as e:
            raise ConfigurationError(f"Invalid dataset configuration: {e}")

        countries = load_countries(Path(path))
        if not countries:
            logger.warning(f"Dataset {path} has no records, falling back to built-in dataset")
        return CountryRegistry(countries)

    def summary(self) -> dict[str, Any]:
        """
        Get configuration summary for diagnostics.

        Returns:
            Dictionary describing the active configuration
        """
        return {
            'environment': self.environment,
            'project_root': str(self.project_root),
            'loaded_env_files': self._loaded_env_files,
            'dataset': self.dataset.path or 'built-in',
            'log_level': self.logging.level,
            'log_file': self.logging.log_file,
        }

    def __repr__(self) -> str:
        return (
            f"Config(environment={self.environment}, "
            f"dataset={self.dataset.path or 'built-in'})"
        )

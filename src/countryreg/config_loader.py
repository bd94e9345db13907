"""
Dataset loading for the country registry.

Two sources are supported:
- data/countries.yml, the built-in dataset shipped with the package
- caller-supplied YAML or JSON files replacing it wholesale

A dataset document is either a list of records or a mapping with a
``countries`` list. Records are converted to CountryRecord models; loading
checks record shape only and never ISO-3166 correctness or key uniqueness.
"""

import functools
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config.settings import DATASET_SUFFIXES, ConfigurationError
from .domain.models import CountryRecord
from .utils import load_json_file, load_yaml_file

logger = logging.getLogger(__name__)

DEFAULT_DATASET = Path(__file__).parent / "data" / "countries.yml"


def _extract_records(document: Any, source: Path) -> list:
    if isinstance(document, dict) and 'countries' in document:
        document = document['countries']
    if document is None:
        return []
    if not isinstance(document, list):
        raise ConfigurationError(
            f"Dataset {source} must be a list of countries or a mapping with a 'countries' list"
        )
    return document


def load_countries(path: Path) -> list[CountryRecord]:
    """
    Load a country dataset from a YAML or JSON file.

    Args:
        path: Dataset file (.yml, .yaml or .json)

    Returns:
        Records in file order

    Raises:
        ConfigurationError: If the file is missing, unparsable, of an unsupported
            type, or holds records without the required fields
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in DATASET_SUFFIXES:
        raise ConfigurationError(
            f"Unsupported dataset file type '{suffix}'. Supported: {', '.join(DATASET_SUFFIXES)}"
        )

    try:
        document = load_json_file(path) if suffix == '.json' else load_yaml_file(path)
    except (FileNotFoundError, ValueError) as e:
        raise ConfigurationError(str(e)) from e

    records = []
    for index, entry in enumerate(_extract_records(document, path)):
        try:
            records.append(CountryRecord.model_validate(entry))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid country record #{index} in {path}: {e}") from e

    logger.debug(f"Loaded {len(records)} countries from {path}")
    return records


@functools.lru_cache(maxsize=None)
def load_default_countries() -> tuple[CountryRecord, ...]:
    """Built-in dataset, read once per process and shared between registries."""
    return tuple(load_countries(DEFAULT_DATASET))

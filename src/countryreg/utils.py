"""
Shared Utilities

Helpers used by the CLI and dataset loader.

Sections:
- Logging setup
- Configuration file helpers
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# =============================================================================
# Logging
# =============================================================================

def setup_logging(
    verbose: bool,
    level: Optional[str] = None,
    log_file: Optional[Path] = None
) -> None:
    """
    Configure root logging for command-line use.

    Log records go to stderr so command output on stdout stays parseable.

    Args:
        verbose: Enable debug-level logging if True (overrides level)
        level: Level name to use when not verbose (defaults to WARNING)
        log_file: Also write log records to this file when given
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName((level or "WARNING").upper())

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True
    )


# =============================================================================
# Configuration File Helpers
# =============================================================================

def load_yaml_file(file_path: Path) -> Any:
    """
    Load YAML file with error handling.

    Args:
        file_path: Path to YAML file

    Returns:
        Parsed YAML content

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not valid YAML
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    try:
        with open(file_path, encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {file_path}: {e}") from e


def load_json_file(file_path: Path) -> Any:
    """
    Load JSON file with error handling.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not valid JSON
    """
    if not file_path.exists():
        raise FileNotFoundError(f"JSON file not found: {file_path}")

    try:
        with open(file_path, encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_path}: {e}") from e

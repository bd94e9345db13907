import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
import yaml

from .config.countries import CountryRegistry
from .config.settings import Config, ConfigurationError
from .domain.enums import LookupKey, OutputFormat
from .domain.models import CountryRecord
from .types import RegistryError
from .utils import setup_logging

app = typer.Typer(help="ISO 3166-1 country lookups: name, alpha2, alpha3, numeric")

DatasetOption = Annotated[
    Optional[Path],
    typer.Option("--dataset", "-d", help="YAML or JSON dataset replacing the built-in one (overrides COUNTRYREG_DATASET)")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable detailed logging output")]
FormatOption = Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format: text | json | yaml")]


def load_registry(dataset: Optional[Path], verbose: bool) -> CountryRegistry:
    """
    Configure logging and build the registry for a command.

    Exits with status 1 when configuration or the dataset file is invalid.
    """
    try:
        config = Config()
    except ConfigurationError as e:
        setup_logging(verbose)
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    setup_logging(verbose, config.logging.level, log_file)
    logging.debug(f"Configuration: {config.summary()}")

    try:
        registry = config.create_registry(dataset)
    except ConfigurationError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    logging.info(f"Loaded {registry.count()} countries")
    return registry


def format_text(country: CountryRecord) -> str:
    return "\t".join([
        country.alpha2,
        country.alpha3,
        country.numeric,
        country.name,
        ",".join(country.currency),
    ])


def render(data: Any, output_format: OutputFormat) -> str:
    """Serialize a record dict (or list of them) as JSON or YAML."""
    if output_format == OutputFormat.JSON:
        return json.dumps(data, ensure_ascii=False, indent=2)
    return yaml.safe_dump(data, allow_unicode=True, sort_keys=False).rstrip("\n")


@app.command("lookup")
def lookup(
    value: Annotated[str, typer.Argument(help="Identifier to look up, e.g. 'se', 'SWE', '752' or 'Sverige'")],
    key: Annotated[LookupKey, typer.Option("--key", "-k", help="Field to match: alpha2 | alpha3 | numeric | name")] = LookupKey.ALPHA2,
    output_format: FormatOption = OutputFormat.TEXT,
    dataset: DatasetOption = None,
    verbose: VerboseOption = False,
):
    """Look up a single country by one of its identifiers."""
    registry = load_registry(dataset, verbose)

    try:
        country = registry.lookup(key, value)
    except RegistryError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if output_format == OutputFormat.TEXT:
        typer.echo(format_text(country))
    else:
        typer.echo(render(country.as_dict(), output_format))


@app.command("list")
def list_countries(
    output_format: FormatOption = OutputFormat.TEXT,
    dataset: DatasetOption = None,
    verbose: VerboseOption = False,
):
    """List every country in dataset order."""
    registry = load_registry(dataset, verbose)

    if output_format == OutputFormat.TEXT:
        for country in registry:
            typer.echo(format_text(country))
    else:
        typer.echo(render([country.as_dict() for country in registry.all()], output_format))


@app.command("count")
def count(
    dataset: DatasetOption = None,
    verbose: VerboseOption = False,
):
    """Print the number of countries in the dataset."""
    registry = load_registry(dataset, verbose)
    typer.echo(str(registry.count()))


@app.command("index")
def index(
    key: Annotated[LookupKey, typer.Option("--key", "-k", help="Field to index by: alpha2 | alpha3 | numeric | name")] = LookupKey.ALPHA2,
    dataset: DatasetOption = None,
    verbose: VerboseOption = False,
):
    """Print '<key value><TAB><name>' for every country in dataset order."""
    registry = load_registry(dataset, verbose)

    for key_value, country in registry.iterator(key):
        typer.echo(f"{key_value}\t{country.name}")


@app.command("show-config")
def show_config(
    verbose: VerboseOption = False,
):
    """Display the active configuration."""
    setup_logging(verbose)
    try:
        config = Config()
    except ConfigurationError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    for name, setting in config.summary().items():
        typer.echo(f"{name}: {setting}")


@app.command("version")
def version():
    """Display version information."""
    from . import __version__
    typer.echo(f"countryreg version: {__version__}")


if __name__ == "__main__":
    app()

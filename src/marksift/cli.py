"""marksift CLI."""

import logging
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from .classifier import Classifier
from .config import get_settings
from .errors import BookmarkError
from .extractors.plist import command_dumper
from .locations import default_locations, existing_locations
from .logging_config import setup_colored_logging
from .output import write_records
from .pipeline import Pipeline

logger = logging.getLogger(__name__)


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("-f", "--fields", default=None, help="Fields to print, in order: t(itle) u(rl) d(escription)")
@click.option("-a", "--all", "show_all", is_flag=True, help="Also print the description")
@click.option("-s", "--schemeless", is_flag=True, help="Recognize addresses without a scheme in text files")
@click.option("--separator", default=None, help="Field separator (default: a space)")
@click.option("--strict", is_flag=True, help="Stop at the first source that fails")
@click.option("-c", "--config", "config_file", type=click.Path(path_type=Path), help="YAML config file")
@click.option("--list-defaults", is_flag=True, help="Show default bookmark locations and exit")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.version_option(package_name="marksift")
def cli(paths, fields, show_all, schemeless, separator, strict, config_file, list_defaults, verbose):
    """Print bookmarks from browser stores and text files.

    PATHS may be Safari .plist files, Firefox .sqlite databases, Chrome or
    Edge "Bookmarks" files, an Internet Explorer "Favorites" directory, or
    markdown (.md), gemini (.gmi) and plain text files. Without PATHS, the
    default browser locations for this system are read.
    """
    setup_colored_logging(verbose)

    if list_defaults:
        for pattern in default_locations():
            click.echo(pattern)
        return

    try:
        settings = get_settings(
            config_file,
            fields=fields,
            separator=separator,
            schemeless=schemeless or None,
            strict=strict or None,
        )
    except (ValidationError, yaml.YAMLError, ValueError) as e:
        click.echo(f"Error loading settings: {e}", err=True)
        sys.exit(1)

    output_fields = settings.fields
    if show_all and "d" not in output_fields:
        output_fields += "d"

    sources = list(paths) or existing_locations()
    if not sources:
        click.echo("No bookmark files found in the default locations.", err=True)
        sys.exit(1)

    classifier = Classifier(
        schemeless=settings.schemeless,
        plist_dumper=command_dumper(settings.plist_command),
    )
    pipeline = Pipeline(classifier, strict=settings.strict)

    try:
        count = write_records(
            pipeline.run(sources),
            fields=output_fields,
            separator=settings.separator,
            record_separator=settings.record_separator,
        )
    except BookmarkError:
        sys.exit(1)

    logger.debug(f"[PIPELINE] {count} bookmarks from {len(sources)} sources")

    if pipeline.failures:
        sys.exit(1)


if __name__ == "__main__":
    cli()

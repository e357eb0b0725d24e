#!/usr/bin/env python3
"""
Command-line interface for Resource Doc Generator

Renders one reStructuredText reference page per resource from the JSON
emitted by the resource inspector.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console

from resource_docgen.config_manager import create_config_from_env, setup_logging
from resource_docgen.exceptions import ResourceDocGenError
from resource_docgen.generator import ResourceDocGenerator
from resource_docgen.record_source import (
    CommandRecordSource,
    JsonFileRecordSource,
    RecordSource,
)
from resource_docgen.writer import ResourceDocWriter

console = Console()
logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to LOG_LEVEL",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Emit log records as JSON lines (or set LOG_JSON=true)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], json_logs: bool) -> None:
    """Resource Doc Generator - reference pages for declarative resources."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None
    ctx.obj["json_logs"] = True if json_logs else None


@cli.command("generate")
@click.option(
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
    show_default=True,
    help="Inspector JSON file, '-' for stdin",
)
@click.option(
    "--inspector-command",
    default=None,
    help="Command that prints inspector JSON; used instead of --input",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for generated pages (defaults to DOCGEN_OUTPUT_DIR or '.')",
)
@click.pass_context
def generate(
    ctx: click.Context,
    input_path: str,
    inspector_command: Optional[str],
    output_dir: Optional[str],
) -> None:
    """Generate a reference page for every resource."""
    try:
        config = create_config_from_env(
            output_directory=output_dir,
            log_level=ctx.obj.get("log_level"),
            json_logs=ctx.obj.get("json_logs"),
        )
        setup_logging(config.logging)
        config.log_configuration_summary()

        source: RecordSource
        if inspector_command:
            source = CommandRecordSource(inspector_command)
        else:
            source = JsonFileRecordSource(input_path)

        docs = config.documentation
        writer = ResourceDocWriter(docs.output_directory, docs.file_extension)
        result = ResourceDocGenerator(source, writer, docs).generate()
    except ResourceDocGenError as e:
        logger.debug("Generation failed", exc_info=True)
        click.echo(f"Failed to generate resource docs: {e}", err=True)
        sys.exit(1)

    console.print(
        f"[green]Generated {result.written_count} resource pages[/green] "
        f"in {writer.output_directory} ({len(result.skipped)} skipped)"
    )


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()

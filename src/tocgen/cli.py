"""CLI interface for tocgen.

Command-line tool for generating the documentation site's toc.html.
"""

import logging
import sys
from collections import Counter
from pathlib import Path

import click

from tocgen.config import STDOUT_OUTPUT, Config
from tocgen.core.nodes import DocumentNode, DropdownNode, loads, walk
from tocgen.core.renderer import dropdown_ids
from tocgen.exceptions import TocgenError
from tocgen.generator import generate_file


@click.group()
def cli() -> None:
    """Generate an HTML table of contents from a JSON outline."""


@cli.command()
@click.argument(
    "json_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
)
@click.option(
    "--script",
    "-s",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File appended verbatim after the generated markup (overrides config)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Target toc.html file, '-' for stdout only (overrides config)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover tocgen.toml)",
)
@click.option(
    "--stdout",
    "echo_output",
    is_flag=True,
    help="Also print the generated file to stdout",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def generate(
    json_file: Path | None,
    script: Path | None,
    output: Path | None,
    config_path: Path | None,
    echo_output: bool,
    verbose: bool,
) -> None:
    """Generate toc.html from a JSON outline."""
    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            source=json_file,
            script=script,
            output=output,
        )
        target = None if config.toc.output == Path(STDOUT_OUTPUT) else config.toc.output
        text = generate_file(
            config.toc.source,
            config.toc.script,
            target,
            config.html.to_render_options(),
        )
    except (TocgenError, ValueError, OSError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if target is None or echo_output:
        click.echo(text, nl=False)
    if target is not None:
        click.echo(
            click.style(f"Generated {target}", fg="green"),
            err=echo_output,
        )


@cli.command()
@click.argument(
    "json_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def check(json_file: Path, verbose: bool) -> None:
    """Validate a JSON outline and report duplicate dropdown ids."""
    _configure_logging(verbose)

    try:
        root = loads(json_file.read_text(encoding="utf-8"))
    except (TocgenError, ValueError, OSError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    nodes = list(walk(root))
    documents = sum(1 for node in nodes if isinstance(node, DocumentNode))
    dropdowns = [node for node in nodes if isinstance(node, DropdownNode)]
    click.echo(f"Documents: {documents}")
    click.echo(f"Dropdowns: {len(dropdowns)}")

    id_counts = Counter(dropdown_ids(node.desc)[1] for node in dropdowns)
    duplicates = sorted(div_id for div_id, count in id_counts.items() if count > 1)
    for div_id in duplicates:
        click.echo(
            click.style(
                f"Warning: dropdown id '{div_id}' used {id_counts[div_id]} times",
                fg="yellow",
            ),
        )
    if not duplicates:
        click.echo(click.style("Outline OK", fg="green"))


def _configure_logging(verbose: bool) -> None:
    """Route tocgen log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()

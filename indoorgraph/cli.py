"""Command-line interface for indoorgraph."""

import logging
import sys

import click

from .document.errors import ParseError
from .document.loader import load_document
from .graph.builder import build_graph
from .layout.circular import circular_layout
from .layout.config import load_config
from .layout.errors import ConfigError
from .layout.models import AppConfig
from .output.formatter import format_check_result, format_graph
from .validators.runner import run_validators


def _load_app_config(config_file: str | None) -> AppConfig:
    if config_file is None:
        return AppConfig()
    try:
        return load_config(config_file)
    except ConfigError as e:
        click.echo(f"Error loading config: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """indoorgraph: IndoorGML cell spaces as a node relation graph."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("gml_file", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML configuration file",
)
@click.option(
    "--radius",
    type=click.FloatRange(min=0),
    default=None,
    help="Circle radius (overrides config)",
)
@click.option(
    "--center",
    type=(float, float),
    default=None,
    help="Circle center X Y (overrides config)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def layout(
    gml_file: str,
    config_file: str | None,
    radius: float | None,
    center: tuple[float, float] | None,
    output_format: str,
):
    """Extract the cell space graph and lay it out on a circle.

    GML_FILE is the path to an IndoorGML document.

    Exit codes:
      0 - Success
      2 - File, XML or config error
    """
    config = _load_app_config(config_file)

    overrides = {}
    if radius is not None:
        overrides["radius"] = radius
    if center is not None:
        overrides["center"] = center
    layout_config = config.layout.model_copy(update=overrides)

    try:
        document = load_document(gml_file, config.extraction)
    except ParseError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)

    graph = circular_layout(build_graph(document), layout_config)

    output = format_graph(graph, output_format, layout_config, config.render)  # type: ignore
    click.echo(output)
    sys.exit(0)


@main.command()
@click.argument("gml_file", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML configuration file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def check(gml_file: str, config_file: str | None, output_format: str, strict: bool):
    """Report what extraction skips in an IndoorGML document.

    GML_FILE is the path to an IndoorGML document.

    Exit codes:
      0 - No warnings, or warnings without --strict
      1 - Warnings found with --strict
      2 - File, XML or config error
    """
    config = _load_app_config(config_file)

    try:
        document = load_document(gml_file, config.extraction)
    except ParseError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)

    result = run_validators(document, build_graph(document))

    output = format_check_result(result, output_format)  # type: ignore
    click.echo(output)

    if strict and result.has_warnings:
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()

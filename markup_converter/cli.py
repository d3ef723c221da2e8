"""CLI interface for Markup Converter."""

import sys
from pathlib import Path
from typing import Optional

import click

from .console import handle_errors, info, success
from .formats import Format, FormatKind
from .logger import setup_logger
from .query import query as run_query
from .transcoder import Transcoder


@click.command()
@click.argument("input_file", type=click.Path(path_type=Path))
@click.argument("expression", required=False)
@click.option(
    "--to",
    "-t",
    "to_format",
    type=click.Choice(["json", "yaml", "toml"], case_sensitive=False),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file (print to stdout if not specified)",
)
@click.option(
    "--minify",
    is_flag=True,
    help="Minify output (JSON only)",
)
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="Indentation level",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    input_file: Path,
    expression: Optional[str],
    to_format: str,
    output: Optional[Path],
    minify: bool,
    indent: int,
    verbose: bool,
):
    """
    Markup Query - Load a JSON, YAML, or TOML file and print it, optionally
    filtered with a JMESPath EXPRESSION.

    Examples:

        \b
        # Print a YAML file as JSON
        markup-query config.yaml

        \b
        # Extract a field
        markup-query config.toml name

        \b
        # Convert to YAML
        markup-query data.json --to yaml --output data.yaml
    """
    setup_logger("markup_converter", level="DEBUG" if verbose else None)

    to_fmt = FormatKind(to_format.lower())

    info(f"Loading {input_file}")
    transcoder = Transcoder.from_path(input_file)

    if expression:
        info(f"Applying query: {expression}")
        result = run_query(transcoder.to_json(), expression)
        transcoder = Transcoder(Format(FormatKind.JSON, result))

    output_data = transcoder.dumps(to_fmt, pretty=not minify, indent=indent)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(output_data)
        success(f"Converted to {output}")
    else:
        click.echo(output_data.rstrip("\n"))

    sys.exit(0)


if __name__ == "__main__":
    main()

"""Command-line interface for the JSON property converter."""

import logging
import sys
import click
from pathlib import Path
from . import __version__
from .json_properties import JSONPropertyConverter


@click.command()
@click.version_option(version=__version__)
@click.option('--input', '-i', 'input_file', required=True,
              type=click.Path(path_type=Path),
              help='The JSON file to convert')
@click.option('--output', '-o', 'output_file', required=True,
              type=click.Path(path_type=Path),
              help='The Gameplay3D property file to output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(input_file: Path, output_file: Path, verbose: bool):
    """JSON to Gameplay3D property converter."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    converter = JSONPropertyConverter()
    result = converter.convert_file(input_file, output_file)

    if not result.success:
        message = "; ".join(result.errors or ["conversion failed"])
        click.echo(f"error: {message}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {result.line_count} lines to {result.output_path}")


if __name__ == '__main__':
    main()

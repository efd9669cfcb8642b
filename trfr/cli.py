"""
Command-line interface for trfr.
"""

import sys
from pathlib import Path

import click

from . import __version__
from .config import ReaderConfig
from .errors import TrfError


def _load_config(variant, config) -> ReaderConfig:
    """Build the reader config; an explicit --format wins over the config file."""
    cfg = ReaderConfig.from_yaml(Path(config)) if config else ReaderConfig()
    if variant:
        cfg = ReaderConfig(variant=variant)
    return cfg


def _setup_logging():
    import logging

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """trfr: read Tandem Repeats Finder output."""
    pass


@cli.command()
@click.argument('input_path', type=click.Path(exists=True))
@click.option('--format', '-f', 'variant', type=click.Choice(['d', 'ngs']), default=None,
              help='TRF output dialect: d (-d data file) or ngs (-ngs output) (default: d)')
@click.option('--config', '-c', type=click.Path(exists=True),
              help='YAML reader configuration')
@click.option('--output', '-o', type=click.Path(),
              help='Output TSV path (default: stdout)')
def parse(input_path, variant, config, output):
    """
    Parse a TRF output file into a TSV table, one row per repeat.

    \b
    Example:
      trfr parse genome.fa.2.7.7.80.10.50.500.dat -o repeats.tsv
      trfr parse reads.ngs -f ngs > repeats.tsv
    """
    from .io.output import write_records_tsv

    _setup_logging()

    try:
        cfg = _load_config(variant, config)
    except ValueError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    try:
        with cfg.open(input_path) as reader:
            n = write_records_tsv(reader.records(), output if output else sys.stdout)
    except TrfError as e:
        click.echo(f"Error parsing {input_path}: {e}", err=True)
        sys.exit(1)

    if output:
        click.echo(f"Wrote {n} repeats to {output}")


@cli.command()
@click.argument('input_path', type=click.Path(exists=True))
@click.option('--format', '-f', 'variant', type=click.Choice(['d', 'ngs']), default=None,
              help='TRF output dialect: d (-d data file) or ngs (-ngs output) (default: d)')
@click.option('--config', '-c', type=click.Path(exists=True),
              help='YAML reader configuration')
def summary(input_path, variant, config):
    """Print the number of repeats and repeat bp per sequence."""
    from .io.output import records_to_dataframe, summarize_by_sequence

    _setup_logging()

    try:
        cfg = _load_config(variant, config)
    except ValueError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    try:
        with cfg.open(input_path) as reader:
            df = records_to_dataframe(reader.records())
    except TrfError as e:
        click.echo(f"Error parsing {input_path}: {e}", err=True)
        sys.exit(1)

    table = summarize_by_sequence(df)
    click.echo(f"{len(df)} repeats in {len(table)} sequences")
    for row in table.itertuples(index=False):
        click.echo(f"  {row.seq_id}\t{row.n_repeats}\t{row.repeat_bp}")


if __name__ == '__main__':
    cli()

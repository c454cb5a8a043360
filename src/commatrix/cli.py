"""
commatrix Command Line Interface.

Commands: generate, diff, summary
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from . import __version__
from .config import ReportConfig
from .errors import CommatrixError, ConfigurationError, OutputError
from .export.writer import render_files, write_files
from .logging_config import setup_logging
from .matrix import ComMatrix, generate_diff
from .matrix.summary import port_count_matrix
from .sources import get_static_entries, load_custom_entries, load_matrix_file

logger = logging.getLogger(__name__)

ENV_HELP = "Cluster environment: baremetal or cloud"
DEPLOYMENT_HELP = "Deployment type: sno (single node) or mno (multi node)"


def _fail(error: CommatrixError) -> None:
    click.echo(f"Error: {error.message}", err=True)
    if error.suggestion:
        click.echo(f"Suggestion: {error.suggestion}", err=True)
    raise SystemExit(1)


def _read_config(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(path, f"cannot read file: {e}") from e


def build_matrix(config: ReportConfig) -> ComMatrix:
    """Collect static, observed and custom entries into a normalized matrix."""
    matrix = ComMatrix(get_static_entries(config.environment, config.deployment))
    if config.observed_entries:
        matrix.add(load_custom_entries(config.observed_entries))
    if config.custom_entries:
        matrix.add(load_custom_entries(config.custom_entries))
    matrix.normalize()
    logger.debug("built %r", matrix)
    return matrix


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING)")
def cli(log_level: str):
    """commatrix: cluster communication matrix generator"""
    setup_logging(log_level)


@cli.command()
@click.option("--config", "config_file", default=None, type=click.Path(exists=True, dir_okay=False),
              help="YAML report configuration file")
@click.option("--env", default=None, help=ENV_HELP)
@click.option("--deployment", default=None, help=DEPLOYMENT_HELP)
@click.option("--format", "formats", multiple=True,
              help="Output format: csv, json, yaml or nft (repeatable)")
@click.option("--custom-entries", default=None, help="JSON file of additional flow records")
@click.option("--observed", default=None, help="JSON file of discovered flow records")
@click.option("--destination", default=None, help="Output directory")
@click.option("--prefix", default=None, help="Output file name prefix")
def generate(config_file, env, deployment, formats, custom_entries, observed, destination, prefix):
    """Generate the communication matrix and write it to files."""
    try:
        config = ReportConfig()
        if config_file:
            config = ReportConfig.load_yaml(_read_config(config_file), config_file)
        config = config.merge(
            environment=env,
            deployment=deployment,
            formats=list(formats),
            custom_entries=custom_entries,
            observed_entries=observed,
            destination=destination,
            prefix=prefix,
        )

        click.echo(f"[*] Building matrix for {config.environment.value}/{config.deployment.value}...")
        matrix = build_matrix(config)

        files: dict[str, bytes] = {}
        for fmt in config.formats:
            files.update(render_files(matrix, config.prefix, fmt, config.deployment))
        written = write_files(files, config.destination)
    except CommatrixError as e:
        _fail(e)

    click.echo(f"[+] {len(matrix)} flows written to {len(written)} file(s)")
    for path in written:
        click.echo(f"    {path}")


@cli.command()
@click.argument("first", type=click.Path(exists=True, dir_okay=False))
@click.argument("second", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", default=None, help="Write the diff to this file instead of stdout")
def diff(first: str, second: str, output: str | None):
    """Show flows only in FIRST (+), only in SECOND (-), or in both."""
    try:
        a = load_matrix_file(first).normalized()
        b = load_matrix_file(second).normalized()
    except CommatrixError as e:
        _fail(e)

    text = generate_diff(a, b)
    if output:
        try:
            Path(output).write_text(text, encoding="utf-8")
        except OSError as e:
            _fail(OutputError(output, e.strerror or str(e)))
        click.echo(f"[+] Diff written to {output}")
    else:
        click.echo(text, nl=False)


@cli.command()
@click.option("--env", default="baremetal", help=ENV_HELP)
@click.option("--deployment", default="mno", help=DEPLOYMENT_HELP)
@click.option("--custom-entries", default=None, help="JSON file of additional flow records")
def summary(env: str, deployment: str, custom_entries: str | None):
    """Print flow counts per node role and protocol."""
    try:
        config = ReportConfig().merge(
            environment=env, deployment=deployment, custom_entries=custom_entries,
        )
        matrix = build_matrix(config)
    except CommatrixError as e:
        _fail(e)

    roles, protocols, counts = port_count_matrix(matrix)
    click.echo("\n--- Communication Matrix Summary ---")
    click.echo(f"Total flows: {len(matrix)}")
    click.echo(f"\n{'Role':12s}" + "".join(f"{p:>8s}" for p in protocols) + f"{'Total':>8s}")
    for i, role in enumerate(roles):
        row = "".join(f"{int(c):8d}" for c in counts[i])
        click.echo(f"{role:12s}{row}{int(counts[i].sum()):8d}")


def main():
    cli()


if __name__ == "__main__":
    main()

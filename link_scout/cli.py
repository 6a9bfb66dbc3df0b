# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of LinkScout.

Commands:
  scan      Discover scripts on the seed pages and print every extracted value
  config    Show the effective configuration

Common options:
  --config PATH       YAML/JSON config file (configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format string

scan options:
  -d, --domain URL    Seed domain or URL (repeatable)
  -l, --list PATH     File with newline-separated seeds
  -o, --out PATH      Also write the results to this file
  --concurrency INT   Concurrent script fetches (default 10)
  -t, --timeout SEC   Timeout of a single request (default 10)
  --scan-timeout SEC  Deadline for all script fetches of the run
  -f, --filter TEXT   Keep only values containing TEXT
  --format FORMAT     text (bare values) or json (one {url, value} per line)
  -s, --silent        Only warnings and errors on stderr
  --verbose           Also log dropped requests

Seeds may also be piped through stdin.

Example:
  cat targets.txt | link-scout scan --format json -o results.jsonl
"""
import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List

import click

from link_scout import __version__
from link_scout.config import NoSeedsError, load_config
from link_scout.engine import run_scan
from link_scout.logger import init_logging, level_for
from link_scout.report import render_lines, save_lines
from link_scout.utils import parse_lines, read_targets, remove_duplicates

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def read_stdin_targets() -> List[str]:
    """Return seeds piped through stdin, or nothing when stdin is a terminal."""
    stream = click.get_text_stream('stdin')
    if stream.isatty():
        return []
    return parse_lines(stream)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-V', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """LinkScout: find endpoints referenced by a site's pages and scripts."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg
    ctx.obj['logging'] = {'level': log_level, 'log_file': log_file, 'log_format': log_format}


@cli.command('scan', context_settings=CONTEXT_SETTINGS)
@click.option('--domain', '-d', 'domains', multiple=True, help='Seed domain or URL (repeatable).')
@click.option(
    '--list', '-l', 'list_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='File with newline-separated seeds.'
)
@click.option(
    '--out', '-o', 'output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Also write the results to this file.'
)
@click.option('--concurrency', type=click.IntRange(min=1), default=None, help='Concurrent script fetches.')
@click.option('--timeout', '-t', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Timeout of a single request (seconds).')
@click.option('--scan-timeout', 'scan_timeout', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Deadline for all script fetches of the run (seconds).')
@click.option('--filter', '-f', 'filter_', default=None, help='Keep only values containing this text.')
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default=None,
              help='Output format.')
@click.option('--silent', '-s', is_flag=True, help='Only warnings and errors on stderr.')
@click.option('--verbose', is_flag=True, help='Also log dropped requests.')
@click.pass_context
def scan(ctx, domains, list_file, output, concurrency, timeout, scan_timeout, filter_, output_format,
         silent, verbose):
    """Discover scripts on the seed pages and print every extracted value."""
    overrides: Dict[str, Any] = {
        'concurrency': concurrency,
        'timeout': timeout,
        'scan_timeout': scan_timeout,
        'filter': filter_,
        'output_format': output_format,
    }
    updates = {k: v for k, v in overrides.items() if v is not None}
    if silent:
        updates.update(silent=True, verbose=False)
    if verbose:
        updates.update(verbose=True, silent=False)
    cfg = ctx.obj['config'].model_copy(update=updates)

    log_opts = ctx.obj['logging']
    init_logging(
        level=level_for(cfg.verbose, cfg.silent, log_opts['level']),
        log_file=str(log_opts['log_file']) if log_opts['log_file'] else None,
        log_format=log_opts['log_format']
    )

    seeds = list(domains)
    if list_file is not None:
        try:
            seeds.extend(read_targets(list_file))
        except OSError as e:
            print_error(f'Failed to read list file: {e}')
    try:
        seeds.extend(read_stdin_targets())
    except OSError as e:
        print_error(f'Error reading from stdin: {e}')
    seeds = remove_duplicates(seeds)

    try:
        aggregator = asyncio.run(run_scan(cfg, seeds))
    except NoSeedsError as e:
        print_error(str(e))
    except Exception as e:
        print_error(f'Scan failed: {e}')

    lines = render_lines(aggregator.finalize_records(), cfg.output_format)
    for line in lines:
        click.echo(line)

    if output:
        try:
            save_lines(lines, output)
        except OSError as e:
            print_error(f'Could not write results to {output}: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()

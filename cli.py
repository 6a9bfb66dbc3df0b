# cli.py

"""
Entry point for running LinkScout from a source checkout without installing it.

Example:
    python cli.py scan -d example.com --format json -o results.jsonl
"""
from link_scout.cli import cli


if __name__ == '__main__':
    cli()

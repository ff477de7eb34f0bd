"""Allow ``python -m treetracr``."""

from treetracr.cli import cli

if __name__ == "__main__":
    cli()

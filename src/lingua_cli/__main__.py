"""Allow running as ``python -m lingua_cli``."""

from .cli import cli

if __name__ == "__main__":
    cli()

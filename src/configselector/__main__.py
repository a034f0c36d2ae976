"""Allow running as: python -m configselector"""

from .cli.main import cli

if __name__ == "__main__":
    cli()

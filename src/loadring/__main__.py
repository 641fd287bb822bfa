"""Main entry point for loadring."""

from loadring.cli import cli


if __name__ == "__main__":
    cli()

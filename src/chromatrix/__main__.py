"""Allow ``python -m chromatrix``."""

from chromatrix.cli.main import cli

if __name__ == "__main__":
    cli()

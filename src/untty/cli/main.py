"""Main CLI entry point."""

import sys
from typing import NoReturn, Optional

import click

from untty.cli.app import create_app


def main(argv: Optional[list[str]] = None) -> NoReturn:
    """
    Main CLI entry point.

    Click reports usage errors with exit code 2, which untty reserves for
    read errors, so a bad command line is mapped to the setup-error code 1.
    """
    app = create_app()
    try:
        code = app(args=argv, prog_name="untty", standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(code if isinstance(code, int) else 0)


if __name__ == "__main__":
    main()

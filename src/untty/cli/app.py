"""Typer CLI application."""

import logging
import os
import sys
from pathlib import Path
from typing import Annotated, BinaryIO, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from untty import __version__
from untty.core.constants import DEBUG_ENV_VAR, ESC, SPC
from untty.engine.filter import FilterEngine
from untty.errors import SetupError, UnttyError
from untty.io.reader import ByteSource
from untty.io.writer import ByteSink
from untty.patterns.defaults import DEFAULT_EXPRS
from untty.patterns.loader import load_pattern_set
from untty.patterns.pattern import MatchLength, MatchPolicy, TieBreak
from untty.trace import Tracer

log = logging.getLogger(__name__)


def _fail(console: Console, error: UnttyError) -> NoReturn:
    console.print(f"[bold red]untty:[/] {escape(str(error))}")
    raise typer.Exit(error.exit_code)


def _open_input(path: Path) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as e:
        raise SetupError(f'Could not open "{path}": {e.strerror or e}') from e


def _version_callback(value: bool) -> None:
    if value:
        print(f"untty {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="untty",
        help="Strip terminal escape sequences from captured console output.",
        add_completion=False,
        rich_markup_mode="rich",
        context_settings={"help_option_names": ["-h", "--help", "-?", "--usage"]},
    )
    console = Console(stderr=True)

    @app.command()
    def untty(
        path: Annotated[Optional[Path], typer.Argument(help="File to filter (default: stdin)")] = None,
        space_as_escape: Annotated[bool, typer.Option("--space-as-escape", "-s", help="Treat space as the escape byte")] = False,
        debug: Annotated[bool, typer.Option("--debug", "-d", help=f"Trace the state machine on stderr (also when {DEBUG_ENV_VAR} is set)")] = False,
        show_defaults: Annotated[bool, typer.Option("--show-defaults", help="Print the built-in escape patterns and exit")] = False,
        match: Annotated[MatchLength, typer.Option("--match", help="Prefer the shortest or longest match")] = MatchLength.SHORTEST,
        tie: Annotated[TieBreak, typer.Option("--tie", help="Pattern that wins when matches end together")] = TieBreak.FIRST,
        version: Annotated[Optional[bool], typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit")] = None,
    ) -> None:
        """Filter escape sequences out of FILE (or stdin) and write text to stdout."""
        if show_defaults:
            sys.stdout.write(DEFAULT_EXPRS)
            return

        # any value enables tracing, even an empty one
        debug = debug or DEBUG_ENV_VAR in os.environ
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.WARNING,
            format="%(name)s %(levelname)s: %(message)s",
        )

        trigger = SPC if space_as_escape else ESC
        policy = MatchPolicy(length=match, tie=tie)

        try:
            stream = sys.stdin.buffer if path is None else _open_input(path)
        except SetupError as e:
            _fail(console, e)

        try:
            try:
                patterns = load_pattern_set()
            except SetupError as e:
                _fail(console, e)

            log.debug("trigger \\x%02x, %d patterns, %s matching",
                      trigger, len(patterns), policy.describe())
            engine = FilterEngine(patterns, trigger=trigger, policy=policy,
                                  tracer=Tracer(enabled=debug))
            try:
                result = engine.run(ByteSource(stream), ByteSink(sys.stdout.buffer))
            except UnttyError as e:
                _fail(console, e)
        finally:
            if path is not None:
                stream.close()

        log.debug("read %d bytes, wrote %d, removed %d sequences",
                  result.bytes_read, result.bytes_written, result.sequences_removed)

    return app

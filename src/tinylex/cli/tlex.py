"""
tlex - Token Dump Command-Line Interface
========================================

This module implements a command that scans a source file (or standard
input) and prints the resulting token stream. It is a developer tool for
inspecting what the scanner produces.

Usage Examples
--------------
Dump a file:
    $ tlex program.txt
    1:1     IDENT   foo
    1:5     =       =
    1:7     INT     1
    1:8     ;       ;
    1:8     EOF

Read from standard input as JSON:
    $ echo "x = 1;" | tlex --format json

Fail when unrecognized characters are present:
    $ tlex --strict program.txt
"""

import json
import logging
import sys
from typing import IO, Optional

import click

from tinylex import __version__
from tinylex.cli.errors import ExitCode, handle_cli_exception
from tinylex.config import OUTPUT_FORMATS, DumpConfig
from tinylex.scanner import Scanner
from tinylex.tokens import Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Format a token as 'line:column<TAB>NAME<TAB>text'."""
    return f"{token.position}\t{token.kind}\t{token.text}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.File("rb"),
    default="-",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: text, or $TINYLEX_FORMAT)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with an error if any ILLEGAL token is found",
)
@click.option(
    "--no-eof",
    is_flag=True,
    help="Do not print the terminating EOF token",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="tlex")
def main(
    input_file: IO[bytes],
    output_format: Optional[str],
    strict: Optional[bool],
    no_eof: bool,
    verbose: bool,
) -> None:
    """
    Print the token stream of a source file.

    INPUT_FILE is the file to scan. Use - (the default) for standard input.

    \b
    Examples:
        tlex prog.txt                # One token per line
        tlex -f json prog.txt        # JSON array of tokens
        tlex --strict prog.txt       # Exit 1 on unrecognized characters
        cat prog.txt | tlex          # Scan standard input
    """
    setup_logging(verbose)

    config = DumpConfig.from_env()
    if output_format is not None:
        config.output_format = output_format.lower()
    if strict is not None:
        config.strict = strict
    if no_eof:
        config.include_eof = False

    name = getattr(input_file, "name", None)
    if not isinstance(name, str) or name.startswith("<"):
        name = "<stdin>"

    try:
        logger.debug(f"Scanning {name} (format={config.output_format})")
        with Scanner(input_file, name) as scanner:
            tokens = list(scanner.tokenize())
    except Exception as e:
        handle_cli_exception(e, verbose)

    shown = tokens if config.include_eof else [t for t in tokens if not t.is_eof]
    if config.output_format == "json":
        click.echo(json.dumps([t.as_dict() for t in shown], indent=2))
    else:
        for token in shown:
            click.echo(format_token(token))

    illegal = [t for t in tokens if t.is_illegal]
    logger.debug(f"Scanned {len(tokens)} tokens, {len(illegal)} illegal")

    if config.strict and illegal:
        first = illegal[0]
        click.echo(
            f"{name}:{first.position}: error: {len(illegal)} unrecognized "
            f"character(s), first {first.text!r}",
            err=True,
        )
        sys.exit(ExitCode.BUILD_ERROR)


if __name__ == "__main__":
    main()

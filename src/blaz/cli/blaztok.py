"""
blaztok - Blaz Token Classifier Command-Line Interface
======================================================

This module implements a small command-line front end to the token
model. It does not scan source text: it expects lexemes that have
already been delimited, separated by whitespace, and prints one token
rendering per lexeme.

Usage Examples
--------------
Classify lexemes given as arguments:
    $ blaztok let x = 5 ";"
    {type: Let, literal: "let"}
    {type: Identifier, literal: "x"}
    {type: Assign, literal: "="}
    {type: Integer, literal: "5"}
    {type: Semicolon, literal: ";"}

Read lexemes from a file, print type names only:
    $ blaztok -t -f lexemes.txt

Read lexemes from stdin:
    $ echo "fn ( a , b )" | blaztok
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from blaz import __version__
from blaz.cli.errors import handle_cli_exception
from blaz.token import ClassifierOptions, classify_lexemes, render

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("lexemes", nargs=-1)
@click.option(
    "-f", "--file", "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read whitespace-separated lexemes from a file",
)
@click.option(
    "--strict-empty",
    is_flag=True,
    help="Classify empty lexemes as Illegal instead of Identifier",
)
@click.option(
    "--eof",
    "append_eof",
    is_flag=True,
    help="Append an Eof token to the output",
)
@click.option(
    "-t", "--types-only",
    is_flag=True,
    help="Print only the token type names",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="blaztok")
def main(
    lexemes: tuple[str, ...],
    input_file: Optional[Path],
    strict_empty: bool,
    append_eof: bool,
    types_only: bool,
    verbose: bool,
) -> None:
    """
    Classify Blaz lexemes into tokens.

    LEXEMES are raw, already delimited lexemes. When none are given and
    no --file is used, lexemes are read from standard input.

    \b
    Examples:
        blaztok let x = 5 ";"        # Classify arguments
        blaztok -t fn "(" ")"        # Type names only
        blaztok -f lexemes.txt       # Read from a file
    """
    setup_logging(verbose)

    options = ClassifierOptions(
        empty_as_illegal=strict_empty,
        append_eof=append_eof,
    )

    try:
        if lexemes and input_file is not None:
            raise click.BadParameter(
                "cannot combine LEXEMES with --file", param_hint="'--file'"
            )

        if input_file is not None:
            logger.debug("Reading lexemes from %s", input_file)
            units = input_file.read_text(encoding="utf-8").split()
        elif lexemes:
            units = list(lexemes)
        else:
            logger.debug("Reading lexemes from stdin")
            units = sys.stdin.read().split()

        for token in classify_lexemes(units, options):
            click.echo(token.token_type() if types_only else render(token))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()

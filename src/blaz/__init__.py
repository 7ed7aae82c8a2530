"""
Blaz - Token Model for the Blaz Language
========================================

This package provides the lexical token model of Blaz, a small
interpreted programming language: the closed set of token kinds that
source text is reduced to, and the rules that classify raw lexemes into
those kinds.

Main Components
---------------
- **token**: TokenKind, Token and the classification functions
    ``from_char`` and ``from_str``, plus ``token_type``, ``literal``
    and ``render`` for introspection and debugging

- **errors**: The package exception hierarchy

- **cli**: The ``blaztok`` command-line classifier

Quick Start
-----------
Classify lexemes handed over by a scanner:
    >>> from blaz import classify_lexemes, render
    >>> for token in classify_lexemes(["let", "x", "=", "5", ";"]):
    ...     print(render(token))
    {type: Let, literal: "let"}
    {type: Identifier, literal: "x"}
    {type: Assign, literal: "="}
    {type: Integer, literal: "5"}
    {type: Semicolon, literal: ";"}

Or use the command-line tool:
    $ blaztok let x = 5 ";"

Version History
---------------
1.0.0 - Initial release with the token model and blaztok
"""

__version__ = "1.0.0"
__author__ = "Blaz Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from blaz.errors import BlazError, TokenError
from blaz.token import (
    TokenKind,
    Token,
    ClassifierOptions,
    ILLEGAL,
    EOF,
    FIXED_LITERALS,
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_OPS,
    KEYWORDS,
    TYPE_NAMES,
    from_char,
    from_str,
    token_type,
    literal,
    render,
    classify_lexemes,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Exception hierarchy
    "BlazError",
    "TokenError",
    # Token model
    "TokenKind",
    "Token",
    "ClassifierOptions",
    "ILLEGAL",
    "EOF",
    # Literal tables
    "FIXED_LITERALS",
    "SINGLE_CHAR_TOKENS",
    "TWO_CHAR_OPS",
    "KEYWORDS",
    "TYPE_NAMES",
    # Classification and introspection
    "from_char",
    "from_str",
    "token_type",
    "literal",
    "render",
    "classify_lexemes",
]

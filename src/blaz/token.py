"""
Blaz Token Model
================

This module defines the closed vocabulary of tokens that Blaz source text
is reduced to, together with the rules that classify a raw lexeme into
one of those tokens.

The character-scanning cursor lives elsewhere: it decides where a lexeme
starts and ends, then hands either a single character to ``from_char``
or an accumulated run of characters to ``from_str``.

Token Families
--------------
| Family      | Kinds                                              |
|-------------|----------------------------------------------------|
| Sentinels   | ILLEGAL, EOF                                       |
| Payload     | IDENT, INT                                         |
| Operators   | = + - ! * / < > == !=                              |
| Delimiters  | , ; ( ) { }                                        |
| Keywords    | fn let true false if else return                   |

Classification Precedence (``from_str``)
----------------------------------------
1. ``==`` and ``!=``
2. reserved keywords
3. all ASCII decimal digits -> INT
4. anything else -> IDENT

Example Usage
-------------
>>> from blaz.token import from_char, from_str, render
>>> render(from_str("let"))
'{type: Let, literal: "let"}'
>>> render(from_char("("))
'{type: LeftParen, literal: "("}'
>>> from_str("42")
Token(INT, '42')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional
import logging
import string

from blaz.errors import TokenError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Every kind of token the Blaz language knows about.

    The set is closed: classification always lands on exactly one member.
    Only IDENT and INT carry a payload; every other kind has a single
    fixed literal recorded in FIXED_LITERALS.
    """

    # === Sentinels ===
    ILLEGAL = auto()        # Unrecognised character
    EOF = auto()            # End of input

    # === Identifiers and Literals ===
    IDENT = auto()          # Names: x, add, foo_bar
    INT = auto()            # Unsigned decimal integers, kept as text

    # === Operators ===
    ASSIGN = auto()         # =
    PLUS = auto()           # +
    MINUS = auto()          # -
    BANG = auto()           # !
    ASTERISK = auto()       # *
    SLASH = auto()          # /
    LESS_THAN = auto()      # <
    GREATER_THAN = auto()   # >
    EQUAL = auto()          # ==
    NOT_EQUAL = auto()      # !=

    # === Delimiters ===
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }

    # === Keywords ===
    FUNCTION = auto()       # fn
    LET = auto()            # let
    TRUE = auto()           # true
    FALSE = auto()          # false
    IF = auto()             # if
    ELSE = auto()           # else
    RETURN = auto()         # return


# =============================================================================
# Kind Families
# =============================================================================

SENTINELS = frozenset({TokenKind.ILLEGAL, TokenKind.EOF})

PAYLOAD_KINDS = frozenset({TokenKind.IDENT, TokenKind.INT})

OPERATORS = frozenset({
    TokenKind.ASSIGN,
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.BANG,
    TokenKind.ASTERISK,
    TokenKind.SLASH,
    TokenKind.LESS_THAN,
    TokenKind.GREATER_THAN,
    TokenKind.EQUAL,
    TokenKind.NOT_EQUAL,
})

DELIMITERS = frozenset({
    TokenKind.COMMA,
    TokenKind.SEMICOLON,
    TokenKind.LPAREN,
    TokenKind.RPAREN,
    TokenKind.LBRACE,
    TokenKind.RBRACE,
})

KEYWORD_KINDS = frozenset({
    TokenKind.FUNCTION,
    TokenKind.LET,
    TokenKind.TRUE,
    TokenKind.FALSE,
    TokenKind.IF,
    TokenKind.ELSE,
    TokenKind.RETURN,
})


# =============================================================================
# Literal Tables
# =============================================================================

# Canonical source text for every kind without a payload
FIXED_LITERALS: dict[TokenKind, str] = {
    # Sentinels
    TokenKind.ILLEGAL: "",
    TokenKind.EOF: "\0",

    # Operators
    TokenKind.ASSIGN: "=",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.BANG: "!",
    TokenKind.ASTERISK: "*",
    TokenKind.SLASH: "/",
    TokenKind.LESS_THAN: "<",
    TokenKind.GREATER_THAN: ">",
    TokenKind.EQUAL: "==",
    TokenKind.NOT_EQUAL: "!=",

    # Delimiters
    TokenKind.COMMA: ",",
    TokenKind.SEMICOLON: ";",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",

    # Keywords
    TokenKind.FUNCTION: "fn",
    TokenKind.LET: "let",
    TokenKind.TRUE: "true",
    TokenKind.FALSE: "false",
    TokenKind.IF: "if",
    TokenKind.ELSE: "else",
    TokenKind.RETURN: "return",
}

# Single characters recognised by from_char (NUL marks end of input)
SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "=": TokenKind.ASSIGN,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "\0": TokenKind.EOF,
}

# Two-character operators; the scanner performs the lookahead
TWO_CHAR_OPS: dict[str, TokenKind] = {
    "==": TokenKind.EQUAL,
    "!=": TokenKind.NOT_EQUAL,
}

# Reserved words
KEYWORDS: dict[str, TokenKind] = {
    FIXED_LITERALS[kind]: kind
    for kind in (
        TokenKind.FUNCTION,
        TokenKind.LET,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.IF,
        TokenKind.ELSE,
        TokenKind.RETURN,
    )
}

# Diagnostic names reported by token_type(); part of the render format
TYPE_NAMES: dict[TokenKind, str] = {
    TokenKind.ILLEGAL: "Illegal",
    TokenKind.EOF: "Eof",
    TokenKind.IDENT: "Identifier",
    TokenKind.INT: "Integer",
    TokenKind.ASSIGN: "Assign",
    TokenKind.PLUS: "Plus",
    TokenKind.MINUS: "Minus",
    TokenKind.BANG: "Bang",
    TokenKind.ASTERISK: "Asterisk",
    TokenKind.SLASH: "Slash",
    TokenKind.LESS_THAN: "LessThan",
    TokenKind.GREATER_THAN: "GreaterThan",
    TokenKind.EQUAL: "Equal",
    TokenKind.NOT_EQUAL: "NotEqual",
    TokenKind.COMMA: "Comma",
    TokenKind.SEMICOLON: "Semicolon",
    TokenKind.LPAREN: "LeftParen",
    TokenKind.RPAREN: "RightParen",
    TokenKind.LBRACE: "LeftBrace",
    TokenKind.RBRACE: "RightBrace",
    TokenKind.FUNCTION: "Function",
    TokenKind.LET: "Let",
    TokenKind.TRUE: "True",
    TokenKind.FALSE: "False",
    TokenKind.IF: "If",
    TokenKind.ELSE: "Else",
    TokenKind.RETURN: "Return",
}

# Characters that make a one-character unit part of a word rather than
# an operator or delimiter
WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")

ASCII_DIGITS = frozenset(string.digits)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Tokens are immutable and compare by value, so they can be shared
    freely between the scanner, the parser and any number of readers.

    Attributes:
        kind: The TokenKind classification
        text: The verbatim lexeme for IDENT and INT tokens, None otherwise
    """
    kind: TokenKind
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in PAYLOAD_KINDS:
            if not isinstance(self.text, str):
                raise TokenError(
                    f"{self.kind.name} token requires a string payload",
                    self.kind.name,
                    hint=f"use from_str() or Token.{'ident' if self.kind is TokenKind.IDENT else 'integer'}()",
                )
            if self.kind is TokenKind.INT and not is_ascii_digits(self.text):
                raise TokenError(
                    f"INT token payload {self.text!r} is not a run of ASCII digits",
                    self.kind.name,
                    hint="integer literals are non-empty runs of 0-9",
                )
            # The empty identifier is allowed: it is what from_str("") yields
            if self.kind is TokenKind.IDENT and (
                self.text in KEYWORDS
                or self.text in TWO_CHAR_OPS
                or is_ascii_digits(self.text)
            ):
                raise TokenError(
                    f"IDENT token payload {self.text!r} is reserved",
                    self.kind.name,
                    hint=f"use from_str({self.text!r}) to classify it",
                )
        elif self.text is not None:
            raise TokenError(
                f"{self.kind.name} token cannot carry a payload",
                self.kind.name,
                hint="fixed-literal tokens take their text from FIXED_LITERALS",
            )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def ident(cls, text: str) -> "Token":
        """Build an identifier token holding ``text`` verbatim."""
        return cls(TokenKind.IDENT, text)

    @classmethod
    def integer(cls, text: str) -> "Token":
        """Build an integer token holding the digit run ``text`` verbatim."""
        return cls(TokenKind.INT, text)

    @classmethod
    def of(cls, kind: TokenKind) -> "Token":
        """Build a payload-free token of the given kind."""
        return cls(kind)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def token_type(self) -> str:
        """Return the stable diagnostic name of this token's kind."""
        return TYPE_NAMES[self.kind]

    def literal(self) -> str:
        """Return the canonical source text of this token."""
        if self.text is not None:
            return self.text
        return FIXED_LITERALS[self.kind]

    def is_sentinel(self) -> bool:
        """Return True for ILLEGAL and EOF."""
        return self.kind in SENTINELS

    def has_payload(self) -> bool:
        """Return True for IDENT and INT."""
        return self.kind in PAYLOAD_KINDS

    def is_operator(self) -> bool:
        """Return True if this token is an operator."""
        return self.kind in OPERATORS

    def is_delimiter(self) -> bool:
        """Return True if this token is a delimiter."""
        return self.kind in DELIMITERS

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.kind in KEYWORD_KINDS

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        if self.text is not None:
            return f"Token({self.kind.name}, {self.text!r})"
        return f"Token({self.kind.name})"


ILLEGAL = Token(TokenKind.ILLEGAL)
EOF = Token(TokenKind.EOF)


# =============================================================================
# Classification
# =============================================================================

def from_char(ch: str) -> Token:
    """
    Classify a single character.

    Only the fourteen one-character operators and delimiters and NUL are
    recognised. Anything else, including letters, digits, control
    characters and strings that are not exactly one character long,
    yields ILLEGAL. ``==`` and ``!=`` are never produced here.

    Args:
        ch: The character to classify

    Returns:
        The matching Token, or ILLEGAL
    """
    kind = SINGLE_CHAR_TOKENS.get(ch)
    if kind is None:
        return ILLEGAL
    return Token(kind)


def is_ascii_digits(text: str) -> bool:
    """Return True if ``text`` is non-empty and made only of 0-9."""
    return bool(text) and all(ch in ASCII_DIGITS for ch in text)


def from_str(text: str, empty_as_illegal: bool = False) -> Token:
    """
    Classify an accumulated run of characters.

    The scanner has already decided where the run ends. Precedence is
    two-character operators, then keywords, then digit runs, then
    identifiers. The payload of IDENT and INT tokens is ``text`` itself.

    An empty string falls through to ``IDENT("")`` unless
    ``empty_as_illegal`` is set, in which case it is ILLEGAL.

    Args:
        text: The raw lexeme
        empty_as_illegal: Classify the empty string as ILLEGAL

    Returns:
        The classified Token
    """
    kind = TWO_CHAR_OPS.get(text) or KEYWORDS.get(text)
    if kind is not None:
        return Token(kind)

    if is_ascii_digits(text):
        return Token(TokenKind.INT, text)

    if not text and empty_as_illegal:
        return ILLEGAL

    return Token(TokenKind.IDENT, text)


# =============================================================================
# Introspection Functions
# =============================================================================

def token_type(token: Token) -> str:
    """Return the diagnostic kind name of ``token`` (e.g. "LeftParen")."""
    return token.token_type()


def literal(token: Token) -> str:
    """Return the canonical source text of ``token``."""
    return token.literal()


def render(token: Token) -> str:
    """
    Render a token for logs and traces.

    The format is fixed: ``{type: LeftParen, literal: "("}``. Tools that
    grep log output rely on this exact shape.
    """
    return f'{{type: {token.token_type()}, literal: "{token.literal()}"}}'


# =============================================================================
# Batch Classification
# =============================================================================

@dataclass(frozen=True)
class ClassifierOptions:
    """
    Options for classify_lexemes().

    Attributes:
        empty_as_illegal: Classify empty units as ILLEGAL instead of IDENT("")
        append_eof: Terminate the result with EOF if it does not end with one
    """
    empty_as_illegal: bool = False
    append_eof: bool = False


def classify_lexemes(
    units: Iterable[str],
    options: Optional[ClassifierOptions] = None,
) -> list[Token]:
    """
    Classify a sequence of raw units already delimited by a scanner.

    A one-character unit that is not a letter, digit or underscore is an
    operator, delimiter or stray symbol and goes through from_char().
    Every other unit goes through from_str().

    Example:
        >>> classify_lexemes(["let", "x", "=", "5", ";"])
        [Token(LET), Token(IDENT, 'x'), Token(ASSIGN), Token(INT, '5'), Token(SEMICOLON)]

    Args:
        units: Raw lexemes in source order
        options: Classification options (defaults to ClassifierOptions())

    Returns:
        The tokens in input order
    """
    if options is None:
        options = ClassifierOptions()

    tokens = []
    unit_count = 0
    for unit in units:
        unit_count += 1
        if len(unit) == 1 and unit not in WORD_CHARS:
            tokens.append(from_char(unit))
        else:
            tokens.append(from_str(unit, empty_as_illegal=options.empty_as_illegal))

    if options.append_eof and (not tokens or tokens[-1].kind is not TokenKind.EOF):
        tokens.append(EOF)

    illegal_count = sum(1 for token in tokens if token.kind is TokenKind.ILLEGAL)
    logger.debug(
        "Classified %d lexemes (%d illegal)", unit_count, illegal_count
    )
    return tokens

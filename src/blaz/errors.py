"""
Blaz Error Hierarchy
====================

This module defines the exception hierarchy for the Blaz token model.
All exceptions inherit from BlazError, allowing callers to catch every
package error with a single except clause if desired.

Exception Hierarchy
-------------------
BlazError (base)
└── TokenError - a Token was built directly with an inconsistent payload

Note that classification itself never raises: an unrecognised character
is returned as an ILLEGAL token, not reported as an exception. Errors
here only cover programming mistakes made when constructing tokens by hand.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class BlazError(Exception):
    """
    Base exception for all Blaz errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the message with its optional hint on a second line."""
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Token Construction Errors
# =============================================================================

class TokenError(BlazError, ValueError):
    """
    Inconsistent direct construction of a Token.

    Raised when a payload is attached to a fixed-literal kind, or when an
    IDENT/INT token is built without a string payload.

    Attributes:
        kind_name: Name of the TokenKind involved
    """

    def __init__(self, message: str, kind_name: str, hint: Optional[str] = None):
        self.kind_name = kind_name
        super().__init__(message, hint=hint)

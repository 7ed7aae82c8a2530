"""
Blaz Command-Line Interface
===========================

This package provides the command-line tools for Blaz:

- **blaztok**: classify raw lexemes and print their token renderings

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["blaztok"]

"""src/uriscan/parsing/__init__.py

Parsing layer for Uriscan.

This module provides the forward-scanning state machine that splits a URI
text into spans over its components.
"""

from .parser import Components, ParseResult, ParsingStep, Span, UriParser

__all__ = ["Components", "ParseResult", "ParsingStep", "Span", "UriParser"]

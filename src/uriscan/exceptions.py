"""src/uriscan/exceptions.py

Uriscan Exceptions hierarchy.
"""

from typing import Optional


class UriscanError(Exception):
    """Base exception for all Uriscan errors."""


class ParseError(UriscanError, ValueError):
    """
    Base exception for URI text that can not be decomposed.

    Attributes:
        uri: The text being parsed.
        position: Offset in ``uri`` where the problem was found, if known.
    """

    def __init__(
        self,
        message: str = "Malformed URI",
        uri: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.uri = uri
        self.position = position


class MalformedUserError(ParseError):
    """An '@' userinfo delimiter with no user name before it."""

    def __init__(
        self,
        message: str = "'@' symbol can not follow an empty user name",
        uri: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message, uri, position)


class MalformedQueryError(ParseError):
    """A query piece without the '=' key-value separator."""

    def __init__(
        self,
        message: str = "No equal sign in a key-value pair of the query line",
        uri: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message, uri, position)

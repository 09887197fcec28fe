"""src/uriscan/checks/characters.py

Character classes from RFC 3986 section 2.
"""

UNRESERVED_MARKS = frozenset("-._~")
SUBDELIMS = frozenset("!$&'()*+,;=")


def is_alpha(c: str) -> bool:
    """ALPHA: ``A-Z`` or ``a-z``."""
    return ("A" <= c <= "Z") or ("a" <= c <= "z")


def is_digit(c: str) -> bool:
    """DIGIT: ``0-9``."""
    return "0" <= c <= "9"


def is_hex_digit(c: str) -> bool:
    """HEXDIG: a digit or ``A-F`` in either case."""
    return is_digit(c) or ("A" <= c <= "F") or ("a" <= c <= "f")


def is_unreserved(c: str) -> bool:
    """
    Check for an unreserved character.

    unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
    """
    return is_alpha(c) or is_digit(c) or c in UNRESERVED_MARKS


def is_subdelim(c: str) -> bool:
    """
    Check for a sub-delimiter.

    sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
    """
    return c in SUBDELIMS

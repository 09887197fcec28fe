"""src/uriscan/checks/__init__.py

Grammar-level validators for Uriscan.

This module groups the RFC 3986 character classes, the host element
recognizers and the per-component compliance checks built on top of them.
"""

from .characters import is_alpha, is_digit, is_hex_digit, is_subdelim, is_unreserved
from .elements import (
    is_decimal_octet,
    is_ip_literal,
    is_ipv4,
    is_ipv6,
    is_pct_encoded,
    is_regular_name,
)

__all__ = [
    "is_alpha",
    "is_digit",
    "is_hex_digit",
    "is_unreserved",
    "is_subdelim",
    "is_decimal_octet",
    "is_ipv4",
    "is_ipv6",
    "is_ip_literal",
    "is_pct_encoded",
    "is_regular_name",
]

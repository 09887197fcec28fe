"""src/uriscan/__init__.py

Uriscan - RFC 3986 URI parser and structural accessor for Python.

Uriscan is a zero-dependency library built entirely on Python's standard
library. It splits a URI in a single forward scan, keeps every component as
a span into the original text, and checks each component against the
RFC 3986 grammar.

Key Features:
    - Zero external dependencies
    - Scheme, userinfo, host, port, path, query and fragment accessors
    - Path segments and query key-value pairs
    - IPv4, IP literal and reg-name host recognition
    - RFC 3986 compliance predicate
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Parsing::

        from uriscan import URI

        uri = URI("http://user@example.com:8080/a/b/c?x=1&y=2#frag")
        print(uri.host())        # example.com
        print(uri.port_number()) # 8080
        print(uri.queries())     # {'x': '1', 'y': '2'}

    Compliance::

        from uriscan import URI, ComplianceRules

        URI("http://[::1]:80/").is_compliant()                    # True
        URI("mailto:bob").is_compliant()                          # True
        URI("file:/etc/hosts").is_compliant()                     # False
        URI("file:/etc/hosts").is_compliant(ComplianceRules.rfc3986())  # True
"""

import logging

from uriscan.config import ComplianceRules
from uriscan.exceptions import (
    MalformedQueryError,
    MalformedUserError,
    ParseError,
    UriscanError,
)
from uriscan.parsing.parser import ParseResult
from uriscan.uri import URI
from uriscan.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "URI",
    "ComplianceRules",
    "ParseResult",
    "UriscanError",
    "ParseError",
    "MalformedUserError",
    "MalformedQueryError",
    "__version__",
]

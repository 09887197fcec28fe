"""src/uriscan/checks/components.py

Compliance checks for each URI component.
"""

from typing import FrozenSet

from .characters import is_alpha, is_digit, is_subdelim, is_unreserved
from .elements import is_ip_literal, is_ipv4, is_pct_encoded, is_regular_name

SCHEME_MARKS = frozenset("+-.")
USER_EXTRAS = frozenset(":")
# Segments keep their trailing "/", so it is admitted here.
SEGMENT_EXTRAS = frozenset(":@/")
QUERY_EXTRAS = frozenset(":@/?")


def _is_made_of(text: str, extras: FrozenSet[str]) -> bool:
    """
    Check that text only holds unreserved, sub-delims, pct-encoded or extras.
    """
    i = 0
    while i < len(text):
        c = text[i]
        if is_unreserved(c) or is_subdelim(c) or c in extras:
            i += 1
        elif is_pct_encoded(text, i):
            i += 3
        else:
            return False

    return True


def is_scheme_compliant(scheme: str) -> bool:
    """
    scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
    """
    if not scheme or not is_alpha(scheme[0]):
        return False

    return all(is_alpha(c) or is_digit(c) or c in SCHEME_MARKS for c in scheme[1:])


def is_user_compliant(user: str) -> bool:
    """
    userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
    """
    return _is_made_of(user, USER_EXTRAS)


def is_host_compliant(host: str) -> bool:
    """
    host = IP-literal / IPv4address / reg-name

    A bracket anywhere in the host means it can only be an IP-literal.
    """
    if "[" in host:
        return is_ip_literal(host)

    return is_ipv4(host) or is_regular_name(host)


def is_port_compliant(port: str) -> bool:
    """port = *DIGIT"""
    return all(is_digit(c) for c in port)


def is_segment_compliant(segment: str) -> bool:
    """
    segment = *pchar, plus the trailing "/" kept with each segment.
    """
    return _is_made_of(segment, SEGMENT_EXTRAS)


def is_query_compliant(query: str) -> bool:
    """query = *( pchar / "/" / "?" )"""
    return _is_made_of(query, QUERY_EXTRAS)


def is_fragment_compliant(fragment: str) -> bool:
    """fragment = *( pchar / "/" / "?" )"""
    return _is_made_of(fragment, QUERY_EXTRAS)

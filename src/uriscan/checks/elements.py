"""src/uriscan/checks/elements.py

Recognizers for the host elements of RFC 3986 section 3.2.2.
"""

from typing import List

from .characters import is_digit, is_hex_digit, is_subdelim, is_unreserved


def is_pct_encoded(text: str, index: int) -> bool:
    """
    Check whether a percent-encoded triple starts at ``index``.

    pct-encoded = "%" HEXDIG HEXDIG

    Args:
        text: Text to inspect.
        index: Position of the candidate ``%``.

    Returns:
        True if ``text[index:index + 3]`` is ``%`` followed by two hex digits.
    """
    return (
        index + 2 < len(text)
        and text[index] == "%"
        and is_hex_digit(text[index + 1])
        and is_hex_digit(text[index + 2])
    )


def is_decimal_octet(element: str) -> bool:
    """
    Check for a dec-octet: a decimal value between 0 and 255.

    Leading zeros are not allowed, so ``"0"`` is valid but ``"00"`` is not.
    """
    if not 0 < len(element) <= 3:
        return False
    if not all(is_digit(c) for c in element):
        return False

    value = int(element)
    if len(element) == 1:
        return True
    if len(element) == 2:
        return 10 <= value <= 99
    return 100 <= value <= 255


def is_ipv4(element: str) -> bool:
    """
    Check for an IPv4address: four dec-octets joined by single dots.
    """
    octets: List[str] = []
    last = 0
    for i, c in enumerate(element):
        if c == ".":
            octets.append(element[last:i])
            last = i + 1
        elif not is_digit(c):
            return False
    octets.append(element[last:])

    return len(octets) == 4 and all(is_decimal_octet(octet) for octet in octets)


def is_ipv6(element: str) -> bool:
    """
    Permissive IPv6address check.

    Only the alphabet is verified: hex digits and colons, optionally followed
    by a dotted IPv4 tail once at least one colon was seen. Group counts and
    ``::`` compression are not checked.
    """
    seen_colon = False
    seen_dot = False
    for c in element:
        if is_hex_digit(c):
            continue
        if c == ":" and not seen_dot:
            seen_colon = True
            continue
        if c == "." and seen_colon:
            seen_dot = True
            continue
        return False

    return True


def is_ip_literal(element: str) -> bool:
    """
    Check for an IP-literal: a non-empty IPv6 address between brackets.
    """
    if len(element) < 2 or element[0] != "[" or element[-1] != "]":
        return False

    address = element[1:-1]
    return bool(address) and is_ipv6(address)


def is_regular_name(element: str) -> bool:
    """
    Check for a reg-name.

    reg-name = *( unreserved / pct-encoded / sub-delims )

    An empty name is valid.
    """
    i = 0
    while i < len(element):
        c = element[i]
        if is_unreserved(c) or is_subdelim(c):
            i += 1
        elif is_pct_encoded(element, i):
            i += 3
        else:
            return False

    return True

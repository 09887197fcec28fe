"""tests/unit/test_components.py"""

import pytest

from uriscan.checks.components import (
    is_fragment_compliant,
    is_host_compliant,
    is_port_compliant,
    is_query_compliant,
    is_scheme_compliant,
    is_segment_compliant,
    is_user_compliant,
)


@pytest.mark.parametrize(
    "scheme, expected",
    [
        ("http", True),
        ("svn+ssh", True),
        ("coap.tcp", True),
        ("x-custom", True),
        ("h2", True),
        ("", False),
        ("2http", False),
        ("+http", False),
        ("ht tp", False),
        ("ht_tp", False),
        ("htt%70", False),
    ],
)
def test_is_scheme_compliant(scheme, expected):
    """scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )"""
    assert is_scheme_compliant(scheme) is expected


@pytest.mark.parametrize(
    "user, expected",
    [
        ("", True),
        ("user", True),
        ("user:password", True),
        ("us%40er", True),
        ("a!$&'()*+,;=", True),
        ("us er", False),
        ("us@er", False),
        ("us%4", False),
        ("us/er", False),
    ],
)
def test_is_user_compliant(user, expected):
    """userinfo = *( unreserved / pct-encoded / sub-delims / ":" )"""
    assert is_user_compliant(user) is expected


@pytest.mark.parametrize(
    "host, expected",
    [
        ("example.com", True),
        ("192.168.0.1", True),
        ("999.1.1.1", True),  # not an IPv4address but a valid reg-name
        ("[::1]", True),
        ("[2001:db8::1]", True),
        ("ex%2Dample", True),
        ("[::1", False),
        ("a[::1]", False),
        ("[zz]", False),
        ("exa mple", False),
        ("exämple.com", False),
    ],
)
def test_is_host_compliant(host, expected):
    """host = IP-literal / IPv4address / reg-name"""
    assert is_host_compliant(host) is expected


@pytest.mark.parametrize(
    "port, expected",
    [("", True), ("80", True), ("65536", True), ("8o", False), ("-1", False), (" 80", False)],
)
def test_is_port_compliant(port, expected):
    """port = *DIGIT, the value is not range checked."""
    assert is_port_compliant(port) is expected


@pytest.mark.parametrize(
    "segment, expected",
    [
        ("", True),
        ("a/", True),
        ("/", True),
        ("file.txt", True),
        ("user@host:port", True),
        ("%7Euser", True),
        ("a b", False),
        ("a?b", False),
        ("a#b", False),
        ("a%g0", False),
        ("[x]", False),
    ],
)
def test_is_segment_compliant(segment, expected):
    """Segments are pchar plus their trailing "/"."""
    assert is_segment_compliant(segment) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", True),
        ("x=1&y=2", True),
        ("next=/a/b?c", True),
        ("mail=a@b:c", True),
        ("q=%20", True),
        ("q=a b", False),
        ("q=a#b", False),
        ("q=%2", False),
        ("q=[1]", False),
        ("q=é", False),
    ],
)
def test_query_and_fragment_share_rules(text, expected):
    """query and fragment = *( pchar / "/" / "?" )"""
    assert is_query_compliant(text) is expected
    assert is_fragment_compliant(text) is expected

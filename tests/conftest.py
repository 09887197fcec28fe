import pytest

from uriscan import URI

FULL_URI = "http://user@example.com:8080/a/b/c?x=1&y=2#frag"


@pytest.fixture
def full_uri() -> URI:
    """URI holding every component."""
    return URI(FULL_URI)


@pytest.fixture
def empty_uri() -> URI:
    """URI parsed from an empty string."""
    return URI("")

"""src/uriscan/uri.py

URI value object for Uriscan.
"""

from typing import Any, Dict, Optional

from uriscan.checks.components import (
    is_fragment_compliant,
    is_host_compliant,
    is_port_compliant,
    is_query_compliant,
    is_scheme_compliant,
    is_segment_compliant,
    is_user_compliant,
)
from uriscan.config import ComplianceRules
from uriscan.parsing.parser import SCHEME_SEP, Components, ParseResult, Span, UriParser

__all__ = ["URI"]


class URI:
    """
    A URI decomposed into its RFC 3986 components.

    The text is parsed once on construction; every component is kept as a
    span into that text. Accessors return copies, so the values they give
    stay valid after ``set_scheme()`` or ``clear()``.

    Example::

        uri = URI("http://user@example.com:8080/a/b/c?x=1&y=2#frag")
        uri.host()        # "example.com"
        uri.path(1)       # "b/"
        uri.queries()     # {"x": "1", "y": "2"}
        uri.is_compliant()  # True

    Raises:
        TypeError: If ``uri`` is not a string.
        MalformedUserError: If an '@' has no user name before it.
        MalformedQueryError: If a query piece has no '='.
    """

    __slots__ = ("_uri", "_components", "parse_result")

    def __init__(self, uri: str = ""):
        if not isinstance(uri, str):
            raise TypeError(f"URI text must be str, not {type(uri).__name__}")

        self._uri = uri
        self._components = Components()
        self.parse_result = self._parse(uri)

    def _parse(self, uri: str, scheme_length: Optional[int] = None) -> ParseResult:
        parser = UriParser(uri, scheme_length)
        result = parser.parse()
        self._uri = uri
        self._components = parser.components
        return result

    def _text(self, span: Span) -> str:
        return span.of(self._uri)

    def _optional(self, span: Span) -> Optional[str]:
        if span.is_empty:
            return None
        return span.of(self._uri)

    def __str__(self) -> str:
        return self._uri

    def __repr__(self) -> str:
        return f"URI({self._uri!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, URI):
            return NotImplemented
        return self._uri == other._uri

    def scheme(self) -> Optional[str]:
        """Scheme without its ':' separator, None if absent."""
        return self._optional(self._components.scheme)

    def user(self) -> Optional[str]:
        """Userinfo without its '@' separator, None if absent."""
        return self._optional(self._components.user)

    def host(self) -> Optional[str]:
        """Host, brackets included for IP literals. None if absent."""
        return self._optional(self._components.host)

    def port(self) -> str:
        """Port digits as written, empty string if absent."""
        return self._text(self._components.port)

    def port_number(self) -> int:
        """
        Port as an integer.

        Returns:
            The port value, 0 if absent.

        Raises:
            ValueError: If the port text is not a decimal number.
        """
        port = self.port()
        if not port:
            return 0
        try:
            return int(port)
        except ValueError as exc:
            raise ValueError(f"Port {port!r} is not a decimal number") from exc

    def path(self, index: Optional[int] = None) -> Optional[str]:
        """
        Whole path, or one of its segments.

        Args:
            index: Segment to return. Indices past the end are clamped to
                the last segment.

        Returns:
            The path (or the segment) text, None if there is no path. A path
            made only of the "/" following an authority has no segments, its
            segments read as an empty string.
        """
        components = self._components
        if components.path.is_empty:
            return None
        if index is None:
            return self._text(components.path)

        segments = components.path_segments
        if not segments:
            return ""
        return self._text(segments[self._clamp(index)])

    def path_until(self, index: int) -> Optional[str]:
        """
        Path prefix up to and including a segment.

        Args:
            index: Last segment to include, clamped to the last segment.

        Returns:
            The prefix (leading "/" included), None if there is no path.
        """
        components = self._components
        if components.path.is_empty:
            return None

        segments = components.path_segments
        if not segments:
            return self._text(components.path)
        stop = segments[self._clamp(index)].stop
        return self._uri[components.path.start : stop]

    def path_size(self) -> Optional[int]:
        """Number of path segments, None if there is no path."""
        if self._components.path.is_empty:
            return None
        return len(self._components.path_segments)

    def _clamp(self, index: int) -> int:
        if index < 0:
            raise ValueError(f"Segment index must be non-negative, got {index}")
        return min(index, len(self._components.path_segments) - 1)

    def query_line(self) -> Optional[str]:
        """Raw query text after '?', None if absent."""
        return self._optional(self._components.query_line)

    def queries(self) -> Optional[Dict[str, str]]:
        """Query key-value pairs, None if there is no query."""
        pairs = self._components.queries
        if not pairs:
            return None
        return {self._text(key): self._text(value) for key, value in pairs}

    def fragment(self) -> Optional[str]:
        """Fragment without its '#', None if absent."""
        return self._optional(self._components.fragment)

    def has_authority(self) -> bool:
        # a host is the minimum for an authority to be found
        return not self._components.host.is_empty

    def has_queries(self) -> bool:
        return bool(self._components.queries)

    def has_path(self) -> bool:
        return not self._components.path.is_empty

    def has_fragment(self) -> bool:
        return not self._components.fragment.is_empty

    def is_absolute_path(self) -> bool:
        return self._components.is_absolute_path

    def is_compliant(self, rules: Optional[ComplianceRules] = None) -> bool:
        """
        Check the URI against the RFC 3986 grammar.

        By default a scheme and a host are both required, which is stricter
        than RFC 3986 where the authority is optional.

        Args:
            rules: Requirements to apply, ``ComplianceRules.default()`` if None.

        Returns:
            True if every component is compliant.
        """
        rules = rules or ComplianceRules.default()
        components = self._components
        scheme = self._text(components.scheme)
        host = self._text(components.host)

        if scheme or rules.require_scheme:
            if not is_scheme_compliant(scheme):
                return False
        if host or rules.require_host:
            if not host or not is_host_compliant(host):
                return False

        return (
            is_user_compliant(self._text(components.user))
            and is_port_compliant(self._text(components.port))
            and all(is_segment_compliant(self._text(s)) for s in components.path_segments)
            and is_query_compliant(self._text(components.query_line))
            and is_fragment_compliant(self._text(components.fragment))
        )

    def set_scheme(self, new_scheme: str) -> None:
        """
        Replace the scheme, or prepend one followed by ':' if there is none.

        The text is parsed again with ``new_scheme`` kept as its scheme, even
        where the text alone would read otherwise (``"http:"`` or
        ``"http:8080"``). ``new_scheme`` is not validated, use
        ``is_compliant()`` afterwards.
        """
        scheme = self._components.scheme
        if scheme.is_empty:
            uri = new_scheme + SCHEME_SEP + self._uri
        else:
            uri = self._uri[: scheme.start] + new_scheme + self._uri[scheme.stop :]

        self.parse_result = self._parse(uri, len(new_scheme))

    def string(self) -> str:
        """The URI text."""
        return self._uri

    def clear(self) -> None:
        """Drop the text and every component."""
        self._uri = ""
        self._components = Components()
        self.parse_result = ParseResult.EMPTY_INPUT

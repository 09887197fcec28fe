"""src/uriscan/parsing/parser.py

Single-pass URI decomposition.

The parser walks the text once, moving a cursor through seven states, and
records every component as a ``Span`` of offsets into the original text.
No substring is copied while parsing; text is materialized on demand.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Set, Tuple

from uriscan.checks.characters import is_digit
from uriscan.checks.components import is_scheme_compliant
from uriscan.exceptions import MalformedQueryError, MalformedUserError

logger = logging.getLogger(__name__)

SCHEME_SEP = ":"
AUTHORITY_MARK = "//"
USER_SEP = "@"
PORT_SEP = ":"
PATH_SEP = "/"
QUERY_MARK = "?"
QUERY_SEP = "&"
FRAGMENT_MARK = "#"
KV_SEP = "="

AUTHORITY_END = PATH_SEP + QUERY_MARK + FRAGMENT_MARK
PATH_END = QUERY_MARK + FRAGMENT_MARK


class Span(NamedTuple):
    """Half-open ``[start, stop)`` range of offsets into the URI text."""

    start: int
    stop: int

    @property
    def size(self) -> int:
        return self.stop - self.start

    @property
    def is_empty(self) -> bool:
        return self.stop <= self.start

    def of(self, text: str) -> str:
        """Materialize the span over ``text``."""
        return text[self.start : self.stop]


EMPTY = Span(0, 0)


class ParseResult(Enum):
    """Outcome of a parse that did not raise."""

    NO_ERROR = "no_error"
    EMPTY_INPUT = "empty_input"


class ParsingStep(Enum):
    """States of the parser."""

    SCHEME = "scheme"
    CHECK_AUTHORITY = "check_authority"
    AUTHORITY = "authority"
    CHECK_SEPARATOR = "check_separator"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"


@dataclass
class Components:
    """
    Spans of every component found in a URI text.

    Attributes:
        path_segments: Segments of the path, each one keeping its trailing
            "/" except the last. The "/" separating an authority from its
            path belongs to ``path`` but to no segment.
        queries: (key, value) pairs in order of appearance, unique by key
            text. The first occurrence of a key wins.
    """

    scheme: Span = EMPTY
    user: Span = EMPTY
    host: Span = EMPTY
    port: Span = EMPTY
    path: Span = EMPTY
    query_line: Span = EMPTY
    fragment: Span = EMPTY
    path_segments: List[Span] = field(default_factory=list)
    queries: List[Tuple[Span, Span]] = field(default_factory=list)
    is_absolute_path: bool = False


class UriParser:
    """
    Forward-scanning URI parser.

    Handles:
    - "scheme://authority" and opaque "scheme:" prefixes.
    - Authorities with or without a leading "//".
    - Bracketed IP literals in the host.
    - Path segmentation and key=value query splitting.
    """

    __slots__ = ("text", "components", "scheme_length")

    def __init__(self, text: str, scheme_length: Optional[int] = None):
        """
        Args:
            text: URI text to parse.
            scheme_length: Length of a scheme known to start the text and to be
                followed by ":". The scheme is then taken as is instead of
                being detected.
        """
        self.text = text
        self.components = Components()
        self.scheme_length = scheme_length

    def parse(self) -> ParseResult:
        """
        Decompose the text into ``self.components``.

        Returns:
            ParseResult.EMPTY_INPUT for an empty text, ParseResult.NO_ERROR
            otherwise.

        Raises:
            MalformedUserError: If an '@' has no user name before it.
            MalformedQueryError: If a query piece has no '='.
        """
        if not self.text:
            logger.debug("Empty URI, nothing to parse")
            return ParseResult.EMPTY_INPUT

        pos = 0
        end = len(self.text)
        step = ParsingStep.SCHEME

        while pos < end:
            logger.debug("Parsing step %s at offset %d", step.name, pos)

            if step is ParsingStep.SCHEME:
                pos = self._parse_scheme(pos)
                step = ParsingStep.CHECK_AUTHORITY
            elif step is ParsingStep.CHECK_AUTHORITY:
                step, pos = self._check_authority(pos)
            elif step is ParsingStep.AUTHORITY:
                pos = self._parse_authority(pos)
                step = ParsingStep.CHECK_SEPARATOR
            elif step is ParsingStep.CHECK_SEPARATOR:
                step, pos = self._check_separator(pos)
            elif step is ParsingStep.PATH:
                pos = self._parse_path(pos)
                step = ParsingStep.CHECK_SEPARATOR
            elif step is ParsingStep.QUERY:
                pos = self._parse_query(pos)
                step = ParsingStep.FRAGMENT
            else:
                pos = self._parse_fragment(pos)

        logger.debug("Parsed %r into %r", self.text, self.components)
        return ParseResult.NO_ERROR

    def _find_any(self, chars: str, start: int) -> int:
        """Index of the first of ``chars`` at or after ``start``, else the end."""
        text = self.text
        for i in range(start, len(text)):
            if text[i] in chars:
                return i
        return len(text)

    def _parse_scheme(self, pos: int) -> int:
        text = self.text
        components = self.components

        if self.scheme_length is not None:
            components.scheme = Span(pos, pos + self.scheme_length)
            return pos + self.scheme_length + len(SCHEME_SEP)

        # search for "http://...", "https://..." or "ldap://..."
        sep = text.find(SCHEME_SEP + AUTHORITY_MARK, pos)
        if sep != -1 and self._find_any(AUTHORITY_END, pos) > sep:
            components.scheme = Span(pos, sep)
            return sep + len(SCHEME_SEP)

        # search for "mailto:...", "urn:..." or "file:/..."
        colon = text.find(SCHEME_SEP, pos)
        if colon > pos and self._is_opaque_scheme(pos, colon):
            components.scheme = Span(pos, colon)
            return colon + len(SCHEME_SEP)

        return pos

    def _is_opaque_scheme(self, pos: int, colon: int) -> bool:
        """
        Tell a "scheme:" prefix apart from a "host:port" authority.
        """
        text = self.text
        if not is_scheme_compliant(text[pos:colon]):
            return False

        if colon + 1 == len(text):
            return False

        rest = text[colon + 1 : self._find_any(AUTHORITY_END, colon + 1)]
        return not rest or not all(is_digit(c) for c in rest)

    def _check_authority(self, pos: int) -> Tuple[ParsingStep, int]:
        text = self.text

        has_mark = text.startswith(AUTHORITY_MARK, pos)
        if has_mark and len(text) - pos > len(AUTHORITY_MARK):
            return ParsingStep.AUTHORITY, pos + len(AUTHORITY_MARK)

        next_sep = text.find(PATH_SEP, pos)
        if (
            next_sep == -1  # no path at all
            or next_sep > pos  # characters before the path
            or next_sep + 1 == len(text)  # trailing separator
        ):
            return ParsingStep.AUTHORITY, pos

        return ParsingStep.CHECK_SEPARATOR, pos

    def _parse_authority(self, pos: int) -> int:
        text = self.text
        components = self.components
        end = self._find_any(AUTHORITY_END, pos)

        host_start = pos
        at = text.find(USER_SEP, pos, end)
        if at != -1:
            if at == pos:
                logger.debug("Empty user name before '@' at offset %d", at)
                raise MalformedUserError(
                    f"'@' symbol can not follow an empty user name (offset {at})",
                    uri=text,
                    position=at,
                )
            components.user = Span(pos, at)
            host_start = at + len(USER_SEP)

        if host_start < end:
            self._parse_host(host_start, end)

        orphaned = not (components.user.is_empty and components.port.is_empty)
        if components.host.is_empty and orphaned:
            logger.debug("Authority %r has no host, dropping user and port", text[pos:end])
            components.user = EMPTY
            components.port = EMPTY

        return end

    def _parse_host(self, start: int, end: int) -> None:
        text = self.text
        components = self.components

        # An IP literal holds colons of its own: the port separator must
        # follow the closing bracket.
        search_from = start
        if text.startswith("[", start):
            close = text.find("]", start, end)
            if close != -1:
                search_from = close + 1

        colon = text.rfind(PORT_SEP, search_from, end)
        if colon == -1:
            components.host = Span(start, end)
        else:
            components.host = Span(start, colon)
            components.port = Span(colon + len(PORT_SEP), end)

    def _check_separator(self, pos: int) -> Tuple[ParsingStep, int]:
        head = self.text[pos]
        if head == PATH_SEP:
            return ParsingStep.PATH, pos
        if head == QUERY_MARK:
            return ParsingStep.QUERY, pos + len(QUERY_MARK)
        # only "#" is left
        return ParsingStep.FRAGMENT, pos + len(FRAGMENT_MARK)

    def _parse_path(self, pos: int) -> int:
        text = self.text
        components = self.components
        end = self._find_any(PATH_END, pos)

        components.path = Span(pos, end)
        components.is_absolute_path = text.startswith(PATH_SEP, pos)

        start = pos
        if not components.host.is_empty and components.is_absolute_path:
            start += len(PATH_SEP)

        segments = components.path_segments
        while start < end:
            sep = text.find(PATH_SEP, start, end)
            if sep == -1:
                # last segment, a file or else
                segments.append(Span(start, end))
                break
            segments.append(Span(start, sep + 1))
            start = sep + 1

        return end

    def _parse_query(self, pos: int) -> int:
        """
        Split the query line into key=value pairs.

        Every piece between "&" must hold a "=". A trailing "&" leaves an
        empty last piece and is rejected like any other piece without "=".
        """
        text = self.text
        components = self.components
        end = text.find(FRAGMENT_MARK, pos)
        if end == -1:
            end = len(text)

        components.query_line = Span(pos, end)

        seen: Set[str] = set()
        start = pos
        while start < end:
            amp = text.find(QUERY_SEP, start, end)
            stop = end if amp == -1 else amp

            equal = text.find(KV_SEP, start, stop)
            if equal == -1:
                logger.debug("Query piece %r has no '='", text[start:stop])
                raise MalformedQueryError(
                    f"No equal sign in key-value pair {text[start:stop]!r} of the query line",
                    uri=text,
                    position=start,
                )

            key = text[start:equal]
            if key not in seen:
                seen.add(key)
                components.queries.append((Span(start, equal), Span(equal + 1, stop)))

            if amp == -1:
                break
            start = amp + len(QUERY_SEP)
            if start == end:
                # a trailing "&" leaves an empty, hence malformed, piece
                raise MalformedQueryError(
                    "Empty key-value pair at the end of the query line",
                    uri=text,
                    position=start,
                )

        if end < len(text):
            return end + len(FRAGMENT_MARK)
        return end

    def _parse_fragment(self, pos: int) -> int:
        # should be the last element in the URI
        self.components.fragment = Span(pos, len(self.text))
        return len(self.text)

"""State-machine lexer for interfaces documents.

Splits the source into physical lines, classifies each one, then updates
the mode. A line that matches nothing raises ParseError immediately.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; the directive keywords are read from the
context-local ParseConfig when tokenizing starts.

"""

from __future__ import annotations

from collections.abc import Iterator

from ifupdown_interfaces.config import get_parse_config
from ifupdown_interfaces.errors import ParseError
from ifupdown_interfaces.lexer.classifiers import (
    CommentClassifierMixin,
    DirectiveClassifierMixin,
    IfaceClassifierMixin,
    SettingClassifierMixin,
)
from ifupdown_interfaces.lexer.modes import LexerMode
from ifupdown_interfaces.tokens import Line, LineType


class Lexer(
    CommentClassifierMixin,
    DirectiveClassifierMixin,
    IfaceClassifierMixin,
    SettingClassifierMixin,
):
    """Line classifier with a two-state mode.

    Classification order, first match wins:
    1. Blank or ``#`` comment (any mode)
    2. Single-line directive (closes the open stanza)
    3. ``iface`` header (opens a new stanza, replacing any open one)
    4. ``key value`` setting (only inside a stanza)

    Usage:
            >>> lexer = Lexer("auto lo\\niface lo inet loopback")
            >>> for line in lexer.tokenize():
            ...     print(line)
        Line(SINGLE, 'auto lo', 1)
        Line(IFACE, 'iface lo inet loopback', 2)

    """

    __slots__ = ("_source", "_source_file", "_mode")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Interfaces document text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._mode = LexerMode.TOP_LEVEL

    @property
    def mode(self) -> LexerMode:
        return self._mode

    def tokenize(self) -> Iterator[Line]:
        """Yield one classified Line per physical line.

        Raises:
            ParseError: On the first line that matches no rule.
        """
        keys = get_parse_config().directive_keys
        self._mode = LexerMode.TOP_LEVEL

        for lineno, physical in enumerate(self._source.split("\n"), start=1):
            raw = physical.rstrip()
            yield self._classify(raw, raw.strip(), lineno, keys)

    def _classify(self, raw: str, stripped: str, lineno: int, keys: frozenset[str]) -> Line:
        line = self._try_classify_comment(raw, stripped, lineno)
        if line is not None:
            return line

        line = self._try_classify_directive(raw, stripped, lineno, keys)
        if line is not None:
            self._mode = LexerMode.TOP_LEVEL
            return line

        line = self._try_classify_iface(raw, stripped, lineno)
        if line is not None:
            self._mode = LexerMode.IFACE
            return line

        if self._mode is LexerMode.IFACE:
            line = self._try_classify_setting(raw, stripped, lineno)
            if line is not None:
                return line

        raise ParseError(
            f"Unrecognized line: {stripped!r}",
            line=stripped,
            lineno=lineno,
            source_file=self._source_file,
        )

    def _make_line(self, line_type: LineType, raw: str, lineno: int, **fields: object) -> Line:
        return Line(line_type, raw, lineno, **fields)  # type: ignore[arg-type]

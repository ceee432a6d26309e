"""Blank line and comment classifier mixin."""

from __future__ import annotations

from ifupdown_interfaces.tokens import Line, LineType


class CommentClassifierMixin:
    """Mixin providing blank line and ``#`` comment classification."""

    def _make_line(self, line_type: LineType, raw: str, lineno: int, **fields: object) -> Line:
        """Create a Line token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_comment(self, raw: str, stripped: str, lineno: int) -> Line | None:
        """Try to classify a line as blank or comment.

        Args:
            raw: Line with trailing whitespace removed
            stripped: Line with surrounding whitespace removed
            lineno: 1-indexed line number

        Returns:
            Line if blank or comment, None otherwise.
        """
        if stripped and not stripped.startswith("#"):
            return None
        return self._make_line(LineType.COMMENT, raw, lineno)

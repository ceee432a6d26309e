"""Interface stanza header classifier mixin."""

from __future__ import annotations

import re

from ifupdown_interfaces.lexer.classifiers.directive import split_options
from ifupdown_interfaces.tokens import Line, LineType

_IFACE_RE = re.compile(r"^iface\s+(\S+)\s+(.+)$")


class IfaceClassifierMixin:
    """Mixin providing ``iface <name> <options>`` classification."""

    def _make_line(self, line_type: LineType, raw: str, lineno: int, **fields: object) -> Line:
        """Create a Line token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_iface(self, raw: str, stripped: str, lineno: int) -> Line | None:
        """Try to classify a line as an interface header.

        The name is the first non-whitespace run after ``iface``; the rest of
        the line is split into options.

        Returns:
            Line if an iface header, None otherwise.
        """
        m = _IFACE_RE.match(stripped)
        if m is None:
            return None
        return self._make_line(
            LineType.IFACE,
            raw,
            lineno,
            key=m.group(1),
            options=split_options(m.group(2)),
        )

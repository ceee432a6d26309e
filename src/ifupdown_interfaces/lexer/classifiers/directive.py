"""Single-line directive classifier mixin.

Directives are top-level lines such as ``auto lo`` or
``source /etc/network/interfaces.d/*``. The recognised keywords come from
the active ParseConfig.
"""

from __future__ import annotations

import re
from functools import lru_cache

from ifupdown_interfaces.tokens import Line, LineType


@lru_cache(maxsize=8)
def _directive_pattern(keys: frozenset[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(key) for key in sorted(keys))
    return re.compile(rf"^({alternatives})\s+(.+)$")


def split_options(remainder: str) -> tuple[str, ...]:
    """Split an option remainder on single spaces, trimming each token.

    Consecutive spaces produce empty tokens, so ``"inet  dhcp"`` splits into
    ``("inet", "", "dhcp")``.
    """
    return tuple(token.strip() for token in remainder.split(" "))


class DirectiveClassifierMixin:
    """Mixin providing single-line directive classification."""

    def _make_line(self, line_type: LineType, raw: str, lineno: int, **fields: object) -> Line:
        """Create a Line token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_directive(
        self, raw: str, stripped: str, lineno: int, keys: frozenset[str]
    ) -> Line | None:
        """Try to classify a line as a single-line directive.

        Args:
            raw: Line with trailing whitespace removed
            stripped: Line with surrounding whitespace removed
            lineno: 1-indexed line number
            keys: Directive keywords to recognise

        Returns:
            Line if a directive, None otherwise.
        """
        if not keys:
            return None
        m = _directive_pattern(keys).match(stripped)
        if m is None:
            return None
        return self._make_line(
            LineType.SINGLE,
            raw,
            lineno,
            key=m.group(1),
            options=split_options(m.group(2)),
        )

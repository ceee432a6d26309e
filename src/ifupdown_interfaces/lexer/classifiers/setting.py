"""Interface setting classifier mixin."""

from __future__ import annotations

import re

from ifupdown_interfaces.tokens import Line, LineType

_SETTING_RE = re.compile(r"^(\S+)\s+(.+)$")


class SettingClassifierMixin:
    """Mixin providing ``<key> <value>`` classification inside a stanza."""

    def _make_line(self, line_type: LineType, raw: str, lineno: int, **fields: object) -> Line:
        """Create a Line token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_setting(self, raw: str, stripped: str, lineno: int) -> Line | None:
        """Try to classify a line as a key/value setting.

        The value is the unsplit remainder, so ``bridge_ports eno1 eno2``
        yields key ``bridge_ports`` and value ``eno1 eno2``.

        Returns:
            Line if a setting, None otherwise.
        """
        m = _SETTING_RE.match(stripped)
        if m is None:
            return None
        return self._make_line(
            LineType.SETTING,
            raw,
            lineno,
            key=m.group(1),
            value=m.group(2),
        )

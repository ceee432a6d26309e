"""Lexer operating modes.

This module defines the finite state machine modes for the lexer.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - TOP_LEVEL: No interface stanza is open; settings are not accepted
    - IFACE: Inside an ``iface`` stanza; ``key value`` lines are settings

    """

    TOP_LEVEL = auto()
    IFACE = auto()

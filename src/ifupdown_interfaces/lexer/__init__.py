"""Line lexer for interfaces documents.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + mode switching)
├── modes.py             # LexerMode enum
└── classifiers/         # One mixin per line type
    ├── comment.py       # Blank lines and # comments
    ├── directive.py     # auto / source / allow-hotplug
    ├── iface.py         # iface headers
    └── setting.py       # key/value settings

Usage:
    >>> from ifupdown_interfaces.lexer import Lexer
    >>> [line.type.name for line in Lexer("auto eth0\\n").tokenize()]
    ['SINGLE', 'COMMENT']

"""

from ifupdown_interfaces.lexer.core import Lexer
from ifupdown_interfaces.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]

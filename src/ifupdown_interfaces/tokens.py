"""Line and LineType definitions for the interfaces lexer.

The lexer produces one Line token per physical line of the document.
The parser consumes them in order to build blocks.

Thread Safety:
Line is frozen (immutable) and safe to share across threads.
LineType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineType(Enum):
    """Line classes produced by the lexer."""

    COMMENT = auto()  # blank or # comment
    SINGLE = auto()  # auto / source / allow-hotplug ...
    IFACE = auto()  # iface <name> <options>
    SETTING = auto()  # <key> <value> inside an iface stanza


@dataclass(frozen=True, slots=True)
class Line:
    """A classified physical line.

    Attributes:
        type: What the line is
        raw: The line with trailing whitespace removed (verbatim text)
        lineno: 1-indexed line number in the source
        key: Directive keyword, interface name or setting key ("" for comments)
        options: Tokens split from the remainder (directives and ifaces)
        value: Unsplit remainder (settings)

    """

    type: LineType
    raw: str
    lineno: int
    key: str = ""
    options: tuple[str, ...] = ()
    value: str = ""

    def __repr__(self) -> str:
        return f"Line({self.type.name}, {self.raw!r}, {self.lineno})"

"""Block model for interfaces documents.

A document is a flat list of blocks, one of three variants:

Block
├── CommentBlock      blank line or # comment at top level
├── SingleLineBlock   auto / source / allow-hotplug directive
└── IfaceBlock        iface stanza with nested Settings

Blocks are mutable dataclasses so callers can edit them in place.
Each block keeps the verbatim ``text`` it was parsed from and an optional
``snapshot`` of itself taken at parse time. Neither takes part in equality,
so comparing a block with its snapshot compares structure only.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, TypeAlias


class BlockType(Enum):
    """Variant tag carried by every block."""

    COMMENT = auto()
    SINGLE = auto()
    IFACE = auto()


@dataclass(slots=True)
class Setting:
    """One line nested under an iface stanza.

    A comment-setting (``comment=True``) holds a blank or ``#`` line in
    ``value`` and renders indented. Otherwise ``key`` is the first token and
    ``value`` the unsplit remainder of the line.

    """

    key: str = ""
    value: str = ""
    comment: bool = False

    @classmethod
    def comment_line(cls, value: str) -> Setting:
        return cls(value=value, comment=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Setting:
        """Create a Setting from a ``{comment, key, value}`` mapping.

        Example:
            >>> Setting.from_dict({"key": "address", "value": "10.0.0.1/24"})
            Setting(key='address', value='10.0.0.1/24', comment=False)

        """
        return cls(
            key=data.get("key", ""),
            value=data.get("value", ""),
            comment=bool(data.get("comment", False)),
        )


@dataclass(slots=True)
class CommentBlock:
    """Top-level blank line or comment.

    The raw line is all there is, so a parsed comment never counts as changed.

    """

    type: ClassVar[BlockType] = BlockType.COMMENT

    text: str = field(default="", compare=False)
    snapshot: CommentBlock | None = field(default=None, compare=False, repr=False)


@dataclass(slots=True)
class SingleLineBlock:
    """Top-level directive.

    Text: ``auto eth0 eth1``
    Fields: key='auto', options=['eth0', 'eth1']

    """

    type: ClassVar[BlockType] = BlockType.SINGLE

    key: str
    options: list[str] = field(default_factory=list)
    text: str = field(default="", compare=False)
    snapshot: SingleLineBlock | None = field(default=None, compare=False, repr=False)


@dataclass(slots=True)
class IfaceBlock:
    """Interface stanza.

    Text:
        iface eth0 inet static
            address 192.168.1.10/24
            gateway 192.168.1.1

    Fields: name='eth0', options=['inet', 'static'], settings=[...]

    """

    type: ClassVar[BlockType] = BlockType.IFACE

    name: str
    options: list[str] = field(default_factory=list)
    settings: list[Setting] = field(default_factory=list)
    text: str = field(default="", compare=False)
    snapshot: IfaceBlock | None = field(default=None, compare=False, repr=False)


# PEP 695 type alias for the block union
Block: TypeAlias = CommentBlock | SingleLineBlock | IfaceBlock

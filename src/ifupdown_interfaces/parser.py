"""Block parser for interfaces documents.

Consumes the Line stream from the Lexer and builds the block list.
The only state is the currently open iface stanza, held in a local
variable while the lines are folded into blocks:

- comment lines attach to the open stanza, or become CommentBlocks
- directives close the open stanza
- iface headers replace the open stanza
- settings append to the open stanza

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
parse operation.

"""

from __future__ import annotations

from ifupdown_interfaces.lexer import Lexer
from ifupdown_interfaces.nodes import (
    Block,
    CommentBlock,
    IfaceBlock,
    Setting,
    SingleLineBlock,
)
from ifupdown_interfaces.tokens import Line, LineType
from ifupdown_interfaces.tracking import freeze


class Parser:
    """Builds snapshotted blocks from interfaces text.

    Usage:
            >>> blocks = Parser("auto lo\\niface lo inet loopback").parse()
            >>> blocks[1]
        IfaceBlock(name='lo', options=['inet', 'loopback'], settings=[], text='iface lo inet loopback')

    """

    __slots__ = ("_source", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Interfaces document text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file

    def parse(self) -> list[Block]:
        """Parse the source into a list of snapshotted blocks.

        Raises:
            ParseError: On the first line that matches no grammar rule.
        """
        blocks: list[Block] = []
        current: IfaceBlock | None = None

        for line in Lexer(self._source, self._source_file).tokenize():
            match line.type:
                case LineType.COMMENT:
                    if current is not None:
                        current.settings.append(Setting.comment_line(line.raw))
                        current.text += f"\n{line.raw}"
                    else:
                        blocks.append(CommentBlock(text=line.raw))
                case LineType.SINGLE:
                    blocks.append(_single_line(line))
                    current = None
                case LineType.IFACE:
                    current = IfaceBlock(
                        name=line.key,
                        options=list(line.options),
                        text=line.raw,
                    )
                    blocks.append(current)
                case LineType.SETTING:
                    # The lexer only yields settings while a stanza is open.
                    assert current is not None
                    current.settings.append(Setting(key=line.key, value=line.value))
                    current.text += f"\n{line.raw}"

        return freeze(blocks)


def _single_line(line: Line) -> SingleLineBlock:
    return SingleLineBlock(key=line.key, options=list(line.options), text=line.raw)

"""
ifupdown-interfaces: round-trip editor for /etc/network/interfaces

Reads a Debian-style interfaces file into a list of typed blocks, lets you
edit or append to it, and writes it back. Stanzas you did not touch are
written exactly as they were read; only changed or new ones are regenerated.

Quick Start:
    >>> from ifupdown_interfaces import parse
    >>> doc = parse("auto lo\\niface lo inet loopback")
    >>> doc.add_single_line("auto", ["vmbr0"])
    SingleLineBlock(key='auto', options=['vmbr0'], text='')
    >>> print(doc.serialize())
    auto lo
    iface lo inet loopback
    auto vmbr0

    >>> # Edit a stanza in place
    >>> doc.find_interface("lo").options[1] = "manual"
    >>> doc.serialize().splitlines()[1]
    'iface lo inet manual'

Files:
    >>> doc = load("/etc/network/interfaces")
    >>> doc.add_interface("vmbr5", ["inet", "manual"], [Setting("address", "1.1.1.1/24")])
    >>> doc.save()

"""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, TypeAlias

from ifupdown_interfaces.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from ifupdown_interfaces.errors import InterfacesError, ParseError
from ifupdown_interfaces.lexer import Lexer
from ifupdown_interfaces.nodes import (
    Block,
    BlockType,
    CommentBlock,
    IfaceBlock,
    Setting,
    SingleLineBlock,
)
from ifupdown_interfaces.parser import Parser
from ifupdown_interfaces.serializer import render_block, serialize
from ifupdown_interfaces.tokens import Line, LineType
from ifupdown_interfaces.tracking import changed_blocks, is_changed
from ifupdown_interfaces.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)

SettingLike: TypeAlias = Setting | Mapping[str, Any]


class Interfaces:
    """An interfaces document: parsed blocks plus the edit API.

    Usage:
        >>> doc = Interfaces()
        >>> doc.add_single_line("auto", ["vmbr5"])
        SingleLineBlock(key='auto', options=['vmbr5'], text='')
        >>> doc.add_interface("vmbr5", ["inet", "manual"], [
        ...     {"comment": False, "key": "address", "value": "1.1.1.1/24"},
        ... ])
        IfaceBlock(name='vmbr5', options=['inet', 'manual'], settings=[Setting(key='address', value='1.1.1.1/24', comment=False)], text='')
        >>> print(doc.serialize())
        auto vmbr5
        iface vmbr5 inet manual
            address 1.1.1.1/24

    Thread Safety:
        One instance must not be used from several threads at once.
        Separate instances share no mutable state.

    """

    __slots__ = ("_blocks", "_config", "_path")

    def __init__(self, *, config: ParseConfig | None = None) -> None:
        """Initialize an empty document.

        Args:
            config: Parse and write configuration (defaults if None)
        """
        self._config = config or ParseConfig()
        self._blocks: list[Block] = []
        self._path: Path | None = None

    @property
    def blocks(self) -> list[Block]:
        """The working block list, in document order."""
        return self._blocks

    @property
    def config(self) -> ParseConfig:
        return self._config

    @property
    def path(self) -> Path | None:
        """Path given to the last open(), used by save() by default."""
        return self._path

    def open(self, path: str | Path) -> None:
        """Read and parse an interfaces file.

        Raises:
            OSError: If the file cannot be read.
            ParseError: If a line matches no grammar rule.
        """
        self._path = Path(path)
        content = self._path.read_text(encoding=self._config.encoding)
        logger.debug("Read %d characters from %s", len(content), self._path)
        self.parse(content, source_file=str(self._path))

    def parse(self, source: str, *, source_file: str | None = None) -> None:
        """Parse interfaces text, replacing the working block list.

        The working list is only replaced when parsing succeeds. Block
        references obtained before a successful parse are no longer part
        of the document.

        Raises:
            ParseError: If a line matches no grammar rule.
        """
        with parse_config_context(self._config):
            blocks = Parser(source, source_file=source_file).parse()
        self._blocks = blocks
        logger.debug("Parsed %d blocks", len(blocks))

    def serialize(self) -> str:
        """Render the document; pure and repeatable."""
        return serialize(self._blocks, indent=self._config.indent)

    def save(self, path: str | Path | None = None) -> None:
        """Serialize and write the document.

        Args:
            path: Destination; defaults to the path given to open()

        Raises:
            InterfacesError: If no path was given and none was opened.
            OSError: If the file cannot be written.
        """
        target = Path(path) if path is not None else self._path
        if target is None:
            msg = "No path to save to: pass one or open() a file first"
            raise InterfacesError(msg)
        data = self.serialize()
        target.write_text(data, encoding=self._config.encoding)
        logger.debug("Wrote %d characters to %s", len(data), target)

    def find_interface(self, name: str) -> IfaceBlock | None:
        """Return the first iface stanza named ``name``, or None.

        The block is live: edits to it are picked up by the next serialize().
        """
        for block in self._blocks:
            if isinstance(block, IfaceBlock) and block.name == name:
                return block
        return None

    def add_single_line(self, key: str, options: Sequence[str]) -> SingleLineBlock:
        """Append a directive such as ``auto eth0``.

        ``key`` is not checked against the configured directive keywords.
        """
        block = SingleLineBlock(key=key, options=list(options))
        self._blocks.append(block)
        return block

    def add_interface(
        self,
        name: str,
        options: Sequence[str],
        settings: Iterable[SettingLike] = (),
    ) -> IfaceBlock:
        """Append a complete iface stanza.

        Args:
            name: Interface name
            options: Header options, e.g. ``["inet", "static"]``
            settings: Settings or ``{comment, key, value}`` mappings, in order
        """
        block = IfaceBlock(
            name=name,
            options=list(options),
            settings=[_as_setting(setting) for setting in settings],
        )
        self._blocks.append(block)
        return block

    def add_comment(self, text: str = "") -> CommentBlock:
        """Append a top-level comment or, with no text, a blank line."""
        block = CommentBlock(text=text)
        self._blocks.append(block)
        return block


def _as_setting(setting: SettingLike) -> Setting:
    if isinstance(setting, Setting):
        return setting
    return Setting.from_dict(setting)


def parse(source: str, *, config: ParseConfig | None = None) -> Interfaces:
    """Parse interfaces text into a new document.

    Example:
        >>> doc = parse("auto lo\\niface lo inet loopback\\n")
        >>> [block.type.name for block in doc.blocks]
        ['SINGLE', 'IFACE']
    """
    doc = Interfaces(config=config)
    doc.parse(source)
    return doc


def load(path: str | Path, *, config: ParseConfig | None = None) -> Interfaces:
    """Open and parse an interfaces file into a new document."""
    doc = Interfaces(config=config)
    doc.open(path)
    return doc


__all__ = [  # noqa: RUF022 (grouped by category for maintainability)
    # Version
    "__version__",
    # Core API
    "Interfaces",
    "load",
    "parse",
    # Blocks
    "Block",
    "BlockType",
    "CommentBlock",
    "IfaceBlock",
    "Setting",
    "SingleLineBlock",
    # Parser components
    "Lexer",
    "Line",
    "LineType",
    "Parser",
    # Change tracking + serialization
    "changed_blocks",
    "is_changed",
    "render_block",
    "serialize",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "InterfacesError",
    "ParseError",
]

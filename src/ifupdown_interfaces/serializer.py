"""Serialize interfaces blocks back to text.

Unchanged blocks are written exactly as they were read. Changed or new
blocks are regenerated from their structured fields:

    auto <options>
    iface <name> <options>
        <key> <value>
        # comment settings keep their raw text

Segments are joined with newlines and no trailing newline is added, so a
parsed document with no edits serializes back to its source.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from collections.abc import Iterable

from ifupdown_interfaces.nodes import Block, CommentBlock, IfaceBlock, Setting, SingleLineBlock
from ifupdown_interfaces.tracking import is_changed

DEFAULT_INDENT = "    "


def serialize(blocks: Iterable[Block], *, indent: str = DEFAULT_INDENT) -> str:
    """Render the working block list to interfaces text.

    Args:
        blocks: Blocks in document order.
        indent: Prefix for setting lines of regenerated iface stanzas.

    Returns:
        Document text.

    """
    return "\n".join(render_block(block, indent=indent) for block in blocks)


def render_block(block: Block, *, indent: str = DEFAULT_INDENT) -> str:
    """Render one block, verbatim if unchanged and regenerated otherwise."""
    if not is_changed(block):
        return block.text

    match block:
        case SingleLineBlock(key=key, options=options):
            return f"{key} {' '.join(options)}"
        case IfaceBlock(name=name, options=options, settings=settings):
            lines = [f"iface {name} {' '.join(options)}"]
            lines.extend(_render_setting(setting, indent) for setting in settings)
            return "\n".join(lines)
        case CommentBlock(text=text):
            return text
        case _:
            msg = f"Unknown block type: {type(block).__name__}"
            raise TypeError(msg)


def _render_setting(setting: Setting, indent: str) -> str:
    if setting.comment:
        return f"{indent}{setting.value}"
    return f"{indent}{setting.key} {setting.value}"

"""Parse-time snapshots and change detection.

After parsing, every block gets a deep copy of itself as its snapshot.
A block is changed when it has no snapshot or when its structured fields
no longer equal the snapshot's. Dataclass equality already skips ``text``
and ``snapshot``, so the comparison is a plain ``!=``.

Example:
    >>> from ifupdown_interfaces.nodes import SingleLineBlock
    >>> block = take_snapshot(SingleLineBlock("auto", ["lo"], text="auto lo"))
    >>> is_changed(block)
    False
    >>> block.options.append("eth0")
    >>> is_changed(block)
    True

"""

from collections.abc import Iterable
from copy import deepcopy
from typing import TypeVar

from ifupdown_interfaces.nodes import Block

B = TypeVar("B", bound=Block)


def take_snapshot(block: B) -> B:
    """Attach a deep-copied snapshot of ``block`` to itself and return it.

    Any previous snapshot is dropped before copying so snapshots never nest.
    """
    block.snapshot = None
    block.snapshot = deepcopy(block)
    return block


def freeze(blocks: Iterable[Block]) -> list[Block]:
    """Snapshot every block, returning them as the working list."""
    return [take_snapshot(block) for block in blocks]


def is_changed(block: Block) -> bool:
    """Return True if ``block`` must be regenerated on serialization."""
    snapshot = block.snapshot
    if snapshot is None:
        return True
    return block != snapshot


def changed_blocks(blocks: Iterable[Block]) -> list[Block]:
    """Return the blocks that would be regenerated, in order."""
    return [block for block in blocks if is_changed(block)]

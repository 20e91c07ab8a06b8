"""Tree reorder engine.

Applies a single drag-and-drop move to a forest and returns a new forest. The input is never
mutated, so callers can keep the previous tree around for diffing.

- ``above`` / ``below``: reorder next to the target, in the target's parent collection.
- ``over``: nest the dragged row as the last child of the target. The dragged row is nested
  as a leaf; its former children are promoted into the slot it left, so no row is lost.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from treedrag.intent import DropIntent
from treedrag.logging import get_logger
from treedrag.models.node import Forest, Node

logger = get_logger(__name__)


@dataclass(frozen=True)
class RowLocation:
    """Where a node sits: the collection holding it and its index there."""

    node: Node
    parent: list[Node]
    index: int


def find_row(rows: list[Node], row_id: str) -> RowLocation | None:
    """Find a node by id, depth-first.

    ``parent`` is the actual list object holding the node (the forest itself or some node's
    ``sub_rows``), so callers can splice it in place.
    """

    for i, row in enumerate(rows):
        if row.id == row_id:
            return RowLocation(node=row, parent=rows, index=i)
        if row.sub_rows:
            found = find_row(row.sub_rows, row_id)
            if found is not None:
                return found
    return None


def find_record(rows: list[Node], row_id: str) -> Node | None:
    """Return the node with ``row_id``, or ``None``."""

    loc = find_row(rows, row_id)
    return loc.node if loc is not None else None


def iter_nodes(rows: list[Node]) -> Iterator[Node]:
    """Yield every node, depth-first pre-order."""

    for row in rows:
        yield row
        if row.sub_rows:
            yield from iter_nodes(row.sub_rows)


def count_nodes(rows: list[Node]) -> int:
    return sum(1 for _ in iter_nodes(rows))


def clone_forest(rows: list[Node]) -> Forest:
    """Deep copy a forest, payload included."""

    return [row.model_copy(deep=True) for row in rows]


def apply_reorder(
    rows: Forest,
    source_id: str,
    target_id: str,
    intent: DropIntent,
) -> Forest:
    """Move ``source_id`` relative to ``target_id`` according to ``intent``.

    Unknown ids, nesting a row under itself, and reordering a row next to itself or one of
    its own descendants are no-ops that return ``rows`` itself. Nothing is raised for them: the tree
    may legitimately have changed between the pointer event and this call.

    Args:
        rows: Current forest.
        source_id: Id of the dragged row.
        target_id: Id of the row it was dropped on.
        intent: Drop intent.

    Returns:
        A new forest, or ``rows`` unchanged for a no-op.
    """

    intent = DropIntent(intent)

    if source_id == target_id and intent == DropIntent.OVER:
        logger.debug("Move noop: self-nest id=%s", source_id)
        return rows

    cloned = clone_forest(rows)
    source = find_row(cloned, source_id)
    target = find_row(cloned, target_id)
    if source is None or target is None:
        logger.debug(
            "Move noop: unknown id source=%s found=%s target=%s found=%s",
            source_id,
            source is not None,
            target_id,
            target is not None,
        )
        return rows

    moved = source.parent.pop(source.index)
    if intent == DropIntent.OVER:
        # Children stay behind, in the slot the dragged row just left.
        source.parent[source.index:source.index] = moved.sub_rows or []
        moved.sub_rows = None

    # Indices may have shifted, and the target is gone if it lived under the source.
    target = find_row(cloned, target_id)
    if target is None:
        logger.debug("Move noop: target=%s is inside source=%s", target_id, source_id)
        return rows

    if intent == DropIntent.OVER:
        if target.node.sub_rows is None:
            target.node.sub_rows = []
        target.node.sub_rows.append(moved)
    else:
        insert_at = target.index if intent == DropIntent.ABOVE else target.index + 1
        target.parent.insert(insert_at, moved)

    logger.debug("Move applied: source=%s target=%s intent=%s", source_id, target_id, intent.value)
    return cloned

"""Tree node models.

A node wraps an opaque, caller-defined record. Only ``id`` and the children relation
(``subRows`` on the wire) are interpreted; every other field is carried through untouched.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Node(BaseModel):
    """A record plus its ordered children.

    ``sub_rows`` is ``None`` when the record has no children list at all and ``[]`` when the
    list exists but is empty. Both are leaves.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    sub_rows: list["Node"] | None = Field(default=None, alias="subRows")

    @property
    def record(self) -> dict[str, Any]:
        """Caller payload without the children relation."""

        return {"id": self.id, **(self.model_extra or {})}

    @property
    def is_leaf(self) -> bool:
        return not self.sub_rows


Forest = list[Node]

_forest_adapter = TypeAdapter(list[Node])


def forest_from_rows(rows: Iterable[Mapping[str, Any]]) -> Forest:
    """Validate plain row dicts into a forest.

    Raises:
        pydantic.ValidationError: If a row lacks an ``id`` or has a malformed ``subRows``.
    """

    return _forest_adapter.validate_python([dict(r) for r in rows])


def node_to_row(node: Node) -> dict[str, Any]:
    """Serialize a node back to a plain row, omitting an absent children list."""

    row = node.model_dump(by_alias=True, exclude={"sub_rows"})
    if node.sub_rows is not None:
        row["subRows"] = [node_to_row(child) for child in node.sub_rows]
    return row


def forest_to_rows(rows: Iterable[Node]) -> list[dict[str, Any]]:
    """Serialize a forest to plain row dicts."""

    return [node_to_row(n) for n in rows]

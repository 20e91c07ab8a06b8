from __future__ import annotations

import pytest

from treedrag.models.node import Forest, forest_from_rows


@pytest.fixture
def people() -> Forest:
    return forest_from_rows(
        [
            {"id": "1", "name": "Alice"},
            {"id": "2", "name": "Bob"},
            {"id": "3", "name": "Charlie"},
        ]
    )


@pytest.fixture
def nested() -> Forest:
    """Two roots; the first has a child with its own child."""

    return forest_from_rows(
        [
            {
                "id": "a",
                "name": "A",
                "subRows": [
                    {"id": "a1", "name": "A1", "subRows": [{"id": "a1x", "name": "A1x"}]},
                    {"id": "a2", "name": "A2"},
                ],
            },
            {"id": "b", "name": "B", "subRows": []},
            {"id": "c", "name": "C"},
        ]
    )

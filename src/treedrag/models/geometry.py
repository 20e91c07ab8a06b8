from __future__ import annotations

from pydantic import BaseModel


class RowRect(BaseModel):
    """Vertical bounding box of a rendered row.

    Units are whatever the presentation layer measures pointer positions in.
    """

    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

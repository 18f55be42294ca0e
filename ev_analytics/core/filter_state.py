from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any

from ev_analytics.core.dataset import ALL


@dataclass
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - year: raw "Model Year" string to match, or "all"
    - make: raw "Make" string to match, or "all"

    Values are compared with plain string equality. A value that no longer
    matches any record just produces an empty view.
    """

    year: str = ALL
    make: str = ALL

    def set_year(self, value: str | None) -> None:
        self.year = value or ALL

    def set_make(self, value: str | None) -> None:
        self.make = value or ALL

    def reset(self) -> None:
        self.year = ALL
        self.make = ALL

    def is_active(self) -> bool:
        return self.year != ALL or self.make != ALL

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> FilterState:
        data = data or {}
        return cls(
            year=str(data.get("year") or ALL),
            make=str(data.get("make") or ALL),
        )

# shotwell/domain/entities/item.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from shotwell.domain.enums.item_type import ItemType


@dataclass
class Item:
    """
    A photo or video row, enriched with its object id and tag names.

    Only `rating` and tag membership are ever changed through this layer;
    rows are created and removed by Shotwell itself. Columns we do not model
    explicitly are passed through untouched in `extra`.
    """
    id: int
    type: ItemType
    filename: str = ""
    rating: int = 0
    object_id: str = ""
    tags: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.type = ItemType.coerce(self.type)
        if self.rating is None:
            self.rating = 0

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Look up a modelled attribute first, then a passed-through column."""
        if key in self.__dataclass_fields__ and key != "extra":
            return getattr(self, key)
        return self.extra.get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        extra = d.pop("extra")
        return {**extra, **d}

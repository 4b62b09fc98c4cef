from __future__ import annotations
from enum import StrEnum

from shotwell.domain.errors import UnknownItemTypeError


class ItemType(StrEnum):
    PHOTO = "PHOTO"
    VIDEO = "VIDEO"

    @classmethod
    def coerce(cls, value: "ItemType | str") -> "ItemType":
        """Accept an ItemType or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            raise UnknownItemTypeError(f"Unknown item type: {value!r}") from e

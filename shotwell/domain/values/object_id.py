# shotwell/domain/values/object_id.py
from __future__ import annotations

import string
from typing import Mapping, Optional, Tuple

from shotwell.domain.enums.item_type import ItemType
from shotwell.domain.errors import ObjectIdError, UnknownItemTypeError

# Literals Shotwell itself writes into TagTable.photo_id_list
DEFAULT_PREFIXES: Mapping[ItemType, str] = {
    ItemType.PHOTO: "thumb",
    ItemType.VIDEO: "video-",
}

KEY_HEX_WIDTH = 16
MAX_KEY = (1 << 64) - 1

_HEX = frozenset(string.hexdigits)


def _check_disjoint(prefixes: Mapping[ItemType, str]) -> None:
    seen = list(prefixes.items())
    for i, (t1, p1) in enumerate(seen):
        if not p1:
            raise ValueError(f"Empty object id prefix for {t1}")
        for t2, p2 in seen[i + 1:]:
            if p1.startswith(p2) or p2.startswith(p1):
                raise ValueError(f"Object id prefixes overlap: {t1}={p1!r}, {t2}={p2!r}")


class ObjectIdCodec:
    """
    Maps (ItemType, numeric key) to the opaque object id used across both
    item tables, and back:

        thumb0000000000000001   -> (PHOTO, 1)
        video-000000000000002a  -> (VIDEO, 42)

    Prefixes must never be prefixes of one another, which is checked here so
    that decoding by prefix match is unambiguous.
    """

    def __init__(self, prefixes: Mapping[ItemType, str] = DEFAULT_PREFIXES) -> None:
        _check_disjoint(prefixes)
        self._prefixes = dict(prefixes)

    @property
    def prefixes(self) -> dict[ItemType, str]:
        return dict(self._prefixes)

    def prefix_for_type(self, item_type: ItemType | str) -> str:
        t = ItemType.coerce(item_type)
        try:
            return self._prefixes[t]
        except KeyError as e:
            raise UnknownItemTypeError(f"No object id prefix for {t}") from e

    def encode(self, item_type: ItemType | str, key: int) -> str:
        if isinstance(key, bool) or not isinstance(key, int):
            raise ObjectIdError(f"Numeric key must be an int, got {key!r}")
        if key < 0 or key > MAX_KEY:
            raise ObjectIdError(f"Numeric key out of range: {key}")
        return f"{self.prefix_for_type(item_type)}{key:0{KEY_HEX_WIDTH}x}"

    def type_of(self, object_id: str) -> Optional[ItemType]:
        if not isinstance(object_id, str):
            return None
        for t, prefix in self._prefixes.items():
            if object_id.startswith(prefix):
                return t
        return None

    def decode(self, object_id: str) -> Optional[Tuple[ItemType, int]]:
        """Return (type, key), or None when no prefix matches or the key is not hex."""
        t = self.type_of(object_id)
        if t is None:
            return None
        rest = object_id[len(self._prefixes[t]):].lstrip(" 0")
        if not rest:
            return t, 0
        if not _HEX.issuperset(rest):
            return None
        key = int(rest, 16)
        if key > MAX_KEY:
            return None
        return t, key

    def numeric_key(self, object_id: str) -> Optional[int]:
        decoded = self.decode(object_id)
        return decoded[1] if decoded else None

    def canonical(self, object_id: str) -> Optional[str]:
        """The padded lowercase form of `object_id` ("video-1" -> "video-0000000000000001")."""
        decoded = self.decode(object_id)
        return self.encode(*decoded) if decoded else None


default_codec = ObjectIdCodec()

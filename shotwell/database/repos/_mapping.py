# shotwell/database/repos/_mapping.py
from __future__ import annotations

from typing import Any, List, Mapping

from shotwell.database.models.taxonomy import TagRow
from shotwell.domain.entities.item import Item
from shotwell.domain.entities.tag import Tag
from shotwell.domain.enums.item_type import ItemType
from shotwell.domain.values.membership import MembershipList

_ITEM_FIELDS = ("id", "filename", "rating")


def to_domain_item(row: Mapping[str, Any], item_type: ItemType, object_id: str, tags: List[str]) -> Item:
    return Item(
        id=int(row["id"]),
        type=item_type,
        filename=row.get("filename") or "",
        rating=int(row.get("rating") or 0),
        object_id=object_id,
        tags=list(tags),
        extra={k: v for k, v in row.items() if k not in _ITEM_FIELDS},
    )


def to_domain_tag(row: TagRow) -> Tag:
    return Tag(
        id=row.id,
        name=row.name,
        members=MembershipList.parse(row.photo_id_list),
        time_created=row.time_created,
    )

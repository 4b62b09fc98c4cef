# shotwell/database/repos/media_query.py
from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import literal, select, union_all

from shotwell.common.logging import get_logger
from shotwell.database.repos.item_repo import ItemRepo
from shotwell.database.repos.tag_repo import TagRepo
from shotwell.domain.entities.item import Item
from shotwell.domain.entities.tag import Tag
from shotwell.domain.enums.item_type import ItemType

logger = get_logger(__name__)


class MediaQueryRepo:
    """
    Read-only queries spanning both item tables and the tag table.
    """

    def __init__(self, items: ItemRepo, tags: TagRepo) -> None:
        self.items = items
        self.tags = tags

    @property
    def db(self):
        return self.items.db

    def search_by_field(self, field: Optional[str] = None, value: Optional[str] = None) -> List[Item]:
        """
        Items whose `field` contains `value` (SQL LIKE, so case handling is
        whatever the database does; sqlite folds ASCII case). Photos come
        first, then videos, each by id. Without a field every item is returned.
        """
        selects = []
        for pos, item_type in enumerate((ItemType.PHOTO, ItemType.VIDEO)):
            table = self.items.table_for(item_type)
            stmt = select(
                table.c.id.label("id"),
                literal(item_type.value).label("type"),
                literal(pos).label("pos"),
            )
            if field is not None and value is not None:
                if field not in table.c:
                    raise ValueError(f"Unknown column {field!r} on {table.name}")
                stmt = stmt.where(table.c[field].contains(value, autoescape=True))
            selects.append(stmt)

        u = union_all(*selects).subquery()
        stmt = select(u.c.id, u.c.type).order_by(u.c.pos.asc(), u.c.id.asc())
        rows = self.db.execute(stmt).all()
        out: List[Item] = []
        for key, type_name in rows:
            item = self.items.get_by_numeric_key(ItemType(type_name), key)
            if item is not None:
                out.append(item)
        return out

    def _resolve(self, object_ids: Iterable[str]) -> List[Item]:
        out: List[Item] = []
        for object_id in object_ids:
            item = self.items.get_by_object_id(object_id)
            if item is None:
                logger.debug("Dropping dangling tag member %s", object_id)
                continue
            out.append(item)
        return out

    def items_for_tag(self, name: str) -> List[Item]:
        """
        Resolved members of tag `name`. An unknown tag gives [] just like an
        empty one; use TagRepo.find_by_name when the two must be told apart.
        """
        tag = self.tags.find_by_name(name)
        if tag is None:
            return []
        return self._resolve(tag.members)

    def attach_items(self, tag: Tag) -> Tag:
        tag.items = self._resolve(tag.members)
        return tag

    def tags_with_items(self) -> List[Tag]:
        return [self.attach_items(t) for t in self.tags.list_all()]

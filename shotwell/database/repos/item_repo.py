# shotwell/database/repos/item_repo.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import MetaData, Table, select, update
from sqlalchemy.orm import Session

from shotwell.common.logging import get_logger
from shotwell.database.models import ITEM_TABLES
from shotwell.database.repos._mapping import to_domain_item
from shotwell.domain.entities.item import Item
from shotwell.domain.enums.item_type import ItemType
from shotwell.domain.errors import InvalidRatingError
from shotwell.domain.values.object_id import ObjectIdCodec, default_codec
from shotwell.services.tagging.tag_index import TagIndex

logger = get_logger(__name__)

MIN_RATING = 0
MAX_RATING = 5


def validate_rating(rating: Any) -> int:
    """Accept ints (or integral strings/floats) in 0..5, raise InvalidRatingError otherwise."""
    if isinstance(rating, bool):
        raise InvalidRatingError(f"Rating must be numeric, {rating!r} given")
    if isinstance(rating, int):
        value = rating
    elif isinstance(rating, float) and rating.is_integer():
        value = int(rating)
    elif isinstance(rating, str) and rating.strip().lstrip("+-").isdecimal():
        try:
            value = int(rating.strip())
        except ValueError as e:
            raise InvalidRatingError(f"Rating must be numeric, {rating!r} given") from e
    else:
        raise InvalidRatingError(f"Rating must be numeric, {rating!r} given")
    if value < MIN_RATING or value > MAX_RATING:
        raise InvalidRatingError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {value}")
    return value


class ItemRepo:
    """
    Photo/video reads and rating updates.

    The item tables are reflected from the live database rather than taken
    from the ORM models: Shotwell versions differ in their columns and every
    column is passed through to `Item.extra`.
    """

    def __init__(self, db: Session, tag_index: TagIndex, codec: ObjectIdCodec = default_codec) -> None:
        self.db = db
        self.tag_index = tag_index
        self.codec = codec
        self._metadata = MetaData()
        self._tables: Dict[ItemType, Table] = {}

    def table_for(self, item_type: ItemType | str) -> Table:
        t = ItemType.coerce(item_type)
        table = self._tables.get(t)
        if table is None:
            table = Table(ITEM_TABLES[t], self._metadata, autoload_with=self.db.connection())
            self._tables[t] = table
        return table

    def _enrich(self, row, item_type: ItemType) -> Item:
        object_id = self.codec.encode(item_type, int(row["id"]))
        tags = self.tag_index.get(object_id)
        return to_domain_item(row, item_type, object_id, tags or [])

    # ----- reads -----
    def get_by_numeric_key(self, item_type: ItemType | str, key: int) -> Optional[Item]:
        t = ItemType.coerce(item_type)
        table = self.table_for(t)
        stmt = select(table).where(table.c.id == key).limit(1)
        row = self.db.execute(stmt).mappings().first()
        return self._enrich(row, t) if row else None

    def get_by_object_id(self, object_id: str) -> Optional[Item]:
        decoded = self.codec.decode(object_id)
        if decoded is None:
            return None
        item_type, key = decoded
        return self.get_by_numeric_key(item_type, key)

    def list_all(self, item_type: ItemType | str) -> List[Item]:
        t = ItemType.coerce(item_type)
        table = self.table_for(t)
        rows = self.db.execute(select(table).order_by(table.c.id.asc())).mappings().all()
        return [self._enrich(r, t) for r in rows]

    def exists(self, object_id: str) -> bool:
        decoded = self.codec.decode(object_id)
        if decoded is None:
            return False
        item_type, key = decoded
        table = self.table_for(item_type)
        stmt = select(table.c.id).where(table.c.id == key).limit(1)
        return self.db.execute(stmt).first() is not None

    # ----- mutations -----
    def set_rating(self, object_id: str, rating: Any) -> bool:
        value = validate_rating(rating)

        decoded = self.codec.decode(object_id)
        if decoded is None or not self.exists(object_id):
            return False

        item_type, key = decoded
        table = self.table_for(item_type)
        self.db.execute(update(table).where(table.c.id == key).values(rating=value))
        logger.info("Set rating of %s to %d", object_id, value)
        return True

# shotwell/services/api.py
from __future__ import annotations

import os
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from shotwell.common.logging import get_logger
from shotwell.common.settings import get_settings
from shotwell.database.core.main import make_engine, make_sessionmaker
from shotwell.database.core.transaction import transactional
from shotwell.database.repos.item_repo import ItemRepo
from shotwell.database.repos.media_query import MediaQueryRepo
from shotwell.database.repos.tag_repo import TagRepo
from shotwell.domain.entities.item import Item
from shotwell.domain.entities.tag import Tag
from shotwell.domain.enums.item_type import ItemType
from shotwell.domain.values.object_id import ObjectIdCodec, default_codec
from shotwell.services.tagging.reconciler import MembershipReconciler
from shotwell.services.tagging.tag_index import TagIndex

logger = get_logger(__name__)


class ShotwellApi:
    """
    Read/write access to a Shotwell database: photos, videos, tags and ratings.

    One Session (one sqlite connection) is held for the lifetime of the
    object. Every write is committed as soon as it is made; see
    `MembershipReconciler` for how tag changes spanning several tags behave.

        with ShotwellApi("~/.local/share/shotwell/data/photo.db") as api:
            photo = api.get_photo_by_id(1)
            api.set_item_tags(photo.object_id, ["boracay", "diving"])

    Raises StorageUnavailableError if the database file is missing.
    """

    def __init__(
        self,
        db_path: Optional[str | os.PathLike] = None,
        *,
        session: Optional[Session] = None,
        codec: ObjectIdCodec = default_codec,
        atomic_reconcile: Optional[bool] = None,
    ) -> None:
        settings = get_settings()
        self._engine: Optional[Engine] = None
        if session is None:
            if db_path is not None:
                db_path = os.path.expanduser(os.fspath(db_path))
            self._engine = make_engine(db_path)
            session = make_sessionmaker(self._engine)()
        self.db = session
        self.codec = codec

        self.tags = TagRepo(self.db)
        self.tag_index = TagIndex(self.tags)
        self.items = ItemRepo(self.db, self.tag_index, codec)
        self.query = MediaQueryRepo(self.items, self.tags)
        self.reconciler = MembershipReconciler(
            self.db,
            self.tags,
            self.items,
            self.tag_index,
            atomic=settings.atomic_reconcile if atomic_reconcile is None else atomic_reconcile,
        )

    # ----- lifecycle -----
    def close(self) -> None:
        self.db.close()
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> "ShotwellApi":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ----- items -----
    def get_all(self) -> List[Item]:
        """Every photo and video."""
        return self.query.search_by_field()

    def get_all_of_type(self, item_type: ItemType | str) -> List[Item]:
        return self.items.list_all(item_type)

    def get_all_photos(self) -> List[Item]:
        return self.items.list_all(ItemType.PHOTO)

    def get_all_videos(self) -> List[Item]:
        return self.items.list_all(ItemType.VIDEO)

    def get_by_numeric_id(self, item_type: ItemType | str, key: int) -> Optional[Item]:
        return self.items.get_by_numeric_key(item_type, key)

    def get_photo_by_id(self, key: int) -> Optional[Item]:
        return self.items.get_by_numeric_key(ItemType.PHOTO, key)

    def get_video_by_id(self, key: int) -> Optional[Item]:
        return self.items.get_by_numeric_key(ItemType.VIDEO, key)

    def get_item_by_object_id(self, object_id: str) -> Optional[Item]:
        return self.items.get_by_object_id(object_id)

    def get_items_by_path(self, path: str) -> List[Item]:
        """Items whose filename contains `path` anywhere."""
        return self.query.search_by_field("filename", path)

    def search(self, field: str, value: str) -> List[Item]:
        return self.query.search_by_field(field, value)

    def set_item_rating(self, object_id: str, rating: Any) -> bool:
        with transactional(self.db):
            return self.items.set_rating(object_id, rating)

    # ----- item tags -----
    def get_tags_by_object_id(self, object_id: str) -> Optional[List[str]]:
        """
        Tag names of an item, or None if no tag references it. Use
        `get_item_by_object_id(...).tags` for an empty list on untagged items.
        """
        canonical = self.codec.canonical(object_id)
        return self.tag_index.get(canonical) if canonical else None

    def get_item_tag_map(self) -> Dict[str, List[str]]:
        return self.tag_index.as_dict()

    def set_item_tags(self, object_id: str, tags: Iterable[str]) -> bool:
        """Make `tags` exactly the tags of the item. False if the item is unknown."""
        if isinstance(tags, str):
            tags = [tags]
        return self.reconciler.reconcile(object_id, tags)

    def remove_all_item_tags(self, object_id: str) -> bool:
        return self.set_item_tags(object_id, [])

    # ----- tags -----
    def create_tag(self, name: str) -> bool:
        with transactional(self.db):
            return self.tags.create(name)

    def get_tag(self, name: str, auto_create: bool = False, with_items: bool = False) -> Optional[Tag]:
        if auto_create:
            with transactional(self.db):
                tag = self.tags.get_or_create(name)
        else:
            tag = self.tags.find_by_name(name)
        if tag is not None and with_items:
            self.query.attach_items(tag)
        return tag

    def get_tag_id(self, name: str) -> Optional[int]:
        tag = self.tags.find_by_name(name)
        return tag.id if tag else None

    def get_all_tags(self, with_items: bool = False) -> List[Tag]:
        if with_items:
            return self.query.tags_with_items()
        return self.tags.list_all()

    def get_items_by_tag(self, name: str) -> List[Item]:
        """Items of tag `name`; [] for an unknown tag too (see `get_tag`)."""
        return self.query.items_for_tag(name)

    # ----- object ids -----
    def get_object_id_by_numeric_id(self, item_type: ItemType | str, key: int) -> str:
        return self.codec.encode(item_type, key)

    def get_type_by_object_id(self, object_id: str) -> Optional[ItemType]:
        return self.codec.type_of(object_id)

    def get_numeric_id_by_object_id(self, object_id: str) -> Optional[int]:
        return self.codec.numeric_key(object_id)

    def get_object_id_prefix_for_type(self, item_type: ItemType | str) -> str:
        return self.codec.prefix_for_type(item_type)

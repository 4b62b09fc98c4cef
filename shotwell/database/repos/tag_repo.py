from __future__ import annotations

import time
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from shotwell.common.logging import get_logger
from shotwell.database.models.taxonomy import TagRow
from shotwell.database.repos._mapping import to_domain_tag
from shotwell.domain.entities.tag import Tag
from shotwell.domain.values.membership import MembershipList

logger = get_logger(__name__)


class TagRepo:
    """
    CRUD over TagTable. Writes are flushed, never committed; the caller owns
    the transaction boundary.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _row_by_name(self, name: str) -> Optional[TagRow]:
        stmt = select(TagRow).where(TagRow.name == name).limit(1)
        return self.db.execute(stmt).scalars().first()

    def find_by_name(self, name: str) -> Optional[Tag]:
        row = self._row_by_name(name)
        return to_domain_tag(row) if row else None

    def find_by_id(self, tag_id: int) -> Optional[Tag]:
        row = self.db.get(TagRow, tag_id)
        return to_domain_tag(row) if row else None

    def list_all(self) -> List[Tag]:
        """All tags in creation order."""
        stmt = select(TagRow).order_by(TagRow.id.asc())
        return [to_domain_tag(r) for r in self.db.execute(stmt).scalars().all()]

    # ----- mutations -----
    def create(self, name: str) -> bool:
        if not name or not name.strip():
            raise ValueError("Tag name is required")
        if self._row_by_name(name) is not None:
            return False

        self.db.add(TagRow(name=name, photo_id_list="", time_created=int(time.time())))
        self.db.flush()
        logger.info("Created tag %r", name)
        return True

    def get_or_create(self, name: str) -> Tag:
        tag = self.find_by_name(name)
        if tag is None:
            self.create(name)
            tag = self.find_by_name(name)
        return tag  # type: ignore[return-value]

    def set_members(self, tag_id: int, members: Iterable[str]) -> bool:
        """Overwrite the tag's photo_id_list with the canonical rendering of `members`."""
        row = self.db.get(TagRow, tag_id)
        if row is None:
            return False
        if not isinstance(members, MembershipList):
            members = MembershipList.of(members)
        row.photo_id_list = members.render()
        self.db.flush()
        return True

# shotwell/services/tagging/tag_index.py
from __future__ import annotations

from typing import Dict, List, Optional

from shotwell.common.logging import get_logger
from shotwell.database.repos.tag_repo import TagRepo

logger = get_logger(__name__)


class TagIndex:
    """
    In-process inverted index: object id -> tag names (tags in creation order).

    Built lazily from every tag's membership list and thrown away as a whole
    by `invalidate()` after any membership write. A miss (`None`) means no tag
    references the item, which is not the same as an empty tag list.
    """

    def __init__(self, tags: TagRepo) -> None:
        self.tags = tags
        self._map: Optional[Dict[str, List[str]]] = None

    @property
    def is_built(self) -> bool:
        return self._map is not None

    def _build(self) -> Dict[str, List[str]]:
        out: Dict[str, List[str]] = {}
        entries = 0
        for tag in self.tags.list_all():
            for object_id in tag.members:
                out.setdefault(object_id, []).append(tag.name)
                entries += 1
        logger.debug("Rebuilt tag index: %d items, %d membership entries", len(out), entries)
        return out

    def _ensure(self) -> Dict[str, List[str]]:
        if self._map is None:
            self._map = self._build()
        return self._map

    def get(self, object_id: str) -> Optional[List[str]]:
        names = self._ensure().get(object_id)
        return list(names) if names is not None else None

    def as_dict(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self._ensure().items()}

    def invalidate(self) -> None:
        self._map = None

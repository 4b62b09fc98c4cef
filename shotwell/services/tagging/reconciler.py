# shotwell/services/tagging/reconciler.py
from __future__ import annotations

from contextlib import nullcontext
from typing import Iterable, List, Tuple

from sqlalchemy.orm import Session

from shotwell.common.logging import get_logger
from shotwell.database.core.transaction import transactional
from shotwell.database.repos.item_repo import ItemRepo
from shotwell.database.repos.tag_repo import TagRepo
from shotwell.services.tagging.tag_index import TagIndex

logger = get_logger(__name__)


def tag_diff(current: Iterable[str], desired: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    (to_add, to_remove) moving `current` to `desired`. Blank names are ignored.
    to_add keeps the order of `desired`, to_remove the order of `current`.
    """
    cur = list(dict.fromkeys(current))
    want = [t for t in dict.fromkeys(desired) if t and t.strip()]
    cur_set, want_set = set(cur), set(want)
    return [t for t in want if t not in cur_set], [t for t in cur if t not in want_set]


class MembershipReconciler:
    """
    Makes the set of tags attached to one item equal a desired set.

    Membership is stored per tag, so every affected tag row is rewritten on
    its own. By default each tag write is committed as it happens and a
    failure part way leaves the earlier tags updated. With `atomic=True`
    the whole reconcile is one transaction.
    """

    def __init__(
        self,
        db: Session,
        tags: TagRepo,
        items: ItemRepo,
        tag_index: TagIndex,
        *,
        atomic: bool = False,
    ) -> None:
        self.db = db
        self.tags = tags
        self.items = items
        self.tag_index = tag_index
        self.atomic = atomic

    def _current(self, object_id: str) -> List[str] | None:
        current = self.tag_index.get(object_id)
        if current is None and self.items.exists(object_id):
            return []
        return current

    def _add(self, name: str, object_id: str) -> bool:
        tag = self.tags.get_or_create(name)
        return self.tags.set_members(tag.id, tag.members.add(object_id))

    def _remove(self, name: str, object_id: str) -> bool:
        tag = self.tags.find_by_name(name)
        if tag is None:
            return False
        return self.tags.set_members(tag.id, tag.members.discard(object_id))

    def reconcile(self, object_id: str, desired: Iterable[str]) -> bool:
        canonical = self.items.codec.canonical(object_id)
        current = self._current(canonical) if canonical else None
        if current is None:
            logger.debug("Cannot tag unknown item %s", object_id)
            return False
        object_id = canonical

        to_add, to_remove = tag_diff(current, desired)
        logger.debug("Reconciling %s: +%s -%s", object_id, to_add, to_remove)

        ok = True
        outer = transactional(self.db) if self.atomic else nullcontext()
        try:
            with outer:
                for name in to_add:
                    with self._step():
                        ok = self._add(name, object_id) and ok
                for name in to_remove:
                    with self._step():
                        ok = self._remove(name, object_id) and ok
        finally:
            self.tag_index.invalidate()
        return ok

    def _step(self):
        return nullcontext() if self.atomic else transactional(self.db)

# shotwell/domain/values/membership.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from shotwell.common.strings.splitters import csv_to_list, list_to_csv


@dataclass(frozen=True)
class MembershipList:
    """
    The set of object ids attached to one tag, as stored in
    TagTable.photo_id_list ("thumb0000000000000001,video-0000000000000001,").

    Order of first appearance is kept so rendering is stable, but the list is
    a set: no duplicates and no empty entries.
    """
    members: Tuple[str, ...] = ()

    def __post_init__(self):
        # normalise whatever iterable was passed in
        object.__setattr__(self, "members", tuple(dict.fromkeys(csv_to_list(list(self.members)))))

    @classmethod
    def parse(cls, text: str | None) -> "MembershipList":
        return cls(tuple(csv_to_list(text)))

    @classmethod
    def of(cls, members: Iterable[str]) -> "MembershipList":
        return cls(tuple(members))

    def render(self) -> str:
        return list_to_csv(self.members, trailing=True)

    def add(self, object_id: str) -> "MembershipList":
        if object_id in self.members:
            return self
        return MembershipList(self.members + (object_id,))

    def discard(self, object_id: str) -> "MembershipList":
        if object_id not in self.members:
            return self
        return MembershipList(tuple(m for m in self.members if m != object_id))

    def as_set(self) -> frozenset[str]:
        return frozenset(self.members)

    def __contains__(self, object_id: object) -> bool:
        return object_id in self.members

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __str__(self) -> str:
        return self.render()

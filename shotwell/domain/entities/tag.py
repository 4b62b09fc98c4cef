# shotwell/domain/entities/tag.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from shotwell.domain.entities.item import Item
from shotwell.domain.values.membership import MembershipList


@dataclass
class Tag:
    """
    A flat, uniquely named tag. Membership is the MembershipList parsed from
    TagTable.photo_id_list. `items` is only filled when a caller asks for the
    members to be resolved.

    Names are checked in TagRepo.create, not here, so rows written by other
    tools always load.
    """
    id: int
    name: str
    members: MembershipList = field(default_factory=MembershipList)
    time_created: Optional[int] = None
    items: Optional[List[Item]] = None

    @property
    def photo_id_list(self) -> str:
        return self.members.render()

# shotwell/database/models/taxonomy.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from shotwell.database.core.main import Base


class TagRow(Base):
    """
    Shotwell's TagTable. Membership lives in `photo_id_list` as a comma
    separated list of object ids with a trailing comma; there is no join table.
    """
    __tablename__ = "TagTable"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    photo_id_list: Mapped[Optional[str]] = mapped_column(Text)
    time_created: Mapped[Optional[int]] = mapped_column(Integer)

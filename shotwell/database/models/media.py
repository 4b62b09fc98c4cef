# shotwell/database/models/media.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Float, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from shotwell.database.core.main import Base


class PhotoRow(Base):
    """
    Shotwell's PhotoTable. Only the columns this layer reads or that tests
    need are declared; item reads go through a reflected table so any other
    column in a real database is still passed through.
    """
    __tablename__ = "PhotoTable"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    filename: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    width: Mapped[Optional[int]] = mapped_column(Integer)
    height: Mapped[Optional[int]] = mapped_column(Integer)
    filesize: Mapped[Optional[int]] = mapped_column(Integer)
    timestamp: Mapped[Optional[int]] = mapped_column(Integer)
    exposure_time: Mapped[Optional[int]] = mapped_column(Integer)
    orientation: Mapped[Optional[int]] = mapped_column(Integer)
    event_id: Mapped[Optional[int]] = mapped_column(Integer)
    md5: Mapped[Optional[str]] = mapped_column(Text)
    time_created: Mapped[Optional[int]] = mapped_column(Integer)
    flags: Mapped[Optional[int]] = mapped_column(Integer, server_default=text("0"))
    rating: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    file_format: Mapped[Optional[int]] = mapped_column(Integer)
    title: Mapped[Optional[str]] = mapped_column(Text)
    comment: Mapped[Optional[str]] = mapped_column(Text)


class VideoRow(Base):
    __tablename__ = "VideoTable"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    filename: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    width: Mapped[Optional[int]] = mapped_column(Integer)
    height: Mapped[Optional[int]] = mapped_column(Integer)
    clip_duration: Mapped[Optional[float]] = mapped_column(Float)
    is_interpretable: Mapped[Optional[int]] = mapped_column(Integer)
    filesize: Mapped[Optional[int]] = mapped_column(Integer)
    timestamp: Mapped[Optional[int]] = mapped_column(Integer)
    exposure_time: Mapped[Optional[int]] = mapped_column(Integer)
    event_id: Mapped[Optional[int]] = mapped_column(Integer)
    md5: Mapped[Optional[str]] = mapped_column(Text)
    time_created: Mapped[Optional[int]] = mapped_column(Integer)
    rating: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    title: Mapped[Optional[str]] = mapped_column(Text)
    flags: Mapped[Optional[int]] = mapped_column(Integer, server_default=text("0"))
    comment: Mapped[Optional[str]] = mapped_column(Text)

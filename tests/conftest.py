# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from shotwell.database.models import Base, PhotoRow, VideoRow, TagRow
from shotwell.services.api import ShotwellApi

PHOTO1 = "thumb0000000000000001"
PHOTO2 = "thumb0000000000000002"
VIDEO1 = "video-0000000000000001"


def _seed(session: Session) -> None:
    session.add_all([
        PhotoRow(id=1, filename="/home/dario/Desktop/boracay/IMG_0001.jpg", width=4000, height=3000,
                 filesize=2048, rating=0, title="beach"),
        PhotoRow(id=2, filename="/home/dario/Desktop/boracay/IMG_0002.jpg", width=4000, height=3000,
                 filesize=4096, rating=0),
        VideoRow(id=1, filename="/home/dario/Desktop/diving/GOPR0001.MP4", width=1920, height=1080,
                 clip_duration=12.5, filesize=8192, rating=0),
    ])
    session.add_all([
        TagRow(id=1, name="boracay", photo_id_list=f"{PHOTO1},{PHOTO2},", time_created=1461000000),
        TagRow(id=2, name="philippines", photo_id_list=f"{PHOTO1},{PHOTO2},", time_created=1461000001),
        TagRow(id=3, name="diving", photo_id_list=f"{VIDEO1},", time_created=1461000002),
    ])


@pytest.fixture()
def db_path(tmp_path) -> Path:
    """
    Throw-away Shotwell-shaped sqlite file: two photos, one video and the
    tags boracay/philippines (both photos) and diving (the video).
    """
    path = tmp_path / "photo.db"
    engine = create_engine(f"sqlite:///{path}", future=True)
    Base.metadata.create_all(bind=engine)
    with Session(engine) as session:
        _seed(session)
        session.commit()
    engine.dispose()
    return path


@pytest.fixture()
def api(db_path):
    sut = ShotwellApi(db_path)
    try:
        yield sut
    finally:
        sut.close()


@pytest.fixture()
def db(api) -> Session:
    """The Session held by `api`, for repo-level tests."""
    return api.db

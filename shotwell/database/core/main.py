# shotwell/database/core/main.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from shotwell.common.logging import get_logger
from shotwell.common.settings import get_settings
from shotwell.domain.errors import StorageUnavailableError

logger = get_logger(__name__)


class Base(DeclarativeBase):
    # Shotwell owns the schema; table names are its CamelCase ones
    metadata = MetaData()


def resolve_db_path(db_path: Optional[str | os.PathLike] = None) -> Path:
    """
    Pick the database file (explicit argument, else settings) and make sure it
    exists and is readable. Shotwell databases are never created here.
    """
    if db_path is None:
        db_path = get_settings().db.path
    if db_path is None:
        raise StorageUnavailableError("No database path given and SHOTWELL_DB__PATH is not set")

    path = Path(db_path)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise StorageUnavailableError(f"Database with path '{path}' doesn't exist or isn't readable!")
    return path


def make_engine(db_path: Optional[str | os.PathLike] = None, *, echo: Optional[bool] = None) -> Engine:
    settings = get_settings()
    path = resolve_db_path(db_path)
    engine = create_engine(
        f"sqlite:///{path}",
        echo=settings.db.echo if echo is None else echo,
        future=True,
    )
    logger.debug("Opened sqlite engine for %s", path)
    return engine


def make_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)
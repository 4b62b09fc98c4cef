# shotwell/database/core/transaction.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


@contextmanager
def transactional(db: Session) -> Iterator[Session]:
    """
    Commit whatever `db` did inside the block, roll back if it raised.
    Works on a Session that has already autobegun a transaction.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise

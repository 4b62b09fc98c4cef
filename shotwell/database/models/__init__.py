# shotwell/database/models/__init__.py

from shotwell.database.models.media import (
    Base,
    PhotoRow,
    VideoRow,
)
from shotwell.database.models.taxonomy import (
    TagRow,
)
from shotwell.domain.enums import ItemType

# Item tables per type
ITEM_TABLES = {
    ItemType.PHOTO: PhotoRow.__tablename__,
    ItemType.VIDEO: VideoRow.__tablename__,
}

__all__ = [
    "Base",
    "PhotoRow",
    "VideoRow",
    "TagRow",
    "ITEM_TABLES",
]

from shotwell.domain.enums.item_type import ItemType
__all__ = [
    "ItemType",
]

import pytest

from shotwell.domain.entities.item import Item
from shotwell.domain.entities.tag import Tag
from shotwell.domain.enums.item_type import ItemType
from shotwell.domain.errors import UnknownItemTypeError
from shotwell.domain.values.membership import MembershipList


def test_item_coerces_type_and_defaults():
    item = Item(id=1, type="photo", filename="/a.jpg", rating=None)  # type: ignore[arg-type]
    assert item.type is ItemType.PHOTO
    assert item.rating == 0
    assert item.tags == []


def test_item_unknown_type():
    with pytest.raises(UnknownItemTypeError):
        Item(id=1, type="audio")  # type: ignore[arg-type]


def test_item_get_and_as_dict_pass_through_extra():
    item = Item(id=3, type=ItemType.VIDEO, filename="/v.mp4", extra={"clip_duration": 1.5})
    assert item.get("filename") == "/v.mp4"
    assert item.get("clip_duration") == 1.5
    assert item.get("nope", "x") == "x"
    d = item.as_dict()
    assert d["clip_duration"] == 1.5
    assert d["type"] == "VIDEO"
    assert "extra" not in d


def test_tag_loads_blank_name():
    assert Tag(id=1, name="").name == ""


def test_tag_photo_id_list_renders_members():
    tag = Tag(id=1, name="x", members=MembershipList.of(["thumb0000000000000001"]))
    assert tag.photo_id_list == "thumb0000000000000001,"

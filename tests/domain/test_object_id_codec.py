import pytest

from shotwell.domain.enums.item_type import ItemType
from shotwell.domain.errors import ObjectIdError, UnknownItemTypeError
from shotwell.domain.values.object_id import MAX_KEY, ObjectIdCodec, default_codec


def test_known_encodings():
    assert default_codec.encode(ItemType.PHOTO, 1) == "thumb0000000000000001"
    assert default_codec.encode(ItemType.VIDEO, 1) == "video-0000000000000001"
    assert default_codec.encode("video", 42) == "video-000000000000002a"


@pytest.mark.parametrize("item_type", list(ItemType))
@pytest.mark.parametrize("key", [0, 1, 255, 4096, 2**32 + 7, MAX_KEY])
def test_round_trip(item_type, key):
    assert default_codec.decode(default_codec.encode(item_type, key)) == (item_type, key)


def test_zero_key_is_not_empty():
    oid = default_codec.encode(ItemType.PHOTO, 0)
    assert oid == "thumb" + "0" * 16
    assert default_codec.numeric_key(oid) == 0


@pytest.mark.parametrize("bad", [-1, MAX_KEY + 1, "1", 1.0, True])
def test_encode_rejects_bad_keys(bad):
    with pytest.raises(ObjectIdError):
        default_codec.encode(ItemType.PHOTO, bad)


@pytest.mark.parametrize("oid", ["1", "a", "", "photo0000000000000001", "thumbxyz", "video-0x1f"])
def test_decode_failures_return_none(oid):
    assert default_codec.decode(oid) is None


def test_decode_tolerates_unpadded_and_spaces():
    assert default_codec.decode("thumb 00ff") == (ItemType.PHOTO, 255)
    assert default_codec.decode("video-10") == (ItemType.VIDEO, 16)


def test_type_of():
    assert default_codec.type_of("thumb0000000000000001") is ItemType.PHOTO
    assert default_codec.type_of("video-0000000000000001") is ItemType.VIDEO
    assert default_codec.type_of("event0000000000000001") is None


def test_prefix_lookup():
    assert default_codec.prefix_for_type(ItemType.PHOTO) == "thumb"
    assert default_codec.prefix_for_type("VIDEO") == "video-"
    with pytest.raises(UnknownItemTypeError):
        default_codec.prefix_for_type("AUDIO")


def test_default_prefixes_are_disjoint():
    prefixes = list(default_codec.prefixes.values())
    assert len(set(prefixes)) == len(prefixes)
    for a in prefixes:
        for b in prefixes:
            if a is not b:
                assert not a.startswith(b)


@pytest.mark.parametrize("prefixes", [
    {ItemType.PHOTO: "v", ItemType.VIDEO: "video-"},
    {ItemType.PHOTO: "same", ItemType.VIDEO: "same"},
    {ItemType.PHOTO: "", ItemType.VIDEO: "video-"},
])
def test_overlapping_prefixes_rejected_at_construction(prefixes):
    with pytest.raises(ValueError):
        ObjectIdCodec(prefixes)


def test_canonical():
    assert default_codec.canonical("video-1") == "video-0000000000000001"
    assert default_codec.canonical("thumb00000000000000FF") == "thumb00000000000000ff"
    assert default_codec.canonical("thumb0000000000000001") == "thumb0000000000000001"
    assert default_codec.canonical("nope") is None

import pytest

from shotwell.domain.values.membership import MembershipList

A = "thumb0000000000000001"
B = "thumb0000000000000002"
V = "video-0000000000000001"


@pytest.mark.parametrize("text,expected", [
    ("", ()),
    (None, ()),
    (",", ()),
    (f"{A},", (A,)),
    (f"{A},{B},", (A, B)),
    (f"{A},,{B}", (A, B)),
    (f" {A} , {V} ,", (A, V)),
    (f"{A},{A},{B},", (A, B)),
])
def test_parse(text, expected):
    assert MembershipList.parse(text).members == expected


def test_render_canonical():
    assert MembershipList.of([A, B]).render() == f"{A},{B},"
    assert MembershipList.of([]).render() == ""
    assert ",," not in MembershipList.of([A, "", B, A]).render()


def test_set_round_trip():
    members = {A, B, V}
    assert MembershipList.parse(MembershipList.of(members).render()).as_set() == members


def test_add_and_discard_are_idempotent():
    m = MembershipList.of([A])
    assert m.add(A) is m
    assert m.add(V).members == (A, V)
    assert m.discard(V) is m
    assert m.discard(A).render() == ""


def test_container_protocol():
    m = MembershipList.parse(f"{A},{V},")
    assert A in m and B not in m
    assert list(m) == [A, V]
    assert len(m) == 2
    assert str(m) == f"{A},{V},"

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.bitmap import BitMap

SAMPLE = [1, 14, 421, 23, 5325, 6547, 756, 413, 4324, 44, 556, 6, 654]


def test_source_example():
    bitmap = BitMap(6547)
    assert all(bitmap.insert(v) for v in SAMPLE)
    assert bitmap.find(23) is True
    assert bitmap.erase(23) is True
    assert bitmap.find(23) is False


def test_duplicate_insert_returns_false():
    bitmap = BitMap(100)
    assert bitmap.insert(42) is True
    assert bitmap.insert(42) is False
    assert 42 in bitmap


def test_erase_missing_returns_false():
    bitmap = BitMap(100)
    assert bitmap.erase(5) is False


def test_insert_too_large_raises():
    bitmap = BitMap(6547)
    with pytest.raises(ValueError):
        bitmap.insert(6548)


def test_erase_too_large_raises():
    bitmap = BitMap(10)
    with pytest.raises(ValueError):
        bitmap.erase(11)


def test_negative_raises():
    bitmap = BitMap(10)
    with pytest.raises(ValueError):
        bitmap.insert(-1)


def test_find_out_of_range_is_false():
    bitmap = BitMap(10)
    assert bitmap.find(1000) is False
    assert "x" not in bitmap


def test_boundaries():
    bitmap = BitMap(64)
    assert bitmap.insert(0) and bitmap.insert(64)
    assert 0 in bitmap and 64 in bitmap
    assert 63 not in bitmap


@given(st.lists(st.integers(min_value=0, max_value=500)))
def test_matches_python_set(values):
    bitmap = BitMap(500)

    expected_inserts = []
    seen = set()
    for v in values:
        expected_inserts.append(v not in seen)
        seen.add(v)

    assert [bitmap.insert(v) for v in values] == expected_inserts
    assert {v for v in range(501) if v in bitmap} == seen

    to_erase = sorted(seen)[::2]
    assert [bitmap.erase(v) for v in to_erase] == [True] * len(to_erase)

    remaining = seen - set(to_erase)
    assert {v for v in range(501) if bitmap.find(v)} == remaining
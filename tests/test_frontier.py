from __future__ import annotations

import pytest

from ltprime.errors import BufferOverflowError
from ltprime.search.frontier import FrontierRing


def test_seed_and_indexing() -> None:
    ring = FrontierRing(8, (2, 3, 5, 7))
    assert len(ring) == 4
    assert list(ring) == [2, 3, 5, 7]
    assert ring[0] == 2 and ring[3] == 7
    assert isinstance(ring[0], int)
    assert ring.processed == 0
    assert ring.free == 4
    with pytest.raises(IndexError):
        ring[4]


def test_release_and_wraparound() -> None:
    ring = FrontierRing(4, (1, 2, 3))
    ring.release(2)
    assert list(ring) == [3]
    ring.append(4)
    ring.append(5)  # lands in slot 0
    ring.append(6)
    assert len(ring) == 4
    assert ring.processed == 2
    assert ring.free == 2
    assert list(ring) == [3, 4, 5, 6]
    ring.release(4)
    assert len(ring) == 0
    assert ring.processed == 2


def test_overflow_raises_instead_of_overwriting() -> None:
    ring = FrontierRing(3, (11, 13, 17))
    with pytest.raises(BufferOverflowError):
        ring.append(19)
    assert list(ring) == [11, 13, 17]


def test_seed_larger_than_capacity() -> None:
    with pytest.raises(BufferOverflowError):
        FrontierRing(3, (2, 3, 5, 7))


def test_peak_tracks_highest_occupancy() -> None:
    ring = FrontierRing(10, (2, 3))
    ring.append(5)
    ring.release(3)
    ring.append(7)
    assert ring.peak == 3
    assert len(ring) == 1


def test_release_more_than_live() -> None:
    ring = FrontierRing(4, (2,))
    with pytest.raises(IndexError):
        ring.release(2)


def test_holds_values_above_32_bits() -> None:
    ring = FrontierRing(2, (4_759_123_139,))
    assert ring[0] == 4_759_123_139


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        FrontierRing(0)

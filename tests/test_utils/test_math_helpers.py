"""Tests for cyclic indexing helpers."""

from __future__ import annotations

import itertools

import pytest

from contourscope.utils.math_helpers import CircularSequence, majority_increasing


def test_wraps_both_ways():
    ring = CircularSequence("abcd")
    assert ring[4] == "a"
    assert ring[-1] == "d"
    assert ring.next_index(3) == 0
    assert ring.prev_index(0) == 3


def test_walk_backwards():
    ring = CircularSequence([10, 20, 30])
    assert list(itertools.islice(ring.walk(0, -1), 4)) == [2, 1, 0, 2]


def test_empty_ring():
    with pytest.raises(IndexError):
        CircularSequence([]).wrap(0)


@pytest.mark.parametrize(
    "triple, expected",
    [
        ((0, 1, 2), True),
        ((5, 0, 2), True),
        ((2, 1, 0), False),
        ((0, 5, 3), False),
    ],
)
def test_majority_increasing(triple, expected):
    assert majority_increasing(*triple) is expected

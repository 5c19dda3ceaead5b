"""
Tests for the final re-labeling pass.
"""

from swing_structure.relabel import relabel
from swing_structure.types import SwingLabel

from conftest import make_point


def _stale_points():
    return [
        make_point(1, 15, SwingLabel.LH),
        make_point(2, 6, SwingLabel.LL, synthetic=True),
        make_point(3, 16, SwingLabel.LH),
        make_point(4, 5, SwingLabel.HL, synthetic=True),
    ]


def test_labels_rederived_from_prices():
    relabeled = relabel(_stale_points())
    assert [p.label for p in relabeled] == [
        SwingLabel.HH, SwingLabel.HL, SwingLabel.HH, SwingLabel.LL,
    ]


def test_only_labels_change():
    points = _stale_points()
    relabeled = relabel(points)
    for before, after in zip(points, relabeled):
        assert (before.index, before.price, before.kind, before.synthetic) == \
            (after.index, after.price, after.kind, after.synthetic)


def test_input_not_modified():
    points = _stale_points()
    relabel(points)
    assert points[0].label == SwingLabel.LH


def test_idempotent():
    once = relabel(_stale_points())
    assert relabel(once) == once


def test_out_of_order_input_is_sorted():
    points = list(reversed(_stale_points()))
    assert [p.index for p in relabel(points)] == [1, 2, 3, 4]


def test_empty():
    assert relabel([]) == []

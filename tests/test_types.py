"""
Tests for the core swing structure types.
"""

import pytest

from swing_structure.types import SwingKind, SwingLabel, SwingPoint, SwingSequence

from conftest import make_candle, make_point


class TestSwingLabel:

    def test_kind(self):
        assert SwingLabel.HH.kind == SwingKind.HIGH
        assert SwingLabel.LH.kind == SwingKind.HIGH
        assert SwingLabel.HL.kind == SwingKind.LOW
        assert SwingLabel.LL.kind == SwingKind.LOW

    def test_bullish_labels(self):
        assert {label for label in SwingLabel if label.is_bullish} == {SwingLabel.HH, SwingLabel.HL}

    def test_for_kind(self):
        assert SwingLabel.for_kind(SwingKind.HIGH, higher=False) == SwingLabel.LH
        assert SwingLabel.for_kind(SwingKind.LOW, higher=True) == SwingLabel.HL

    def test_string_values(self):
        assert SwingLabel("LL") is SwingLabel.LL
        assert SwingLabel.HH == "HH"


class TestSwingPoint:

    def test_label_must_match_kind(self):
        with pytest.raises(ValueError, match="not valid"):
            SwingPoint(index=1, timestamp=0, price=1.0, kind=SwingKind.HIGH, label=SwingLabel.HL)

    def test_date_is_utc(self):
        point = make_point(0, 10, SwingLabel.HH)
        assert point.date.isoformat() == "2023-11-14T22:13:20+00:00"
        assert point.is_high and not point.is_low


class TestSwingSequence:

    def test_alternation(self):
        alternating = SwingSequence(points=[
            make_point(1, 10, SwingLabel.HH), make_point(2, 5, SwingLabel.HL),
        ])
        broken = SwingSequence(points=[
            make_point(1, 10, SwingLabel.HH), make_point(2, 12, SwingLabel.HH),
        ])
        assert alternating.is_alternating
        assert not broken.is_alternating
        assert len(alternating) == 2

    def test_empty_sequence(self):
        sequence = SwingSequence()
        assert sequence.is_alternating
        assert sequence.unresolved_pairs == []


def test_candle_date():
    assert make_candle(1, 1, 2, 0.5, 1.5).date.minute == 14


def test_candle_keeps_explicit_zero_timestamp():
    candle = make_candle(5, 1, 2, 0.5, 1.5, timestamp=0)
    assert candle.timestamp == 0
    assert candle.date.year == 1970

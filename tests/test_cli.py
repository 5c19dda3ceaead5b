"""
Tests for the swing-points command line.
"""

import json

import pytest

from swing_structure.cli.main import create_parser, main


class TestParser:

    def test_defaults(self):
        args = create_parser().parse_args(['detect', 'data.csv'])
        assert args.command == 'detect'
        assert args.lookback == 5
        assert args.json is False
        assert args.verbose == 0

    def test_analyze_requires_entry(self):
        with pytest.raises(SystemExit) as excinfo:
            create_parser().parse_args(['analyze', 'data.csv'])
        assert excinfo.value.code == 2


class TestDetect:

    def test_text_output(self, zigzag_csv, capsys):
        assert main(['detect', zigzag_csv, '--lookback', '2']) == 0

        out = capsys.readouterr().out
        assert "20 candles, 5 swing points (lookback=2)" in out
        assert "HH  17.00" in out
        assert "uptrend: candles 3-17, 17.00 -> 21.00 (+0.29/candle)" in out
        assert "Warning" not in out

    def test_json_output(self, zigzag_csv, capsys):
        assert main(['detect', zigzag_csv, '--lookback', '2', '--json']) == 0

        data = json.loads(capsys.readouterr().out)
        assert [p['label'] for p in data['swing_points']] == ['HH', 'HL', 'HH', 'HL', 'HH']
        assert data['unresolved_pairs'] == []

    def test_missing_file(self, tmp_path, capsys):
        assert main(['detect', str(tmp_path / 'missing.csv')]) == 1
        assert "Error: File not found" in capsys.readouterr().out

    def test_invalid_lookback(self, zigzag_csv, capsys):
        assert main(['detect', zigzag_csv, '--lookback', '0']) == 1
        assert "Error: lookback must be >= 1" in capsys.readouterr().out


class TestTrend:

    def test_trend_at_end(self, zigzag_csv, capsys):
        assert main(['trend', zigzag_csv, '--lookback', '2']) == 0
        out = capsys.readouterr().out
        assert out.strip() == "Trend at candle 19: bullish [HL -> HH -> HL -> HH]"

    def test_trend_at_candle(self, zigzag_csv, capsys):
        assert main(['trend', zigzag_csv, '--lookback', '2', '--at', '2']) == 0
        assert "Trend at candle 2: bullish [(no swing points)]" in capsys.readouterr().out


class TestAnalyze:

    def test_analysis(self, zigzag_csv, capsys):
        assert main(['analyze', zigzag_csv, '--lookback', '2', '--entry', '6', '--json']) == 0

        data = json.loads(capsys.readouterr().out)
        assert data['reversal_index'] == 10
        assert data['reversal_label'] == 'HH'
        assert data['candle_count'] == 5

    def test_text_analysis(self, zigzag_csv, capsys):
        assert main(['analyze', zigzag_csv, '--lookback', '2', '--entry', '6']) == 0
        out = capsys.readouterr().out
        assert "Reversal #10" in out
        assert "+80.00%" in out

    def test_last_candle(self, zigzag_csv, capsys):
        assert main(['analyze', zigzag_csv, '--lookback', '2', '--entry', '19']) == 1
        assert "No analysis possible for candle 19" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: swing-points" in capsys.readouterr().out

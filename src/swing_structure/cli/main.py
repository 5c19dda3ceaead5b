"""
Main CLI Module for Swing Structure Analysis

Runs swing point detection, trend verdicts and entry analysis on OHLC CSV
files, and starts the HTTP server.

Commands:
- detect: List swing points of a file
- trend: Trend verdict at the end of the file (or at a given candle)
- analyze: Entry-to-reversal analysis from a given candle
- serve: Run the HTTP server
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..adapters import swing_points_to_records
from ..calculator import build_swing_sequence
from ..data.ohlc_loader import load_candles
from ..detection_config import DetectionConfig
from ..entry_analyzer import analyze_entry
from ..trend_oracle import analyze_trend, recent_swing_points
from ..trend_sequences import detect_trend_sequences

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _load_sequence(args):
    """Load the file named by args and run the swing pipeline on it."""
    config = DetectionConfig(lookback=args.lookback)
    candles = load_candles(args.file)
    sequence = build_swing_sequence(candles, config)
    return candles, sequence


def run_detect_command(args) -> bool:
    """Print the swing points of a file."""
    candles, sequence = _load_sequence(args)

    if args.json:
        print(json.dumps({
            "swing_points": swing_points_to_records(sequence.points),
            "unresolved_pairs": sequence.unresolved_pairs,
        }, indent=2))
        return True

    print(f"{len(candles)} candles, {len(sequence.points)} swing points (lookback={args.lookback})")
    for point in sequence.points:
        marker = " *" if point.synthetic else ""
        print(
            f"  #{point.index:<6} {point.date.strftime('%Y-%m-%d %H:%M')}  "
            f"{point.label.value}  {point.price:.2f}{marker}"
        )
    if any(p.synthetic for p in sequence.points):
        print("  (* inserted between two consecutive highs or lows)")

    for run in detect_trend_sequences(sequence.points):
        print(
            f"  {run.direction}: candles {run.start_index}-{run.end_index}, "
            f"{run.start_price:.2f} -> {run.end_price:.2f} ({run.slope():+.2f}/candle)"
        )

    if sequence.unresolved_pairs:
        print(f"Warning: {len(sequence.unresolved_pairs)} pair(s) could not be alternated: "
              f"{sequence.unresolved_pairs}")
    return True


def run_trend_command(args) -> bool:
    """Print the trend verdict from the latest swing points."""
    candles, sequence = _load_sequence(args)
    reference = args.at if args.at is not None else len(candles) - 1

    recent = recent_swing_points(sequence.points, reference)
    verdict = analyze_trend(sequence.points, reference_index=reference)

    labels = " -> ".join(p.label.value for p in recent) or "(no swing points)"
    print(f"Trend at candle {reference}: {verdict.value} [{labels}]")
    return True


def run_analyze_command(args) -> bool:
    """Print the entry-to-reversal analysis for an entry candle."""
    candles, sequence = _load_sequence(args)
    result = analyze_entry(candles, args.entry, sequence.points)

    if result is None:
        print(f"No analysis possible for candle {args.entry}: "
              f"pick a candle before the last one (0-{len(candles) - 2})")
        return False

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return True

    print(f"Entry    #{result.entry_index}  close {result.entry_price:.2f}")
    print(f"Reversal #{result.reversal_index}  close {result.reversal_price:.2f}  ({result.reversal_label})")
    print(f"Candles  {result.candle_count}")
    print(f"Max favorable {result.max_favorable_price:.2f} ({result.max_favorable_pct:+.2f}%)")
    print(f"Max adverse   {result.max_adverse_price:.2f} ({result.max_adverse_pct:+.2f}%)")
    print(f"Final P/L     {result.final_pnl_abs:+.2f} ({result.final_pnl_pct:+.2f}%)")
    print(f"Trend         {result.trend_verdict.value}")
    return True


def run_serve_command(args) -> bool:
    """Run the HTTP server (blocks)."""
    from ..server.main import run_server

    run_server(args.host, args.port)
    return True


def _add_file_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'file',
        help='OHLC CSV file (semicolon historical format or time,open,high,low,close)'
    )
    parser.add_argument(
        '--lookback',
        type=int,
        default=5,
        help='Candles checked on each side of a swing point (default: 5)'
    )


def create_parser():
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='swing-points',
        description="Swing point detection and trend analysis for OHLC data",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Enable verbose logging (-vv for debug)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    detect_parser = subparsers.add_parser('detect', help='List swing points of a file')
    _add_file_arguments(detect_parser)
    detect_parser.add_argument('--json', action='store_true', help='Print JSON records')

    trend_parser = subparsers.add_parser('trend', help='Trend verdict from the latest swing points')
    _add_file_arguments(trend_parser)
    trend_parser.add_argument(
        '--at',
        type=int,
        help='Candle index to read the trend at (default: last candle)'
    )

    analyze_parser = subparsers.add_parser('analyze', help='Entry-to-reversal analysis')
    _add_file_arguments(analyze_parser)
    analyze_parser.add_argument('--entry', type=int, required=True, help='Entry candle index')
    analyze_parser.add_argument('--json', action='store_true', help='Print JSON result')

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP server')
    serve_parser.add_argument('--host', default='127.0.0.1', help='Host to bind to (default: 127.0.0.1)')
    serve_parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')

    return parser


COMMANDS = {
    'detect': run_detect_command,
    'trend': run_trend_command,
    'analyze': run_analyze_command,
    'serve': run_serve_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 1

    _configure_logging(args.verbose)

    try:
        success = COMMANDS[args.command](args)
    except (FileNotFoundError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        return 1

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())

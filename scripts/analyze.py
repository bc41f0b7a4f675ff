#!/usr/bin/env python3
"""
CruiseFit Flight Speed Analysis Script

Fits the flight catalog against each distance model and prints how far
every flight is off the fitted speed.

Usage:
    python scripts/analyze.py [--config CONFIG_FILE] [--metric sphere|ae_map]
                              [--color-scale FACTOR] [--no-color] [--output REPORT]
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cruisefit.config import Config
from cruisefit.errors import CruiseFitError
from cruisefit.flights import load_catalog
from cruisefit.geometry import METRICS, get_metric
from cruisefit.analysis import FlightAnalyzer, ReportGenerator


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="CruiseFit - Compare distance models against flight durations"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="cruisefit.yaml",
        help="Path to configuration file (default: cruisefit.yaml)",
    )
    parser.add_argument(
        "--metric",
        action="append",
        choices=sorted(METRICS),
        help="Distance metric to fit (repeatable, default: from config)",
    )
    parser.add_argument(
        "--color-scale",
        type=float,
        help="Factor applied to errors before coloring (default: from config)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored console output",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output file for a text report (optional)",
    )
    return parser


def main(argv=None):
    """Main entry point for the speed analysis."""
    args = build_parser().parse_args(argv)

    config = Config(args.config)
    metric_keys = args.metric or config.metrics
    color_scale = args.color_scale if args.color_scale is not None else config.color_scale

    try:
        metrics = [get_metric(key) for key in metric_keys]
        flights = load_catalog()
        analyzer = FlightAnalyzer(color_scale=color_scale)
        batches = analyzer.analyze_all(flights, metrics)
    except CruiseFitError as e:
        print(f"❌ Invalid flight data: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"❌ Invalid settings: {e}")
        sys.exit(1)

    reporter = ReportGenerator(
        decimals=config.percent_decimals,
        show_route=config.show_route,
        use_color=config.use_color and not args.no_color,
    )

    for batch in batches:
        reporter.print_batch(batch)

    if args.output:
        try:
            reporter.generate_report(batches, args.output)
        except OSError as e:
            print(f"❌ Error writing report: {e}")
            sys.exit(1)
        print(f"\n💾 Report saved to: {args.output}")


if __name__ == "__main__":
    main()

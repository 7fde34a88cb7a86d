"""CLI commands for the Bovada props export (one-off overrides, points lookup)."""

from __future__ import annotations

import argparse
import sys

from bovada_props.config import Settings
from bovada_props.export.points import odds_to_points
from bovada_props.main import configure_logging, run_export


def build_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.output:
        overrides["output_path"] = args.output
    if args.endpoint:
        overrides["endpoints"] = args.endpoint
    if args.keep_placeholders:
        overrides["skip_placeholder_markets"] = False
    if args.no_points:
        overrides["include_points"] = False
    return Settings(**overrides)


def print_points(values: list[float]) -> int:
    status = 0
    for odds in values:
        try:
            print(f"  {odds:g}: {odds_to_points(odds)} points")
        except ValueError as exc:
            print(f"  {odds:g}: {exc}", file=sys.stderr)
            status = 1
    return status


def print_endpoints(settings: Settings) -> int:
    for i, endpoint in enumerate(settings.endpoints, start=1):
        print(f"  {i}. {endpoint}")
    return 0


def cli(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="bovada-props-tools", description="Bovada props CLI tools")
    sub = parser.add_subparsers(dest="command")

    ex = sub.add_parser("export", help="Fetch endpoints and write the props CSV")
    ex.add_argument("--output", help="CSV path (default from settings)")
    ex.add_argument("--endpoint", action="append", help="Coupon URL; repeat to fetch several")
    ex.add_argument("--keep-placeholders", action="store_true", help="Keep markets with no outcomes")
    ex.add_argument("--no-points", action="store_true", help="Omit $$points= from outcome cells")

    pt = sub.add_parser("points", help="Show points for decimal odds")
    pt.add_argument("odds", nargs="+", type=float, help="Decimal odds, e.g. 1.91")

    sub.add_parser("endpoints", help="List configured endpoints")

    args = parser.parse_args(argv)

    if args.command == "export":
        settings = build_settings(args)
        configure_logging(settings.log_level)
        sys.exit(run_export(settings))
    elif args.command == "points":
        sys.exit(print_points(args.odds))
    elif args.command == "endpoints":
        sys.exit(print_endpoints(Settings()))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    cli()

"""Command-line front end: clocks, conversions, meeting slots and zone management."""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys

from app.deps import get_app_state
from app.services.clock_service import clock_rows, format_clock_line
from app.services.convert_service import format_conversion, convert
from app.services.meeting_service import format_meeting, plan_meeting, split_zone_list
from app.services.zone_service import add_zone, list_zones, remove_zone
from core.tparse.parser import parse_time
from core.tz.resolver import load_zone


def cmd_clock(args: argparse.Namespace) -> None:
    """Print every configured zone at the current instant (or at --at)."""
    state = get_app_state()
    instant = None
    if args.at:
        reference = dt.datetime.now(load_zone(state.display_zone))
        instant = parse_time(args.at, reference).time
    for row in clock_rows(list_zones(), now=instant):
        print(format_clock_line(row))


def cmd_convert(args: argparse.Namespace) -> None:
    """Convert a query like '3pm NYC to Berlin'."""
    result = convert(" ".join(args.query), resolver=get_app_state().resolver)
    print(format_conversion(result))


def cmd_meeting(args: argparse.Namespace) -> None:
    """Show business hours side by side and their overlap."""
    state = get_app_state()
    display = state.resolver.resolve(args.display) if args.display else state.display_zone
    plan = plan_meeting(
        split_zone_list(" ".join(args.zones)),
        display,
        business_hours=state.business_hours,
        resolver=state.resolver,
    )
    print(format_meeting(plan))


def cmd_resolve(args: argparse.Namespace) -> None:
    print(get_app_state().resolver.resolve(" ".join(args.query)))


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse a time expression relative to now in --zone (default: display zone)."""
    state = get_app_state()
    zone_id = state.resolver.resolve(args.zone) if args.zone else state.display_zone
    reference = dt.datetime.now(load_zone(zone_id))
    parsed = parse_time(" ".join(args.expression), reference)
    print(f"{parsed.time.isoformat()}  ({zone_id}, rule: {parsed.rule})")


def cmd_zones_list(_args: argparse.Namespace) -> None:
    for zone in list_zones():
        suffix = "  [local]" if zone.local else ""
        print(f"{zone.name:<15}  {zone.zone_id}{suffix}")


def cmd_zones_add(args: argparse.Namespace) -> None:
    zone = add_zone(" ".join(args.name))
    print(f"Added {zone.name} ({zone.zone_id})")


def cmd_zones_remove(args: argparse.Namespace) -> None:
    zone = remove_zone(" ".join(args.name))
    print(f"Removed {zone.name} ({zone.zone_id})")


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the HTTP API."""
    from app.uvicorn_runner import main as run_server

    run_server(host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(prog="aeon", description="Time zone manager")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    clock_p = sub.add_parser("clock", help="Show configured clocks")
    clock_p.add_argument("--at", help="Show the clocks at a time expression, e.g. 'tomorrow 3pm'")
    clock_p.set_defaults(func=cmd_clock)

    convert_p = sub.add_parser("convert", help="Convert '3pm NYC to Berlin'")
    convert_p.add_argument("query", nargs="+")
    convert_p.set_defaults(func=cmd_convert)

    meeting_p = sub.add_parser("meeting", help="Overlap business hours, e.g. 'NYC, London, Tokyo'")
    meeting_p.add_argument("zones", nargs="+")
    meeting_p.add_argument("--display", help="Zone to show the windows in")
    meeting_p.set_defaults(func=cmd_meeting)

    resolve_p = sub.add_parser("resolve", help="Print the timezone for a city or alias")
    resolve_p.add_argument("query", nargs="+")
    resolve_p.set_defaults(func=cmd_resolve)

    parse_p = sub.add_parser("parse", help="Parse a time expression")
    parse_p.add_argument("expression", nargs="+")
    parse_p.add_argument("--zone", help="Zone the expression is read in")
    parse_p.set_defaults(func=cmd_parse)

    zones_p = sub.add_parser("zones", help="Manage configured clocks")
    zones_sub = zones_p.add_subparsers(dest="zones_command")
    zones_sub.add_parser("list").set_defaults(func=cmd_zones_list)
    add_p = zones_sub.add_parser("add")
    add_p.add_argument("name", nargs="+")
    add_p.set_defaults(func=cmd_zones_add)
    remove_p = zones_sub.add_parser("remove")
    remove_p.add_argument("name", nargs="+")
    remove_p.set_defaults(func=cmd_zones_remove)
    zones_p.set_defaults(func=cmd_zones_list)

    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host")
    serve_p.add_argument("--port", type=int)
    serve_p.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    """CLI entry point invoked via `aeon ...` or `python -m cli.aeon_cli ...`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        args.func(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

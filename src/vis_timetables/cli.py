"""Command line interface for Vis transport timetables."""

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from datetime import date
from enum import Enum
from typing import Any

import aiohttp
from pydantic import BaseModel

from vis_timetables.adapters.config import (
    AppConfig,
    CarrierDirectoryLoader,
    HolidayCalendarLoader,
)
from vis_timetables.adapters.formatters import TimetableFormatter
from vis_timetables.adapters.transport_api import (
    HttpBannerRepository,
    HttpDepartureRepository,
    HttpLineRepository,
    TransportHttpClient,
)
from vis_timetables.application.services import (
    CarrierResolver,
    DayTypeResolver,
    ScheduleOrchestrator,
    ScheduleViewBuilder,
    TimelineBuilder,
)
from vis_timetables.domain.models import BannerContext, Contact, ScheduleView, TransportMode

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def view_to_json(view: ScheduleView) -> str:
    """Serialize a schedule view, including derived flags, as JSON."""
    data = dataclasses.asdict(view)
    data["has_departures"] = view.has_departures
    data["line_title"] = view.line_title
    return json.dumps(data, indent=2, ensure_ascii=False, default=_json_default)


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD argument."""
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def show_day_type(config: AppConfig, service_date: date, language: str) -> None:
    """Print the schedule day type of a date."""
    calendar = HolidayCalendarLoader.load(config)
    day_type = DayTypeResolver.resolve_for_calendar(service_date, calendar)
    formatter = TimetableFormatter(language)
    output = f"{service_date.isoformat()}: {day_type.value} ({formatter.day_type_label(day_type)})"
    holiday = calendar.holiday_for(service_date)
    if holiday:
        output += f" - {holiday.name(language)}"
    print(output)


def show_carrier(
    config: AppConfig, line_number: str, operator: str | None, format_json: bool = False
) -> None:
    """Print the carrier and ticket channel of a line number."""
    resolver = CarrierResolver(CarrierDirectoryLoader.load(config))
    contacts = [Contact(operator=operator)] if operator else []
    carrier = resolver.resolve(line_number, contacts)
    display = resolver.ticket_display(carrier)

    if format_json:
        payload = {
            "line_number": line_number,
            "carrier": dataclasses.asdict(carrier) if carrier else None,
            "ticket_display": display.value,
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if carrier is None:
        print(f"Line {line_number}: unknown carrier")
        return
    print(f"Line {line_number}: {carrier.name}")
    print(f"  Tickets: {carrier.ticket_url or 'on board only'}")


async def show_departures(
    config: AppConfig,
    line_id: str,
    transport_mode: TransportMode,
    service_date: date,
    direction: int,
    language: str,
    format_json: bool = False,
) -> int:
    """Load a line timetable and print it.

    Args:
        config: Application configuration.
        line_id: Line to show.
        transport_mode: Road or sea.
        service_date: Date to show departures for.
        direction: Direction index to show.
        language: Display language.
        format_json: Print the view as JSON instead of text.

    Returns:
        Process exit code.
    """
    holiday_calendar = HolidayCalendarLoader.load(config)
    carrier_directory = CarrierDirectoryLoader.load(config)
    banner_context = BannerContext(
        device_id=config.device_id,
        user_mode=config.user_mode,
        municipality=config.municipality,
        screen=config.banner_screen,
    )

    async with aiohttp.ClientSession() as session:
        http_client = TransportHttpClient(config, session=session)
        orchestrator = ScheduleOrchestrator(
            line_repository=HttpLineRepository(http_client),
            departure_repository=HttpDepartureRepository(http_client),
            banner_repository=HttpBannerRepository(http_client),
            holiday_calendar=holiday_calendar,
            banner_context=banner_context,
            line_id=line_id,
            transport_mode=transport_mode,
            language=language,
            selected_date=service_date,
            selected_direction=direction,
        )
        await orchestrator.load()
        available = orchestrator.direction_selector.available_directions
        if available and orchestrator.current_route is None:
            print(
                f"Line {line_id} has no direction {direction}, available: {available}",
                file=sys.stderr,
            )
            return 1

    builder = ScheduleViewBuilder(
        TimelineBuilder(), CarrierResolver(carrier_directory), holiday_calendar
    )
    view = builder.build(orchestrator.state)

    if view.error is not None:
        print(f"Error loading line {line_id}: {view.error.reason}", file=sys.stderr)
        return 1

    if format_json:
        print(view_to_json(view))
    else:
        print(TimetableFormatter(language).render(view))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Vis municipal transport timetables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Which schedule applies on a date
  vis-timetables daytype 2026-06-04

  # Carrier and ticket shop of a sea line
  vis-timetables carrier 602

  # Departures of a line for a date and direction
  vis-timetables departures <line-id> --mode sea --date 2026-07-01 --direction 1
        """,
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    daytype_parser = subparsers.add_parser("daytype", help="Show the day type of a date")
    daytype_parser.add_argument("date", type=parse_date, help="Date (YYYY-MM-DD)")
    daytype_parser.add_argument("--language", choices=["hr", "en"], help="Display language")

    carrier_parser = subparsers.add_parser("carrier", help="Resolve the carrier of a line")
    carrier_parser.add_argument("line_number", help="Public line number (e.g., 602)")
    carrier_parser.add_argument("--operator", help="Operator name from the line contacts")
    carrier_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Show departures of a line")
    departures_parser.add_argument("line_id", help="Line ID")
    departures_parser.add_argument(
        "--mode", choices=[m.value for m in TransportMode], help="Transport mode"
    )
    departures_parser.add_argument("--date", type=parse_date, help="Date (YYYY-MM-DD)")
    departures_parser.add_argument("--direction", type=int, default=0, help="Direction index")
    departures_parser.add_argument("--language", choices=["hr", "en"], help="Display language")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def configure_logging(verbosity: int) -> None:
    """Configure root logging once for the CLI process."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)

    try:
        config = AppConfig()
        language = getattr(args, "language", None) or config.language

        if args.command == "daytype":
            show_day_type(config, args.date, language)

        elif args.command == "carrier":
            show_carrier(config, args.line_number, args.operator, format_json=args.json)

        elif args.command == "departures":
            exit_code = await show_departures(
                config,
                args.line_id,
                TransportMode(args.mode or config.default_transport_mode),
                args.date or config.today(),
                args.direction,
                language,
                format_json=args.json,
            )
            if exit_code:
                sys.exit(exit_code)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()

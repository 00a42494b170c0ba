"""
CLI wrapper for compose_reading().

Usage:
    luopan --year 2025 --heading 172 [--align-compass] [--format text]
    luopan --date 2025-02-01T09:30 --latitude 22.3 --longitude 114.17
    luopan --year 2025 --heading 172 --save [--records PATH]
"""

import argparse
import json
import logging
from datetime import datetime, timezone

from luopan.astro_calendar import fengshui_year, local_to_utc
from luopan.reading import compose_reading, format_reading
from luopan.records import (
    DEFAULT_RECORDS_PATH, RECORD_LIMIT, load_records, make_record,
    push_record, save_records,
)

logger = logging.getLogger("luopan")


def resolve_year(args) -> int:
    """Year from --year, or from --date via Li Chun."""
    if args.year is not None:
        return args.year
    if args.date is None:
        return fengshui_year(datetime.now(timezone.utc))

    moment = datetime.fromisoformat(args.date)
    if args.latitude is not None and args.longitude is not None:
        moment = local_to_utc(moment, args.latitude, args.longitude)
    return fengshui_year(moment)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Flying star grid, facing mountain and Tai Sui for a year."
    )
    when = parser.add_mutually_exclusive_group()
    when.add_argument("--year", type=int, help="Feng-shui year")
    when.add_argument("--date", help="ISO date/time; year turns over at Li Chun")
    parser.add_argument("--latitude", type=float, default=None,
                        help="Location of --date, to read it as local clock time")
    parser.add_argument("--longitude", type=float, default=None)
    parser.add_argument("--heading", type=float, default=180.0,
                        help="Compass heading faced, degrees (default: 180)")
    parser.add_argument("--align-compass", dest="align_compass", action="store_true",
                        help="Rotate the grid to the heading")
    parser.add_argument("--format", dest="output_format", default="json",
                        choices=["json", "text"])
    parser.add_argument("--save", action="store_true",
                        help=f"Save this reading (newest {RECORD_LIMIT} kept)")
    parser.add_argument("--records", default=str(DEFAULT_RECORDS_PATH),
                        help="Saved records file")
    parser.add_argument("--verbose", action="store_true")
    return parser


def run(argv=None) -> dict:
    """Parse arguments, print the reading and return its context."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        year = resolve_year(args)
        context = compose_reading(year, args.heading, args.align_compass)
        if args.save:
            records = push_record(load_records(args.records),
                                  make_record(year, args.heading))
            path = save_records(records, args.records)
            logger.info("Records written to %s", path)
    except ValueError as e:
        parser.error(str(e))

    if args.output_format == "text":
        print(format_reading(context))
    else:
        print(json.dumps(context, indent=2, ensure_ascii=False))
    return context


def main(argv=None):
    """Console entry point; returns None so the wrapper exits with status 0."""
    run(argv)


if __name__ == "__main__":
    main()

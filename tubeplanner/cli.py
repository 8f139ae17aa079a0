"""Command-line interface for the trip planner.

Usage:
    tubeplanner "Queen's Park" "Bond Street"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import get_config
from .container import get_container
from .domain.errors import (
    GraphError,
    NoRouteFoundError,
    StationNotFoundError,
    TubePlannerError,
)
from .services import TripPlannerService

EXIT_OK = 0
EXIT_INVALID_STATION = 1
EXIT_NO_ROUTE = 3
EXIT_DATA_ERROR = 4

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tubeplanner",
        description="Print directions for the fastest trip between two stations.",
    )
    parser.add_argument("start", help="departure station name")
    parser.add_argument("destination", help="arrival station name")
    return parser


def configure_logging() -> None:
    """Send log records to stderr using the configured level and format."""
    observability = get_config().observability
    logging.basicConfig(
        level=observability.level.upper(),
        format=observability.format,
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging()

    planner: TripPlannerService = get_container().resolve(TripPlannerService)
    try:
        directions = planner.directions(args.start, args.destination)
    except StationNotFoundError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return EXIT_INVALID_STATION
    except NoRouteFoundError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return EXIT_NO_ROUTE
    except GraphError as e:
        logger.error("Network dataset unavailable", extra={"file": e.file_path})
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_DATA_ERROR
    except TubePlannerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_DATA_ERROR

    print(directions)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

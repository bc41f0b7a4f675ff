"""
Flight Resolver
Turns raw catalog records into validated Flight objects.

Airport codes are resolved to coordinates exactly once, here, so the
analysis core only ever sees embedded Coordinates.
"""

from typing import Any, Dict, Iterable, List, Mapping

from ..errors import UnknownAirportCodeError
from .airports import AIRPORTS
from .catalog import FLIGHT_RECORDS
from .models import Coordinate, Flight
from .timing import parse_time_list


def resolve_coordinate(
    code: str, airports: Mapping[str, Coordinate] = AIRPORTS
) -> Coordinate:
    """
    Look up the coordinate of an airport code.

    Args:
        code: Airport code (case and surrounding whitespace are ignored)
        airports: Airport table to search

    Returns:
        Airport coordinate

    Raises:
        UnknownAirportCodeError: If the code is not in the table
    """
    key = code.strip().upper()
    try:
        return airports[key]
    except KeyError:
        raise UnknownAirportCodeError(f"Unknown airport code: {code!r}") from None


def build_flight(
    record: Dict[str, Any], airports: Mapping[str, Coordinate] = AIRPORTS
) -> Flight:
    """
    Build a Flight from a raw record with name, times, src and dst keys.

    Raises:
        MalformedDurationError: If a duration line is malformed
        EmptySampleListError: If the duration block is empty
        UnknownAirportCodeError: If an airport code is unknown
    """
    src = record["src"].strip().upper()
    dst = record["dst"].strip().upper()

    return Flight(
        name=record["name"],
        samples=tuple(parse_time_list(record["times"])),
        source=resolve_coordinate(src, airports),
        destination=resolve_coordinate(dst, airports),
        source_code=src,
        destination_code=dst,
    )


def load_catalog(
    records: Iterable[Dict[str, Any]] = FLIGHT_RECORDS,
    airports: Mapping[str, Coordinate] = AIRPORTS,
) -> List[Flight]:
    """Build every record; the first invalid record aborts the load."""
    return [build_flight(record, airports) for record in records]

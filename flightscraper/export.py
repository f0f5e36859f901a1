import csv
import logging
from pathlib import Path

from .models import FlightLeg, RoundtripFlight
from .processing.base import BaseFlightProcessor

MAX_LEGS_PER_DIRECTION = 2
LEG_FIELDS = ("airport departure", "airport arrival", "time departure", "time arrival", "flight number")


def csv_header() -> list[str]:
    header = ["Cheapest", "Price", "Taxes"]
    for direction in ("outbound", "inbound"):
        for slot in range(1, MAX_LEGS_PER_DIRECTION + 1):
            header.extend(f"{direction} {slot} {name}" for name in LEG_FIELDS)
    return header


def _leg_fields(legs: list[FlightLeg]) -> list[str]:
    fields: list[str] = []
    for slot in range(MAX_LEGS_PER_DIRECTION):
        if slot < len(legs):
            leg = legs[slot]
            fields.extend([
                leg.origin,
                leg.destination,
                BaseFlightProcessor.format_timestamp(leg.departure_time),
                BaseFlightProcessor.format_timestamp(leg.arrival_time),
                leg.flight_number,
            ])
        else:
            fields.extend([""] * len(LEG_FIELDS))
    return fields


def roundtrip_row(flight: RoundtripFlight, cheapest: bool) -> list[str]:
    return [str(cheapest), str(flight.price), str(flight.taxes),
            *_leg_fields(flight.outbound_legs), *_leg_fields(flight.inbound_legs)]


def save_roundtrips_csv(roundtrips: list[RoundtripFlight], file_name: str, output_dir: Path) -> Path:
    """Write one row per roundtrip; the Cheapest column flags rows matching the minimum total."""
    if not roundtrips:
        raise ValueError("No roundtrip flights to save")
    min_total = min(r.total_price for r in roundtrips)
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / file_name
    with open(csv_path, 'wt', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(csv_header())
        for flight in roundtrips:
            writer.writerow(roundtrip_row(flight, flight.total_price == min_total))
    logging.debug("Wrote %d rows to %s", len(roundtrips), csv_path)
    return csv_path

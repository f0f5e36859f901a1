"""High-level orchestration: fetch one search, reduce it, pair roundtrips and export them.

Usage patterns:

1. Fully interactive (prompts for airports and dates):
   flightscraper

2. Non-interactive, query given on the command line:
   flightscraper --origin MAD --destination AUH --depart 2026-11-02 --return 2026-11-09
"""
import argparse
import logging
from pathlib import Path
from typing import Callable, Sequence

from .config import Settings, settings
from .emailer import send_cheapest_offers
from .export import save_roundtrips_csv
from .fetching.search_api import SearchApiClient, SearchApiError
from .logging_config import setup_logging
from .models import Flight, SearchQuery
from .processing.itinerary import ItineraryReducer
from .processing.roundtrip import RoundtripPairer, select_cheapest
from .prompts import PromptAttemptsExceeded, collect_query
from .report import format_roundtrips


def fetch_flights(client: SearchApiClient, query: SearchQuery) -> list[Flight] | None:
    """Run the search and reduce it to one-way flights. Returns None when the fetch failed."""
    try:
        response = client.search(query)
        data = response.body.data
        return ItineraryReducer().process(data.journeys, data.total_availabilities)
    except SearchApiError as e:
        logging.error("Error fetching flight data: %s", e)
    except ValueError as e:
        # strptime failure on a leg timestamp
        logging.error("Error fetching flight data: malformed response (%s)", e)
    return None


def handle_roundtrips(
        flights: list[Flight],
        query: SearchQuery,
        output_dir: Path,
        output_func: Callable[[str], None] = print,
        email: bool = False,
        config: Settings = settings,
) -> Path | None:
    roundtrips = RoundtripPairer().process(flights)
    if not roundtrips:
        logging.info("No roundtrip combinations found.")
        return None

    cheapest = select_cheapest(roundtrips)
    output_func(format_roundtrips("All Roundtrip Flights:", roundtrips))
    output_func(format_roundtrips("Cheapest Flight Options:", cheapest))

    csv_path = save_roundtrips_csv(roundtrips, query.csv_file_name, output_dir)
    logging.info("Flights data saved to %s", csv_path)

    if email:
        send_cheapest_offers(query, cheapest, offer_count=len(roundtrips), config=config)
    return csv_path


def run_pipeline(
        query: SearchQuery,
        client: SearchApiClient | None = None,
        output_dir: Path | None = None,
        output_func: Callable[[str], None] = print,
        email: bool = False,
        config: Settings = settings,
) -> Path | None:
    output_dir = output_dir if output_dir is not None else config.output_dir

    owns_client = client is None
    if owns_client:
        client = SearchApiClient(config.api_base_url, config.request_timeout)
    try:
        flights = fetch_flights(client, query)
    finally:
        if owns_client:
            client.close()
    if not flights:
        logging.info("No flights fetched. Please check your input and try again.")
        return None
    logging.info("Flight data fetched successfully.")
    return handle_roundtrips(flights, query, output_dir, output_func=output_func, email=email, config=config)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Roundtrip flight search to CSV")
    p.add_argument("--origin", help=f"Origin IATA code ({', '.join(settings.origin_airports)})")
    p.add_argument("--destination", help=f"Destination IATA code ({', '.join(settings.destination_airports)})")
    p.add_argument("--depart", help="Outbound date yyyy-mm-dd")
    p.add_argument("--return", dest="return_date", help="Inbound date yyyy-mm-dd")
    p.add_argument("--output-dir", type=Path, default=None, help=f"CSV directory (default {settings.output_dir})")
    p.add_argument("--max-attempts", type=int, default=None, help="Give up after this many invalid answers")
    p.add_argument("--email", action="store_true", help="Send the cheapest offers by email if credentials configured")
    p.add_argument("--log-level", default="INFO")
    return p


def main_cli(argv: Sequence[str] | None = None, input_func: Callable[[str], str] = input) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        query = collect_query(
            origin=args.origin,
            destination=args.destination,
            outbound_date=args.depart,
            inbound_date=args.return_date,
            input_func=input_func,
            max_attempts=args.max_attempts,
        )
    except PromptAttemptsExceeded as e:
        logging.error("%s", e)
        return 1
    except (EOFError, KeyboardInterrupt):
        logging.error("Input closed before the search query was complete")
        return 1
    except ValueError as e:
        parser.error(str(e))

    try:
        run_pipeline(query, output_dir=args.output_dir, email=args.email)
    except Exception:  # noqa: BLE001
        logging.exception("Pipeline failed")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())

import logging
from decimal import Decimal

from .base import BaseFlightProcessor
from ..models import INBOUND, OUTBOUND, Flight, FlightLeg, RawJourney, RawLeg, TotalAvailability


class ItineraryReducer(BaseFlightProcessor):
    """Turn raw API journeys into one-way Flight records with at most one connection."""

    def __init__(self, max_connections: int = 1):
        self.max_connections = max_connections
        self.dropped_legs = 0

    # ---------------- helpers -----------------
    @staticmethod
    def find_price(recommendation_id: int, availabilities: list[TotalAvailability]) -> Decimal | None:
        for availability in availabilities:
            if availability.recommendation_id == recommendation_id:
                return availability.total
        return None

    def to_leg(self, raw: RawLeg) -> FlightLeg:
        return FlightLeg(
            origin=raw.airport_departure.code,
            destination=raw.airport_arrival.code,
            departure_time=self.parse_timestamp(raw.date_departure),
            arrival_time=self.parse_timestamp(raw.date_arrival),
            flight_number=f"{raw.company_code}{raw.number}",
        )

    def to_flight(self, journey: RawJourney, availabilities: list[TotalAvailability]) -> Flight:
        price = self.find_price(journey.recommendation_id, availabilities)
        if price is None:
            logging.warning("No total availability for recommendation %s, using price 0",
                            journey.recommendation_id)
            price = Decimal(0)
        flight = Flight(recommendation_id=journey.recommendation_id, price=price, taxes=journey.import_tax_adl)
        legs = [self.to_leg(raw) for raw in journey.flights]
        if journey.direction == OUTBOUND:
            flight.outbound_legs.extend(legs)
        elif journey.direction == INBOUND:
            flight.inbound_legs.extend(legs)
        else:
            self.dropped_legs += len(legs)
        return flight

    # ---------------- public API -----------------
    def process(self, journeys: list[RawJourney], availabilities: list[TotalAvailability]) -> list[Flight]:
        self.dropped_legs = 0
        flights: list[Flight] = []
        for journey in journeys:
            if journey.number_of_connections > self.max_connections:
                continue
            flights.append(self.to_flight(journey, availabilities))
        if not flights:
            logging.info("No journeys with at most %d connection(s); skipped journeys with more connections",
                         self.max_connections)
        if self.dropped_legs:
            logging.warning("Dropped %d leg(s) with unrecognized direction flag", self.dropped_legs)
        return flights

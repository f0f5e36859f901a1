from typing import Iterator

from tqdm import tqdm

from .base import BaseFlightProcessor
from ..models import Flight, RoundtripFlight


class RoundtripPairer(BaseFlightProcessor):
    """Combine outbound and inbound one-way flights sharing a recommendation id into roundtrip offers.

    Pairing is a cross join inside each recommendation id: N outbound and M inbound flights with the
    same id give N*M offers, in outbound-major order.
    """

    @staticmethod
    def _combine(outbound: Flight, inbound: Flight) -> RoundtripFlight:
        return RoundtripFlight(
            recommendation_id=outbound.recommendation_id,
            price=outbound.price,
            taxes=outbound.taxes + inbound.taxes,
            outbound_legs=list(outbound.outbound_legs),
            inbound_legs=list(inbound.inbound_legs),
        )

    def _pair(self, outbound_flights: list[Flight], inbound_flights: list[Flight]) -> Iterator[RoundtripFlight]:
        inbound_by_id = self.group_flights_by_key(inbound_flights, 'recommendation_id')
        for outbound in tqdm(outbound_flights, desc="Pairing roundtrips", leave=False):
            for inbound in inbound_by_id.get(outbound.recommendation_id, []):
                yield self._combine(outbound, inbound)

    # ---------------- public API -----------------
    def process(self, flights: list[Flight]) -> list[RoundtripFlight]:
        outbound_flights = [f for f in flights if f.outbound_legs]
        inbound_flights = [f for f in flights if f.inbound_legs]
        if not outbound_flights or not inbound_flights:
            return []
        return list(self._pair(outbound_flights, inbound_flights))


def select_cheapest(roundtrips: list[RoundtripFlight]) -> list[RoundtripFlight]:
    """Return every offer whose price + taxes equals the minimum. Raises ValueError on empty input."""
    if not roundtrips:
        raise ValueError("Cannot select cheapest offer from an empty list")
    min_total = min(r.total_price for r in roundtrips)
    return [r for r in roundtrips if r.total_price == min_total]

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

OUTBOUND = "I"
INBOUND = "V"


# ---------------- raw API payload -----------------
@dataclass(frozen=True, slots=True)
class AirportInfo:
    code: str


@dataclass(frozen=True, slots=True)
class RawLeg:
    """Single flight segment as returned by the search API.

    Timestamps are kept as the raw ``yyyy/MM/dd HH:mm`` strings; parsing happens during reduction.
    """
    company_code: str
    number: str
    airport_departure: AirportInfo
    airport_arrival: AirportInfo
    date_departure: str
    date_arrival: str


@dataclass(frozen=True, slots=True)
class RawJourney:
    recommendation_id: int
    direction: str
    flights: list[RawLeg]
    import_tax_adl: Decimal = Decimal(0)

    @property
    def number_of_connections(self) -> int:
        return len(self.flights) - 1


@dataclass(frozen=True, slots=True)
class TotalAvailability:
    recommendation_id: int
    total: Decimal


@dataclass(frozen=True, slots=True)
class SearchData:
    journeys: list[RawJourney]
    total_availabilities: list[TotalAvailability] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SearchBody:
    data: SearchData


@dataclass(frozen=True, slots=True)
class ApiResponse:
    body: SearchBody


# ---------------- normalized domain -----------------
@dataclass(frozen=True, slots=True)
class FlightLeg:
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    flight_number: str


@dataclass(slots=True)
class Flight:
    """One-way itinerary produced by the reducer.

    Only one of outbound_legs / inbound_legs is filled, depending on the journey direction.
    """
    recommendation_id: int
    price: Decimal
    taxes: Decimal
    outbound_legs: list[FlightLeg] = field(default_factory=list)
    inbound_legs: list[FlightLeg] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RoundtripFlight:
    """Priced roundtrip offer. price comes from the outbound side, taxes are summed over both sides."""
    recommendation_id: int
    price: Decimal
    taxes: Decimal
    outbound_legs: list[FlightLeg]
    inbound_legs: list[FlightLeg]

    @property
    def total_price(self) -> Decimal:
        return self.price + self.taxes

    @property
    def flight_numbers(self) -> list[str]:
        return [leg.flight_number for leg in self.outbound_legs + self.inbound_legs]


@dataclass(frozen=True, slots=True)
class SearchQuery:
    origin: str
    destination: str
    outbound_date: date
    inbound_date: date

    @property
    def csv_file_name(self) -> str:
        return (f"{self.origin}-{self.destination}_"
                f"({self.outbound_date.isoformat()})-({self.inbound_date.isoformat()}).csv")

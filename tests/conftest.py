"""Pytest configuration and fixtures for the flight scraper tests."""

import json
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from flightscraper.config import Settings
from flightscraper.models import Flight, FlightLeg, RoundtripFlight, SearchQuery


def _raw_leg(company, number, origin, destination, departure, arrival):
    return {
        "companyCode": company,
        "number": number,
        "airportDeparture": {"code": origin},
        "airportArrival": {"code": destination},
        "dateDeparture": departure,
        "dateArrival": arrival,
    }


@pytest.fixture
def sample_payload():
    """Search payload with two pairable recommendations and one three-leg journey."""
    return {
        "header": {"code": 200},
        "body": {
            "data": {
                "journeys": [
                    {
                        "recommendationId": 1,
                        "direction": "I",
                        "importTaxAdl": 10.50,
                        "flights": [
                            _raw_leg("EY", "100", "MAD", "AUH", "2026/11/02 10:00", "2026/11/02 19:30"),
                        ],
                    },
                    {
                        "recommendationId": 1,
                        "direction": "V",
                        "importTaxAdl": 12.00,
                        "flights": [
                            _raw_leg("EY", "101", "AUH", "MAD", "2026/11/09 08:00", "2026/11/09 13:15"),
                        ],
                    },
                    {
                        "recommendationId": 2,
                        "direction": "I",
                        "importTaxAdl": 8,
                        "flights": [
                            _raw_leg("TK", "1858", "MAD", "IST", "2026/11/02 06:00", "2026/11/02 11:45"),
                            _raw_leg("TK", "868", "IST", "AUH", "2026/11/02 14:00", "2026/11/02 19:10"),
                        ],
                    },
                    {
                        "recommendationId": 2,
                        "direction": "V",
                        "importTaxAdl": 9,
                        "flights": [
                            _raw_leg("TK", "869", "AUH", "IST", "2026/11/09 02:00", "2026/11/09 06:05"),
                            _raw_leg("TK", "1857", "IST", "MAD", "2026/11/09 08:00", "2026/11/09 11:50"),
                        ],
                    },
                    {
                        "recommendationId": 3,
                        "direction": "I",
                        "importTaxAdl": 5,
                        "flights": [
                            _raw_leg("LH", "1", "MAD", "FRA", "2026/11/02 06:00", "2026/11/02 08:30"),
                            _raw_leg("LH", "2", "FRA", "IST", "2026/11/02 10:00", "2026/11/02 14:00"),
                            _raw_leg("LH", "3", "IST", "AUH", "2026/11/02 16:00", "2026/11/02 21:00"),
                        ],
                    },
                ],
                "totalAvailabilities": [
                    {"recommendationId": 1, "total": 300.00},
                    {"recommendationId": 2, "total": 250.00},
                    {"recommendationId": 3, "total": 100.00},
                ],
            }
        },
    }


@pytest.fixture
def sample_response_text(sample_payload):
    return json.dumps(sample_payload)


@pytest.fixture
def leg_factory():
    def make(origin="MAD", destination="AUH", flight_number="EY100",
             departure=datetime(2026, 11, 2, 10, 0), arrival=datetime(2026, 11, 2, 19, 30)):
        return FlightLeg(origin, destination, departure, arrival, flight_number)
    return make


@pytest.fixture
def flight_factory(leg_factory):
    """Build a one-way Flight; direction is 'out' or 'in'."""
    def make(recommendation_id=1, direction="out", price="100", taxes="10", legs=None):
        legs = legs if legs is not None else [leg_factory()]
        flight = Flight(recommendation_id=recommendation_id, price=Decimal(price), taxes=Decimal(taxes))
        if direction == "out":
            flight.outbound_legs.extend(legs)
        else:
            flight.inbound_legs.extend(legs)
        return flight
    return make


@pytest.fixture
def roundtrip_factory(leg_factory):
    def make(price, taxes="0", recommendation_id=1, outbound_legs=None, inbound_legs=None):
        return RoundtripFlight(
            recommendation_id=recommendation_id,
            price=Decimal(price),
            taxes=Decimal(taxes),
            outbound_legs=outbound_legs if outbound_legs is not None else [leg_factory()],
            inbound_legs=inbound_legs if inbound_legs is not None else [
                leg_factory("AUH", "MAD", "EY101", datetime(2026, 11, 9, 8, 0), datetime(2026, 11, 9, 13, 15))
            ],
        )
    return make


@pytest.fixture
def query():
    return SearchQuery(origin="MAD", destination="AUH",
                       outbound_date=date(2026, 11, 2), inbound_date=date(2026, 11, 9))


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        api_base_url="http://search.test",
        request_timeout=None,
        origin_airports=["MAD", "JFK", "CPH"],
        destination_airports=["AUH", "FUE", "MAD"],
        min_stay_days=2,
        max_prompt_attempts=None,
        output_dir=tmp_path / "Output",
        src_mail=None,
        src_pwd=None,
        dst_mail=None,
    )


@pytest.fixture
def future_dates():
    """Outbound 30 days ahead, inbound a week later, both as yyyy-mm-dd strings."""
    depart = date.today() + timedelta(days=30)
    return depart.isoformat(), (depart + timedelta(days=7)).isoformat()

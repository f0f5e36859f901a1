"""HTTP client for the flight search API.

One GET per query, no retry. Failures are raised as SearchApiError subclasses so the caller
decides how to report them.
"""
import json
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any

import dacite
import requests

from ..config import settings
from ..models import ApiResponse, SearchQuery

SEARCH_PATH = "/search.php?from={origin}&to={destination}&depart={depart}&return={return_}"

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')

def _text(value: Any) -> str:
    # numeric flight numbers are accepted as text; null is not
    if value is None:
        raise TypeError("null where text was expected")
    return str(value)


_DACITE_CONFIG = dacite.Config(
    type_hooks={Decimal: lambda value: Decimal(str(value)), str: _text},
    cast=[int],
)


class SearchApiError(Exception):
    """Search request could not produce usable flight data."""


class RouteNotAvailableError(SearchApiError):
    pass


class InvalidResponseError(SearchApiError):
    pass


def _to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub('_', key).lower()


def _normalize_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {_to_snake_case(k): _normalize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize_keys(v) for v in value]
    return value


def parse_search_response(text: str) -> ApiResponse:
    """Decode a raw response body into an ApiResponse.

    Raises RouteNotAvailableError for HTML error pages and InvalidResponseError when the JSON
    is unparsable or lacks the body/data structure.
    """
    if text.startswith("<"):
        raise RouteNotAvailableError(
            "Route Not Available. The server returned an HTML response instead of flight data.")
    try:
        payload = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise InvalidResponseError(f"Response is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise InvalidResponseError("Invalid response data. Please check your input and try again.")
    try:
        return dacite.from_dict(data_class=ApiResponse, data=_normalize_keys(payload), config=_DACITE_CONFIG)
    except (dacite.DaciteError, TypeError, ValueError, InvalidOperation) as e:
        # cast/type hooks raise plain TypeError/ValueError on null or garbled fields
        raise InvalidResponseError(f"Invalid response data. Please check your input and try again. ({e})") from e


class SearchApiClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None,
                 session: requests.Session | None = None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def build_url(self, query: SearchQuery) -> str:
        return self.base_url + SEARCH_PATH.format(
            origin=query.origin,
            destination=query.destination,
            depart=query.outbound_date.isoformat(),
            return_=query.inbound_date.isoformat(),
        )

    def search(self, query: SearchQuery) -> ApiResponse:
        url = self.build_url(query)
        logging.info("Fetching data from: %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise SearchApiError(f"Request to {url} failed: {e}") from e
        if not response.ok:
            raise SearchApiError(f"Received status code {response.status_code}")
        return parse_search_response(response.text)

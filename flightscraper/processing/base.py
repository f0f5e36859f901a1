from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import datetime
from typing import Iterable

API_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M"
OUTPUT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


class BaseFlightProcessor(ABC):
    """Common helpers for the reduction and pairing stages."""

    # ---------------- Parsing helpers -----------------
    @staticmethod
    def parse_timestamp(value: str) -> datetime:
        # No fallback formats: a malformed timestamp means a corrupt response
        return datetime.strptime(value, API_TIMESTAMP_FORMAT)

    @staticmethod
    def format_timestamp(value: datetime) -> str:
        return value.strftime(OUTPUT_TIMESTAMP_FORMAT)

    # ---------------- Grouping -----------------
    @staticmethod
    def group_flights_by_key(data: Iterable, key: str) -> dict:
        grouped = defaultdict(list)
        for item in data:
            grouped[getattr(item, key)].append(item)
        return dict(grouped)

    @abstractmethod
    def process(self, *args, **kwargs):  # pragma: no cover
        raise NotImplementedError

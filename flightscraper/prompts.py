"""Interactive collection of the search query.

Validators raise ValueError with a user-facing message; prompt_until_valid re-asks until a value
passes or the optional attempt limit is reached.
"""
from datetime import date, datetime, timedelta
from typing import Callable, TypeVar

from .config import Settings, settings as default_settings
from .models import SearchQuery

T = TypeVar("T")

INPUT_DATE_FORMAT = "%Y-%m-%d"


class PromptAttemptsExceeded(RuntimeError):
    pass


# ---------------- validators -----------------
def validate_airport(value: str, allowed: list[str], kind: str) -> str:
    code = value.strip().upper()
    if code not in allowed:
        raise ValueError(f"Invalid {kind} airport: {code}. Acceptable {kind} airports are: {', '.join(allowed)}.")
    return code


def parse_input_date(value: str, kind: str) -> date:
    try:
        return datetime.strptime(value.strip(), INPUT_DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid {kind} format. Please use yyyy-mm-dd.") from None


def validate_date(value: str, kind: str, today: date, reference: date | None = None, min_days: int = 0) -> date:
    parsed = parse_input_date(value, kind)
    if parsed < today:
        raise ValueError(f"{kind} cannot be in the past. Please enter a valid date.")
    if reference is not None and parsed < reference + timedelta(days=min_days):
        raise ValueError(f"{kind} must be at least {min_days} days after {reference.isoformat()}.")
    return parsed


# ---------------- prompting -----------------
def prompt_until_valid(message: str, validator: Callable[[str], T],
                       input_func: Callable[[str], str] = input,
                       output_func: Callable[[str], None] = print,
                       max_attempts: int | None = None) -> T:
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        try:
            return validator(input_func(message))
        except ValueError as e:
            output_func(str(e))
    raise PromptAttemptsExceeded(f"No valid input after {attempts} attempt(s)")


def collect_query(origin: str | None = None, destination: str | None = None,
                  outbound_date: str | None = None, inbound_date: str | None = None,
                  input_func: Callable[[str], str] = input,
                  output_func: Callable[[str], None] = print,
                  today: date | None = None,
                  config: Settings = default_settings,
                  max_attempts: int | None = None) -> SearchQuery:
    """Build a SearchQuery from already supplied values, prompting for the missing ones.

    Supplied values go through the same validators; an invalid one raises ValueError.
    """
    today = today or date.today()
    if max_attempts is None:
        max_attempts = config.max_prompt_attempts

    def ask(message: str, validator: Callable[[str], T], supplied: str | None) -> T:
        if supplied is not None:
            return validator(supplied)
        return prompt_until_valid(message, validator, input_func, output_func, max_attempts)

    origin_code = ask(
        f"Enter origin airport, acceptable airports: {', '.join(config.origin_airports)}.\n",
        lambda v: validate_airport(v, config.origin_airports, "origin"),
        origin,
    )

    def validate_destination(value: str) -> str:
        code = validate_airport(value, config.destination_airports, "destination")
        if code == origin_code:
            raise ValueError("Origin and destination cannot be the same. Please enter valid airports.")
        return code

    destination_code = ask(
        f"Enter destination airport, acceptable airports: {', '.join(config.destination_airports)}.\n",
        validate_destination,
        destination,
    )
    depart = ask(
        "Enter outbound date (yyyy-mm-dd):\n",
        lambda v: validate_date(v, "outbound date", today),
        outbound_date,
    )
    ret = ask(
        "Enter inbound date (yyyy-mm-dd):\n",
        lambda v: validate_date(v, "inbound date", today, reference=depart, min_days=config.min_stay_days),
        inbound_date,
    )
    return SearchQuery(origin=origin_code, destination=destination_code, outbound_date=depart, inbound_date=ret)

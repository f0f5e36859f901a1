"""Configuration utilities.

Central place to load environment driven settings (API endpoint, airport allow-lists, output, email).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()


def _split_codes(value: str) -> list[str]:
    return [code.strip().upper() for code in value.split(",") if code.strip()]


def _optional_float(value: str | None) -> float | None:
    return float(value) if value else None


def _optional_int(value: str | None) -> int | None:
    return int(value) if value else None


@dataclass(slots=True)
class Settings:
    api_base_url: str = os.getenv("SEARCH_API_URL", "http://homeworktask.infare.lt")
    request_timeout: float | None = _optional_float(os.getenv("REQUEST_TIMEOUT"))
    origin_airports: list[str] = field(
        default_factory=lambda: _split_codes(os.getenv("ORIGIN_AIRPORTS", "MAD,JFK,CPH")))
    destination_airports: list[str] = field(
        default_factory=lambda: _split_codes(os.getenv("DESTINATION_AIRPORTS", "AUH,FUE,MAD")))
    min_stay_days: int = int(os.getenv("MIN_STAY_DAYS", "2"))
    max_prompt_attempts: int | None = _optional_int(os.getenv("MAX_PROMPT_ATTEMPTS"))
    output_dir: Path = Path(os.getenv("OUTPUT_DIR", "Output"))
    src_mail: str | None = os.getenv("SRC_MAIL")
    src_pwd: str | None = os.getenv("SRC_PWD")
    dst_mail: str | None = os.getenv("DST_MAIL")

    def email_configured(self) -> bool:
        return all([self.src_mail, self.src_pwd, self.dst_mail])


settings = Settings()

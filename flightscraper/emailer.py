"""E-mail report of the cheapest roundtrip offers, sent with yagmail.

Kept apart from the pipeline so tests can patch the SMTP client.
"""
import logging

import yagmail

from .config import Settings, settings as default_settings
from .models import RoundtripFlight, SearchQuery
from .report import format_cheapest_html


def offers_subject(query: SearchQuery, cheapest: list[RoundtripFlight]) -> str:
    lowest = cheapest[0].total_price if cheapest else None
    subject = f"Flights {query.origin}-{query.destination} {query.outbound_date.isoformat()}"
    return f"{subject}: from {lowest}" if lowest is not None else subject


def send_cheapest_offers(query: SearchQuery, cheapest: list[RoundtripFlight], offer_count: int,
                         config: Settings = default_settings) -> bool:
    """Mail the cheapest offers to DST_MAIL. Returns False when credentials are missing."""
    if not config.email_configured():
        logging.warning("Email not sent: SRC_MAIL, SRC_PWD and DST_MAIL must all be set.")
        return False
    html_body = format_cheapest_html(query, cheapest, offer_count=offer_count)
    yag = yagmail.SMTP(config.src_mail, config.src_pwd, port=587, smtp_starttls=True, smtp_ssl=False)
    yag.send(to=config.dst_mail, subject=offers_subject(query, cheapest), contents=html_body)
    logging.info("Cheapest %d offer(s) mailed to %s", len(cheapest), config.dst_mail)
    return True

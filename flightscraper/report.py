"""Rendering of roundtrip offers for the console and for the e-mail report."""
from datetime import datetime
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import RoundtripFlight, SearchQuery
from .processing.base import BaseFlightProcessor

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html.j2', 'html', 'xml']),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters['timestamp'] = BaseFlightProcessor.format_timestamp
    return env


def format_roundtrips(title: str, flights: list[RoundtripFlight]) -> str:
    tpl = _environment().get_template('roundtrips.txt.j2')
    return tpl.render(title=title, flights=flights)


def format_cheapest_html(query: SearchQuery, cheapest: list[RoundtripFlight], offer_count: int) -> str:
    tpl = _environment().get_template('cheapest_offers.html.j2')
    generated_at = datetime.now().strftime("%Y-%m-%d %H:%M")
    rendered = tpl.render(query=query, flights=cheapest, offer_count=offer_count, generated_at=generated_at)
    soup = BeautifulSoup(rendered, 'lxml')
    return soup.prettify()

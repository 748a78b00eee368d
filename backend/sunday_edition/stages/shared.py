"""Locale conventions shared by the stages: time format, units, currency, date windows."""

import re
from datetime import datetime, timedelta

TWELVE_HOUR_COUNTRIES = frozenset({"USA", "US", "Canada", "Australia", "Philippines"})
FAHRENHEIT_COUNTRIES = frozenset({"USA", "US", "United States"})

CURRENCIES: dict[str, str] = {
    "USA": "USD",
    "US": "USD",
    "United States": "USD",
    "UK": "GBP",
    "United Kingdom": "GBP",
    "Sweden": "SEK",
    "Australia": "AUD",
    "Canada": "CAD",
    "New Zealand": "NZD",
    "Ireland": "EUR",
    "France": "EUR",
    "Germany": "EUR",
    "Italy": "EUR",
    "Spain": "EUR",
    "Portugal": "EUR",
    "Netherlands": "EUR",
    "Belgium": "EUR",
    "Austria": "EUR",
    "Greece": "EUR",
    "Switzerland": "CHF",
    "Denmark": "DKK",
    "Norway": "NOK",
    "Japan": "JPY",
    "Singapore": "SGD",
    "Hong Kong": "HKD",
    "China": "CNY",
    "Taiwan": "TWD",
    "South Korea": "KRW",
    "Thailand": "THB",
    "India": "INR",
    "Israel": "ILS",
    "UAE": "AED",
    "Mexico": "MXN",
    "Brazil": "BRL",
    "South Africa": "ZAR",
}
UNKNOWN_CURRENCY = "local currency"

# 7pm, 7:30 PM, 7 p.m.
_TIME_12H = re.compile(r"\b(\d{1,2})(?::([0-5]\d))?\s*([ap])\.?m\b\.?", re.IGNORECASE)
_TIME_24H = re.compile(r"\b([01]?\d|2[0-3]):([0-5]\d)\b(?!\s*[ap]\.?m\b)", re.IGNORECASE)


def uses_12h(country: str) -> bool:
    return country in TWELVE_HOUR_COUNTRIES


def time_format_instruction(country: str) -> str:
    """Format description embedded in curation prompts."""
    if uses_12h(country):
        return '12-hour (e.g., "Saturday Feb 14 2pm")'
    return '24-hour (e.g., "Saturday Feb 14 14:00")'


def temperature_unit(country: str) -> str:
    return "°F" if country in FAHRENHEIT_COUNTRIES else "°C"


def currency_for(country: str) -> str:
    return CURRENCIES.get(country, UNKNOWN_CURRENCY)


def _to_24h(match: re.Match[str]) -> str:
    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    if hour > 12:
        return match.group(0)
    meridiem = match.group(3).lower()
    if meridiem == "p" and hour != 12:
        hour += 12
    elif meridiem == "a" and hour == 12:
        hour = 0
    return f"{hour:02d}:{minute:02d}"


def _to_12h(match: re.Match[str]) -> str:
    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = "am" if hour < 12 else "pm"
    hour = hour % 12 or 12
    if minute:
        return f"{hour}:{minute:02d}{meridiem}"
    return f"{hour}{meridiem}"


def coerce_day_format(day: str, twelve_hour: bool) -> str:
    """Rewrite time tokens in an event day string to the locale's clock.

    "Friday Sep 25 7pm" -> "Friday Sep 25 19:00" for 24-hour locales, and
    "Saturday Feb 14 14:00" -> "Saturday Feb 14 2pm" for 12-hour locales.
    """
    if twelve_hour:
        return _TIME_24H.sub(_to_12h, day)
    return _TIME_12H.sub(_to_24h, day)


def date_window(now: datetime, days: int = 7) -> tuple[str, str]:
    """("October 19", "October 26, 2026") for prompts asking about the coming week."""
    end = now + timedelta(days=days)
    return f"{now:%B} {now.day}", f"{end:%B} {end.day}, {end.year}"

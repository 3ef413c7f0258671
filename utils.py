"""
Utility functions for the exchange rates service.

Date helpers for mapping a calendar date to an NBP business day, and the
HTTP call that fetches a daily rate table.
"""
import logging
import re
import requests
from datetime import date, datetime, timedelta

logger = logging.getLogger(__name__)

DATE_FORMAT = '%Y-%m-%d'

# strptime alone accepts single-digit months and days
_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# Upstream answers these when it has no table for the date
_NO_DATA_STATUS_CODES = (400, 404)


def parse_date(date_str):
    """
    Parse a YYYY-MM-DD string into a date.

    Args:
        date_str (str): Date in YYYY-MM-DD format

    Returns:
        date: The parsed date

    Raises:
        ValueError: If the string is malformed or not a real calendar date
    """
    if not isinstance(date_str, str) or not _DATE_PATTERN.match(date_str):
        raise ValueError(f"Invalid date: {date_str!r}")
    return datetime.strptime(date_str, DATE_FORMAT).date()


def adjust_date_if_weekend(day):
    """
    Move a weekend date back to the preceding Friday.

    NBP does not publish tables on Saturdays or Sundays.

    Args:
        day (date): Any calendar date

    Returns:
        date: The same date on weekdays, otherwise the Friday before
    """
    weekday = day.weekday()
    if weekday == 6:  # Sunday
        return day - timedelta(days=2)
    if weekday == 5:  # Saturday
        return day - timedelta(days=1)
    return day


def resolve_today(now=None, publication_hour=12):
    """
    Get the business day whose table counts as "today".

    Before the publication hour today's table is not out yet, so yesterday
    is used instead. The result is then moved off the weekend.

    Args:
        now (datetime, optional): Current local time, defaults to datetime.now()
        publication_hour (int): Hour from which today's table is available

    Returns:
        date: The resolved business day
    """
    now = now or datetime.now()
    day = now.date()
    if now.hour < publication_hour:
        day -= timedelta(days=1)
    return adjust_date_if_weekend(day)


def fetch_rate_table(day, base_url, timeout=5):
    """
    Fetch the NBP rate table for a date.

    Args:
        day (date or str): The table date, as a date object or YYYY-MM-DD
        base_url (str): Table endpoint, e.g. https://api.nbp.pl/api/exchangerates/tables/A/
        timeout (float): Request timeout in seconds

    Returns:
        list: Ordered ``{'currency', 'code', 'mid'}`` dicts, empty if the
        bank published nothing for that date

    Raises:
        requests.RequestException: On transport errors and unexpected statuses
        ValueError: If the body is not valid JSON
    """
    if isinstance(day, date):
        day = day.strftime(DATE_FORMAT)

    url = f"{base_url.rstrip('/')}/{day}"
    logger.info(f"Fetching NBP rate table for {day}")
    response = requests.get(
        url,
        params={'format': 'json'},
        headers={'Accept': 'application/json'},
        timeout=timeout
    )

    if response.status_code in _NO_DATA_STATUS_CODES:
        logger.warning(f"No NBP rate table for {day} (status {response.status_code})")
        return []

    response.raise_for_status()

    tables = response.json()
    if not tables:
        return []
    return tables[0].get('rates') or []

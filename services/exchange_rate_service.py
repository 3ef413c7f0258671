"""
Exchange rate service.

Resolves the selected date and "today" to NBP business days, fetches both
rate tables and derives buy/sell quotes for the supported currencies.
"""
import logging
from datetime import datetime

from flask import current_app

from models import RateQuote
from utils import adjust_date_if_weekend, resolve_today, fetch_rate_table

logger = logging.getLogger(__name__)

INVALID_DATE_MESSAGE = 'Invalid date format. Expected format: Y-m-d.'
NO_RATES_MESSAGE = 'No exchange rates available for the provided date.'


class ExchangeRateService:
    """Service for building exchange rate quotes."""

    ACTIVE_CURRENCIES = ('EUR', 'USD', 'CZK', 'IDR', 'BRL')
    ACTIVE_BUY_CURRENCIES = ('EUR', 'USD')

    BUY_RATE_DIFFERENCE = -0.05
    SELL_RATE_DIFFERENCE_FOR_ACTIVE_BUY = 0.07
    SELL_RATE_DIFFERENCE = 0.15

    class RatesNotFound(Exception):
        """Raised when the bank has no table for one of the dates."""
        pass

    @staticmethod
    def get_exchange_rates(selected_date=None, now=None):
        """
        Build quotes for a selected date alongside today's.

        Args:
            selected_date (date, optional): Requested date, defaults to the current date
            now (datetime, optional): Current local time, defaults to datetime.now()

        Returns:
            list: RateQuote instances in the order NBP lists them

        Raises:
            ExchangeRateService.RatesNotFound: If either table is empty
        """
        now = now or datetime.now()
        config = current_app.config

        selected_day = adjust_date_if_weekend(selected_date or now.date())
        today = resolve_today(now, config['RATES_PUBLICATION_HOUR'])

        base_url = config['NBP_API_BASE_URL']
        timeout = config['NBP_API_TIMEOUT']
        selected_rates = fetch_rate_table(selected_day, base_url, timeout)
        today_rates = fetch_rate_table(today, base_url, timeout)

        if not selected_rates or not today_rates:
            raise ExchangeRateService.RatesNotFound(
                f"No rates for {selected_day} or {today}"
            )

        return ExchangeRateService.build_quotes(selected_rates, today_rates)

    @staticmethod
    def build_quotes(selected_rates, today_rates):
        """
        Derive quotes for supported currencies from two rate tables.

        Entries are paired by currency code, so a reordered table for
        today still lines up with the selected date.

        Args:
            selected_rates (list): NBP rate entries for the selected date
            today_rates (list): NBP rate entries for today

        Returns:
            list: RateQuote instances
        """
        today_by_code = {}
        for entry in today_rates:
            today_by_code.setdefault(entry['code'], entry)

        quotes = []
        seen = set()
        for entry in selected_rates:
            code = entry['code']
            if code not in ExchangeRateService.ACTIVE_CURRENCIES or code in seen:
                continue
            seen.add(code)

            mid = float(entry['mid'])
            today_entry = today_by_code.get(code)
            today_mid = float(today_entry['mid']) if today_entry else None

            buy_rate, sell_rate = ExchangeRateService.apply_markup(code, mid)
            today_buy_rate, today_sell_rate = ExchangeRateService.apply_markup(code, today_mid)

            quotes.append(RateQuote(
                currency=entry.get('currency'),
                code=code,
                mid=mid,
                buy_rate=buy_rate,
                sell_rate=sell_rate,
                today_mid=today_mid,
                today_buy_rate=today_buy_rate,
                today_sell_rate=today_sell_rate
            ))

        return quotes

    @staticmethod
    def apply_markup(code, mid):
        """
        Get (buy_rate, sell_rate) for a mid-rate.

        Only EUR and USD are bought; the rest get a wider sell spread
        and no buy rate.
        """
        if mid is None:
            return None, None

        if code in ExchangeRateService.ACTIVE_BUY_CURRENCIES:
            return (
                mid + ExchangeRateService.BUY_RATE_DIFFERENCE,
                mid + ExchangeRateService.SELL_RATE_DIFFERENCE_FOR_ACTIVE_BUY
            )
        return None, mid + ExchangeRateService.SELL_RATE_DIFFERENCE

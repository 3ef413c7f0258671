"""
Data models for the exchange rates service.

Quotes are built per request and never persisted.
"""


class RateQuote:
    """Buy/sell quote for one currency on the selected date, next to today's."""

    def __init__(self, currency, code, mid, buy_rate, sell_rate,
                 today_mid=None, today_buy_rate=None, today_sell_rate=None):
        self.currency = currency
        self.code = code
        self.mid = mid
        self.buy_rate = buy_rate
        self.sell_rate = sell_rate
        self.today_mid = today_mid
        self.today_buy_rate = today_buy_rate
        self.today_sell_rate = today_sell_rate

    def __repr__(self):
        return f'<RateQuote {self.code}: {self.mid}>'

    def to_dict(self):
        """Convert quote to dictionary for JSON serialization."""
        return {
            'currency': self.currency,
            'code': self.code,
            'mid': self.mid,
            'buyRate': self.buy_rate,
            'sellRate': self.sell_rate,
            'todayMid': self.today_mid,
            'todayBuyRate': self.today_buy_rate,
            'todaySellRate': self.today_sell_rate,
        }

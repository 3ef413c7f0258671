"""
Service layer for the exchange rates service.

Services encapsulate business logic separate from route handlers.
"""
from services.exchange_rate_service import ExchangeRateService

__all__ = [
    'ExchangeRateService',
]

"""
API routes for exchange rates and service health.
"""
import logging

from flask import request, jsonify

from services.exchange_rate_service import (
    ExchangeRateService, INVALID_DATE_MESSAGE, NO_RATES_MESSAGE
)
from utils import parse_date
from blueprints.api import api_bp

logger = logging.getLogger(__name__)


# ============================================================================
# Exchange Rates API Routes
# ============================================================================

@api_bp.route('/api/exchange-rates', methods=['GET'])
def get_exchange_rates():
    """Get buy/sell quotes for the selected date next to today's.

    Query params:
        date: YYYY-MM-DD, defaults to the current date

    Returns:
        [
            {"currency": "euro", "code": "EUR", "mid": 4.5, "buyRate": 4.45,
             "sellRate": 4.57, "todayMid": 4.4, "todayBuyRate": 4.35,
             "todaySellRate": 4.47},
            ...
        ]
    """
    date_str = request.args.get('date')

    selected_date = None
    if date_str:
        try:
            selected_date = parse_date(date_str)
        except ValueError:
            return jsonify({'message': INVALID_DATE_MESSAGE}), 400

    try:
        quotes = ExchangeRateService.get_exchange_rates(selected_date)
    except ExchangeRateService.RatesNotFound as e:
        logger.warning(f"Exchange rates not found: {e}")
        return jsonify({'message': NO_RATES_MESSAGE}), 404
    except Exception as e:
        logger.error(f"Failed to build exchange rates for {date_str}: {e}")
        return jsonify({'message': NO_RATES_MESSAGE}), 500

    return jsonify([quote.to_dict() for quote in quotes])


@api_bp.route('/health', methods=['GET'])
def health_check():
    """Service health check."""
    return jsonify({'status': 'OK'}), 200

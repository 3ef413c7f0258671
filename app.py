"""
Main Flask application for the NBP exchange rates service.
"""
import os
import logging
import click
from flask import Flask, request, redirect

from extensions import limiter
from config import config, get_config_name
from blueprints import register_blueprints
from services.exchange_rate_service import (
    ExchangeRateService, INVALID_DATE_MESSAGE, NO_RATES_MESSAGE
)
from utils import parse_date

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)

# Load configuration from centralized config module
config_name = get_config_name()
app.config.from_object(config[config_name])

# Initialize extensions with app
limiter.init_app(app)  # Reads RATELIMIT_* from app.config

# Register blueprints
register_blueprints(app)

logger.info(f"Exchange rates service started with '{config_name}' config")


# ============================================================================
# Security Middleware
# ============================================================================

@app.before_request
def enforce_https():
    """Redirect HTTP to HTTPS in production."""
    if not app.debug and not app.testing:
        # Check X-Forwarded-Proto header (set by reverse proxies)
        if request.headers.get('X-Forwarded-Proto') == 'http':
            url = request.url.replace('http://', 'https://', 1)
            return redirect(url, code=301)


@app.after_request
def add_security_headers(response):
    """Add security headers to all responses."""
    # Prevent MIME type sniffing
    response.headers['X-Content-Type-Options'] = 'nosniff'

    # Prevent clickjacking
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'

    # Referrer policy
    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

    # Content Security Policy - production only
    csp_policy = app.config.get('CSP_POLICY')
    if csp_policy:
        response.headers['Content-Security-Policy'] = csp_policy

    return response


# ============================================================================
# CLI Commands
# ============================================================================

def _format_rate(value):
    return '-' if value is None else f'{value:.4f}'


@app.cli.command('rates')
@click.option('--date', 'date_str', default=None, help='Date in YYYY-MM-DD format (defaults to today)')
def rates_command(date_str):
    """Print buy/sell quotes for a date next to today's.

    Examples:
        flask rates                    # Current date
        flask rates --date 2024-01-05  # Specific date
    """
    selected_date = None
    if date_str:
        try:
            selected_date = parse_date(date_str)
        except ValueError:
            raise click.BadParameter(INVALID_DATE_MESSAGE, param_hint='--date')

    try:
        quotes = ExchangeRateService.get_exchange_rates(selected_date)
    except ExchangeRateService.RatesNotFound:
        raise click.ClickException(NO_RATES_MESSAGE)

    click.echo(f"{'Code':<6}{'Mid':>10}{'Buy':>10}{'Sell':>10}"
               f"{'Today mid':>12}{'Today buy':>12}{'Today sell':>12}")
    for quote in quotes:
        click.echo(
            f"{quote.code:<6}"
            f"{_format_rate(quote.mid):>10}"
            f"{_format_rate(quote.buy_rate):>10}"
            f"{_format_rate(quote.sell_rate):>10}"
            f"{_format_rate(quote.today_mid):>12}"
            f"{_format_rate(quote.today_buy_rate):>12}"
            f"{_format_rate(quote.today_sell_rate):>12}"
        )


if __name__ == '__main__':
    # Get port from environment variable
    # Default to 5001 for local development (avoids macOS AirPlay Receiver conflict)
    port = int(os.environ.get('PORT', 5001))

    # Debug mode is set by config (True for development, False for production)
    app.run(debug=app.debug, host='0.0.0.0', port=port)

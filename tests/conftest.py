"""
Shared pytest fixtures for exchange rates service tests.
"""
import pytest
import os
import sys
from unittest.mock import MagicMock

import requests

# Add project root and tests directory to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
tests_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)
sys.path.insert(0, tests_dir)

# Select TestingConfig before the app module is imported
os.environ['TESTING'] = '1'


# ============================================================================
# Sample NBP data
# ============================================================================

# Trimmed table A as NBP returns it: a list holding one table object
SELECTED_RATES = [
    {'currency': 'bat (Tajlandia)', 'code': 'THB', 'mid': 0.1127},
    {'currency': 'dolar amerykański', 'code': 'USD', 'mid': 3.9432},
    {'currency': 'dolar australijski', 'code': 'AUD', 'mid': 2.6614},
    {'currency': 'euro', 'code': 'EUR', 'mid': 4.3434},
    {'currency': 'korona czeska', 'code': 'CZK', 'mid': 0.1763},
    {'currency': 'real (Brazylia)', 'code': 'BRL', 'mid': 0.8063},
    {'currency': 'rupia indonezyjska', 'code': 'IDR', 'mid': 0.00025339},
]

TODAY_RATES = [
    {'currency': 'bat (Tajlandia)', 'code': 'THB', 'mid': 0.1141},
    {'currency': 'dolar amerykański', 'code': 'USD', 'mid': 4.0123},
    {'currency': 'dolar australijski', 'code': 'AUD', 'mid': 2.7001},
    {'currency': 'euro', 'code': 'EUR', 'mid': 4.3601},
    {'currency': 'korona czeska', 'code': 'CZK', 'mid': 0.1749},
    {'currency': 'real (Brazylia)', 'code': 'BRL', 'mid': 0.8112},
    {'currency': 'rupia indonezyjska', 'code': 'IDR', 'mid': 0.00025612},
]


def make_table(rates, effective_date='2024-01-05'):
    """Wrap rate entries the way the NBP tables endpoint does."""
    return [{
        'table': 'A',
        'no': '004/A/NBP/2024',
        'effectiveDate': effective_date,
        'rates': rates,
    }]


@pytest.fixture
def nbp_response():
    """Factory fixture building mocked ``requests`` responses."""
    def _build(status_code=200, payload=None):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Error"
            )
        return response
    return _build


# ============================================================================
# Flask App Fixtures
# ============================================================================

@pytest.fixture(scope='session')
def app():
    """Create Flask app for testing."""
    from app import app as flask_app
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create test client for API tests."""
    return app.test_client()


@pytest.fixture
def app_context(app):
    """Provide app context for service calls."""
    with app.app_context():
        yield

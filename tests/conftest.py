"""Pytest configuration and shared fixtures."""

import json

import pytest
from unittest.mock import Mock

from quandlkit.client import QuandlClient
from quandlkit.config import Settings


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and ~/.quandlkitrc."""
    return Settings.for_testing()


@pytest.fixture
def client(test_settings):
    """Client with API key 'abc123' against the test host."""
    return QuandlClient('abc123', settings=test_settings)


@pytest.fixture
def anonymous_client(test_settings):
    """Client without an API key."""
    return QuandlClient('', settings=test_settings)


@pytest.fixture
def dataset_payload():
    """A realistic dataset object as returned under the 'dataset' key."""
    return {
        'id': 1,
        'dataset_code': 'AAPL',
        'database_code': 'WIKI',
        'name': 'Apple Inc (AAPL) Prices, Dividends, Splits and Trading Volume',
        'description': 'End of day open, high, low, close and volume.',
        'refreshed_at': '2018-03-27T21:46:11.036Z',
        'newest_available_date': '2018-03-27',
        'oldest_available_date': '1980-12-12',
        'column_names': ['Date', 'Open', 'High', 'Low', 'Close', 'Volume'],
        'frequency': 'daily',
        'type': 'Time Series',
        'premium': False,
        'limit': None,
        'transform': None,
        'column_index': None,
        'start_date': '2020-01-01',
        'end_date': '2018-03-27',
        'data': [
            ['2018-03-27', 173.68, 175.15, 166.92, 168.34, 38962839.0],
            ['2018-03-26', 168.07, 173.1, 166.44, 172.77, 36272617.0],
        ],
        'collapse': None,
        'order': None,
        'database_id': 4922,
    }


@pytest.fixture
def dataset_body(dataset_payload):
    """Raw JSON response body wrapping the dataset payload."""
    return json.dumps({'dataset': dataset_payload}).encode()


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""
    def _make(status_code=200, content=b"{}"):
        if isinstance(content, str):
            content = content.encode()
        response = Mock()
        response.status_code = status_code
        response.content = content
        response.text = content.decode()
        return response
    return _make

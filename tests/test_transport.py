"""
Tests for the HTTP transport.
"""

import pytest
import requests
from unittest.mock import patch

from quandlkit.client.transport import Transport, USER_AGENT
from quandlkit.config.settings import DEFAULT_TIMEOUT
from quandlkit.errors import ApiError, NetworkError, QuandlError


URL = 'https://test.quandl.local/api/v3/datasets/WIKI/AAPL.json?auth_token=abc123'


class TestTransport:
    """Test suite for Transport."""

    def test_default_timeout(self):
        assert Transport().timeout == DEFAULT_TIMEOUT == 5.0

    @patch('quandlkit.client.transport.requests.get')
    def test_success_returns_raw_bytes(self, mock_get, make_response):
        body = b'{"dataset": {"id": 1}}'
        mock_get.return_value = make_response(200, body)

        assert Transport().get(URL) == body

    @patch('quandlkit.client.transport.requests.get')
    def test_timeout_and_headers_passed(self, mock_get, make_response):
        mock_get.return_value = make_response(200, b'{}')

        Transport(timeout=12).get(URL)

        mock_get.assert_called_once_with(URL, headers={'User-Agent': USER_AGENT}, timeout=12)

    @patch('quandlkit.client.transport.requests.get')
    def test_other_2xx_is_success(self, mock_get, make_response):
        mock_get.return_value = make_response(203, b'{}')
        assert Transport().get(URL) == b'{}'

    @patch('quandlkit.client.transport.requests.get')
    def test_connection_refused(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("[Errno 111] Connection refused")

        with pytest.raises(NetworkError, match="Connection refused") as exc_info:
            Transport().get(URL)

        assert exc_info.value.url == URL
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @patch('quandlkit.client.transport.requests.get')
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.ReadTimeout("read timed out")

        with pytest.raises(NetworkError, match="timed out after 5.0s"):
            Transport().get(URL)

    @patch('quandlkit.client.transport.requests.get')
    def test_other_request_exception(self, mock_get):
        mock_get.side_effect = requests.TooManyRedirects("too many redirects")

        with pytest.raises(NetworkError):
            Transport().get(URL)

    @patch('quandlkit.client.transport.requests.get')
    def test_404_raises_api_error(self, mock_get, make_response):
        mock_get.return_value = make_response(404, 'not found')

        with pytest.raises(ApiError) as exc_info:
            Transport().get(URL)

        err = exc_info.value
        assert err.status_code == 404
        assert err.body == 'not found'
        assert err.url == URL
        assert isinstance(err, QuandlError)

    @pytest.mark.parametrize('status', [301, 400, 403, 429, 500, 503])
    @patch('quandlkit.client.transport.requests.get')
    def test_non_2xx_statuses(self, mock_get, status, make_response):
        mock_get.return_value = make_response(status, '{"quandl_error": {"code": "QECx01"}}')

        with pytest.raises(ApiError) as exc_info:
            Transport().get(URL)

        assert exc_info.value.status_code == status
        assert 'QECx01' in exc_info.value.body

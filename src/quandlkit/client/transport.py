"""
HTTP transport for the Quandl API.

Wraps requests.get with a bounded timeout and converts failures into
quandlkit errors so they never escape as raw requests exceptions.
"""

import requests

from ..config.settings import DEFAULT_TIMEOUT
from ..errors import ApiError, NetworkError
from .params import redact_url
from ..utils.logging import get_logger

logger = get_logger(__name__)

USER_AGENT = 'quandlkit/0.1.0 (Python Quandl API client)'


class Transport:
    """Performs blocking HTTP GET requests."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize transport.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    def get(self, url: str) -> bytes:
        """
        Fetch a URL and return the raw response body.

        Args:
            url: Absolute request URL

        Returns:
            Response body bytes, unmodified

        Raises:
            NetworkError: If the host cannot be reached or the request times out
            ApiError: If the response status is not 2xx
        """
        headers = {'User-Agent': USER_AGENT}

        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
        except requests.Timeout as e:
            raise NetworkError(f"Request timed out after {self.timeout}s: {e}", url) from e
        except requests.RequestException as e:
            raise NetworkError(f"Failed to reach API: {e}", url) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"API returned status {response.status_code} for {redact_url(url)}")
            raise ApiError(response.status_code, response.text, url)

        logger.debug(f"Received {len(response.content)} bytes from {redact_url(url)}")
        return response.content

"""
QuandlClient - Client API for the Quandl v3 REST API.

Provides a simple interface for fetching datasets, metadata, database
listings and search results.
"""

import threading
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from ..config import Settings, get_settings
from ..config.settings import DEFAULT_TIMEOUT
from ..errors import UnsupportedFormatError
from ..models import Dataset, ResponseFormat
from ..utils.logging import configure_logging, get_logger
from .decoder import decode_dataset
from .params import arrange_params, redact_url
from .transport import Transport
from .urls import OperationKind, build_url

logger = get_logger(__name__)

# Page size limits imposed by the API
DATABASES_MAX_PER_PAGE = 100
SEARCH_DEFAULT_PER_PAGE = 300


class QuandlClient:
    """
    Client for the Quandl v3 API.

    Each call performs one blocking HTTP GET and returns a Dataset whose
    ``request_url`` holds the URL that was used.

    Example:
        ```python
        from quandlkit import QuandlClient

        client = QuandlClient('abc123')

        # Dataset by Quandl code
        ds = client.fetch_by_symbol('WIKI/AAPL', {'start_date': '2020-01-01'})

        # Metadata only
        meta = client.fetch_metadata('WIKI/AAPL')

        # Database listing and search (payload under Dataset.raw)
        dbs = client.list_databases()
        hits = client.search('crude oil')
        ```

    Thread safety:
        A client may be shared between threads once configured. ``last_url``
        is tracked per thread; call set_timeout() before sharing.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        format: Union[str, ResponseFormat, None] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize QuandlClient.

        Args:
            api_key: API key sent as the auth_token parameter. If None, uses
                     settings (QUANDL_API_KEY or ~/.quandlkitrc); '' disables it
            format: 'json', 'csv' or 'object'. Empty/None means 'object'
            timeout: Request timeout in seconds (default: 5)
            base_url: API scheme and host (default: https://www.quandl.com)
            settings: Optional Settings instance. If None, uses get_settings()

        Raises:
            ValueError: If format or timeout is invalid
        """
        settings = settings or get_settings()
        configure_logging(settings)

        self.api_key = settings.api.api_key if api_key is None else api_key
        self.format = ResponseFormat.parse(format)
        self.base_url = base_url or settings.api.base_url
        self._transport = Transport()
        self._local = threading.local()
        self.set_timeout(timeout if timeout is not None else settings.api.timeout)

        logger.debug(f"QuandlClient initialized (format={self.format.value}, base_url={self.base_url})")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> 'QuandlClient':
        """
        Create a client entirely from configuration.

        Args:
            settings: Optional Settings instance. If None, uses get_settings()

        Returns:
            QuandlClient configured with the settings' key, format and timeout
        """
        settings = settings or get_settings()
        return cls(
            api_key=settings.api.api_key,
            format=settings.api.format,
            timeout=settings.api.timeout,
            base_url=settings.api.base_url,
            settings=settings
        )

    @property
    def timeout(self) -> float:
        return self._transport.timeout

    @property
    def last_url(self) -> Optional[str]:
        """URL built most recently by the calling thread, or None."""
        return getattr(self._local, 'url', None)

    def set_timeout(self, seconds: float) -> None:
        """
        Set the request timeout for all subsequent requests.

        Args:
            seconds: Timeout in seconds; 0 restores the 5 second default

        Raises:
            ValueError: If seconds is negative or not a number
        """
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds < 0:
            raise ValueError(f"Timeout must be a non-negative number of seconds, got {seconds!r}")
        if seconds == 0:
            seconds = DEFAULT_TIMEOUT
        self._transport.timeout = seconds

    # ========================================================================
    # DATASET METHODS
    # ========================================================================

    def fetch_dataset(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dataset:
        """
        Fetch an arbitrary API path, e.g. 'datasets/WIKI/AAPL/data'.

        Args:
            path: Path below /api/v3/, without format extension
            params: Query parameters

        Returns:
            Decoded Dataset
        """
        url = self._build_url(
            OperationKind.DIRECT,
            self._encode_path(path),
            self._resolve_format(omit_csv=True),
            arrange_params(params, self.api_key)
        )
        return self._get_data(url)

    def fetch_by_symbol(self, symbol: str, params: Optional[Mapping[str, Any]] = None) -> Dataset:
        """
        Fetch a dataset by Quandl code.

        Args:
            symbol: Quandl code in DATABASE/DATASET form (e.g. 'WIKI/AAPL')
            params: Query parameters such as start_date, end_date, limit,
                    column_index, collapse, transform, order

        Returns:
            Decoded Dataset

        Example:
            >>> ds = client.fetch_by_symbol('WIKI/AAPL', {'start_date': '2020-01-01'})
            >>> ds.dataset_code
            'AAPL'
        """
        url = self._build_url(
            OperationKind.SYMBOL,
            self._encode_path(symbol),
            self._resolve_format(omit_csv=True),
            arrange_params(params, self.api_key)
        )
        return self._get_data(url)

    def fetch_metadata(self, symbol: str) -> Dataset:
        """
        Fetch dataset metadata only (no data rows).

        The metadata endpoint takes no query string, so no parameters
        (including the API key) are sent.

        Args:
            symbol: Quandl code in DATABASE/DATASET form

        Returns:
            Dataset with metadata fields populated
        """
        url = self._build_url(
            OperationKind.META,
            self._encode_path(symbol),
            self._resolve_format(omit_csv=False)
        )
        return self._get_data(url)

    # ========================================================================
    # DISCOVERY METHODS
    # ========================================================================

    def list_databases(self, page: int = 0, per_page: int = 0) -> Dataset:
        """
        List available databases.

        The API returns at most 100 databases per page.

        Args:
            page: Page number; 0 means 1
            per_page: Results per page; 0 or anything above 100 means 100

        Returns:
            Dataset whose ``raw`` holds the 'databases' and 'meta' keys
        """
        page = self._normalize_page(page)
        if per_page == 0 or per_page > DATABASES_MAX_PER_PAGE:
            per_page = DATABASES_MAX_PER_PAGE
        self._check_positive('per_page', per_page)

        params = {
            'per_page': per_page,
            'page': page,
        }
        url = self._build_url(
            OperationKind.DATABASES,
            self._resolve_format(omit_csv=False),
            arrange_params(params, self.api_key)
        )
        return self._get_data(url)

    def search(self, query: str, page: int = 0, per_page: int = 0) -> Dataset:
        """
        Search datasets.

        CSV output is not supported for search, so it falls back to JSON.

        Args:
            query: Search terms
            page: Page number; 0 means 1
            per_page: Results per page; 0 means 300 (not capped)

        Returns:
            Dataset whose ``raw`` holds the 'datasets' and 'meta' keys
        """
        page = self._normalize_page(page)
        if per_page == 0:
            per_page = SEARCH_DEFAULT_PER_PAGE
        self._check_positive('per_page', per_page)

        params = {
            'per_page': per_page,
            'page': page,
            'query': query,
        }
        url = self._build_url(
            OperationKind.SEARCH,
            self._resolve_format(omit_csv=True),
            arrange_params(params, self.api_key)
        )
        return self._get_data(url)

    def list_symbols(self, source: str, page: int = 0, per_page: int = 0) -> Dataset:
        """Listing the symbols of a source is not supported."""
        raise NotImplementedError("Listing symbols is not supported; use search() instead")

    def download_bulk(self, database: str, filename: str, complete: bool = False) -> None:
        """Bulk database downloads are not supported."""
        raise NotImplementedError("Bulk database downloads are not supported")

    # ========================================================================
    # INTERNALS
    # ========================================================================

    def _build_url(self, kind: OperationKind, *args: str) -> str:
        url = build_url(kind, *args, base_url=self.base_url)
        self._local.url = url
        logger.debug(f"Built {kind.value} URL: {redact_url(url)}")
        return url

    def _resolve_format(self, omit_csv: bool) -> str:
        """
        Pick the format extension for a request.

        'object' always requests JSON; 'csv' becomes JSON for operations
        that omit CSV. A remaining 'csv' is rejected since CSV bodies are
        never decoded.

        Raises:
            UnsupportedFormatError: If the request would return CSV
        """
        if self.format is ResponseFormat.OBJECT or (self.format is ResponseFormat.CSV and omit_csv):
            return ResponseFormat.JSON.value
        if self.format is ResponseFormat.CSV:
            raise UnsupportedFormatError("CSV responses are not supported for this operation")
        return self.format.value

    def _get_data(self, url: str) -> Dataset:
        content = self._transport.get(url)
        return decode_dataset(content, url)

    @staticmethod
    def _encode_path(path: str) -> str:
        if not isinstance(path, str) or not path.strip('/'):
            raise ValueError(f"Path must be a non-empty string, got {path!r}")
        return quote(path.strip('/'), safe='/')

    @staticmethod
    def _normalize_page(page: int) -> int:
        if page == 0:
            page = 1
        QuandlClient._check_positive('page', page)
        return page

    @staticmethod
    def _check_positive(name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")

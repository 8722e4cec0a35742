"""
quandlkit - Python client for the Quandl financial data API.

Main exports:
- QuandlClient: Fetch datasets, metadata, database listings and search results
- Dataset: Typed record decoded from API responses
- QuandlError and subclasses: Errors raised by the client
"""

from .client import QuandlClient
from .models import Dataset, Frequency, ResponseFormat
from .errors import QuandlError, NetworkError, ApiError, DecodeError, UnsupportedFormatError
from .config import get_settings

__version__ = '0.1.0'

__all__ = [
    'QuandlClient', 'Dataset', 'Frequency', 'ResponseFormat',
    'QuandlError', 'NetworkError', 'ApiError', 'DecodeError', 'UnsupportedFormatError',
    'get_settings',
]

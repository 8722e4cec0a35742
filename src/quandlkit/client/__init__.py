"""
Client API for the Quandl v3 REST API.

Builds request URLs, performs the HTTP GET and decodes JSON responses
into Dataset records.
"""

from .client import QuandlClient
from .urls import OperationKind, build_url
from .params import AUTH_PARAM, arrange_params
from .decoder import decode_dataset

__all__ = ['QuandlClient', 'OperationKind', 'build_url', 'AUTH_PARAM', 'arrange_params', 'decode_dataset']

"""
URL templates for the Quandl v3 API.

Each operation kind has a fixed endpoint template with a fixed number of
positional placeholders. Arguments are expected to be already encoded.
"""

from enum import Enum
from string import Formatter

from ..config.settings import DEFAULT_BASE_URL


class OperationKind(str, Enum):
    """Category of API call; selects the URL template."""

    DIRECT = 'direct'
    SYMBOL = 'symbol'
    SEARCH = 'search'
    LIST = 'list'
    META = 'meta'
    DATABASES = 'databases'
    BULK = 'bulk'


URL_TEMPLATES = {
    OperationKind.DIRECT: '/api/v3/{}.{}?{}',               # path, format, query
    OperationKind.SYMBOL: '/api/v3/datasets/{}.{}?{}',      # symbol, format, query
    OperationKind.SEARCH: '/api/v3/datasets.{}?{}',         # format, query
    OperationKind.LIST: '/api/v3/datasets.{}?{}',           # format, query
    OperationKind.META: '/api/v3/datasets/{}/metadata.{}',  # symbol, format
    OperationKind.DATABASES: '/api/v3/databases.{}?{}',     # format, query
    OperationKind.BULK: '/api/v3/databases/{}/data?{}',     # database, query
}


def template_arity(kind: OperationKind) -> int:
    """Number of positional arguments the template for `kind` takes."""
    template = URL_TEMPLATES[OperationKind(kind)]
    return sum(1 for _, field_name, _, _ in Formatter().parse(template) if field_name is not None)


def build_url(kind: OperationKind, *args: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    Fill the template for an operation kind.

    Trailing '?' and '&' are stripped, so an empty query string leaves no
    dangling separator.

    Args:
        kind: Operation kind selecting the template
        *args: Encoded path segments, format and query string, in template order
        base_url: Scheme and host of the API

    Returns:
        Absolute request URL

    Raises:
        TypeError: If the argument count does not match the template, or an
                   argument is not a string

    Example:
        >>> build_url(OperationKind.META, 'WIKI/AAPL', 'json')
        'https://www.quandl.com/api/v3/datasets/WIKI/AAPL/metadata.json'
    """
    kind = OperationKind(kind)
    expected = template_arity(kind)
    if len(args) != expected:
        raise TypeError(
            f"URL template '{kind.value}' takes {expected} arguments, got {len(args)}"
        )
    for arg in args:
        if not isinstance(arg, str):
            raise TypeError(
                f"URL template '{kind.value}' arguments must be str, got {type(arg).__name__}"
            )

    url = base_url.rstrip('/') + URL_TEMPLATES[kind].format(*args)
    return url.rstrip('?&')

"""Query-string construction for API requests."""

import re
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

# Query parameter carrying the API key; always set by the client
AUTH_PARAM = 'auth_token'
_AUTH_VALUE = re.compile(rf"([?&]){AUTH_PARAM}=[^&#]*")


def _to_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def arrange_params(params: Optional[Mapping[str, Any]] = None, api_key: Optional[str] = None) -> str:
    """
    Merge caller parameters with the API key and encode them.

    The caller's mapping is not modified. When an API key is given it is
    written last under AUTH_PARAM, replacing any caller value for that key.
    Parameters whose value is None are dropped.

    Args:
        params: Caller-supplied query parameters
        api_key: API key, or None/'' for anonymous access

    Returns:
        Percent-encoded query string with keys in sorted order, or '' when
        there is nothing to send

    Example:
        >>> arrange_params({'start_date': '2020-01-01'}, api_key='abc123')
        'auth_token=abc123&start_date=2020-01-01'
    """
    merged = {
        str(key): _to_query_value(value)
        for key, value in (params or {}).items()
        if value is not None
    }
    if api_key:
        merged[AUTH_PARAM] = api_key

    if not merged:
        return ''

    return urlencode(sorted(merged.items()))


def redact_url(url: str) -> str:
    """Mask the API key in a URL before it is logged."""
    return _AUTH_VALUE.sub(rf'\g<1>{AUTH_PARAM}=***', url)

"""
JSON response decoding.

Turns the raw body of a Quandl JSON response into a Dataset, unwrapping the
top-level "dataset" key and checking field types along the way.
"""

import json
from typing import Any, Dict, Union

from ..errors import DecodeError
from ..models import Dataset, Frequency, freeze

DEFAULT_WRAPPER = 'dataset'

_STRING_FIELDS = (
    'dataset_code', 'database_code', 'name', 'description', 'refreshed_at',
    'newest_available_date', 'oldest_available_date', 'type', 'limit',
    'transform', 'column_index', 'start_date', 'end_date', 'collapse', 'order',
)
_INT_FIELDS = ('id', 'database_id')
# Sent as numbers by some endpoints
_NUMERIC_STRING_FIELDS = ('limit', 'column_index')


def _fail(message: str, url: str) -> DecodeError:
    return DecodeError(f"Invalid dataset response: {message}", url)


def _decode_fields(obj: Dict[str, Any], url: str) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}

    for name in _INT_FIELDS:
        value = obj.get(name)
        if value is None:
            continue
        # bool is an int subclass but never a valid id
        if isinstance(value, bool) or not isinstance(value, int):
            raise _fail(f"'{name}' must be an integer, got {value!r}", url)
        fields[name] = value

    for name in _STRING_FIELDS:
        value = obj.get(name)
        if value is None:
            continue
        if name in _NUMERIC_STRING_FIELDS and isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise _fail(f"'{name}' must be a string, got {value!r}", url)
        fields[name] = value

    premium = obj.get('premium')
    if premium is not None:
        if not isinstance(premium, bool):
            raise _fail(f"'premium' must be a boolean, got {premium!r}", url)
        fields['premium'] = premium

    frequency = obj.get('frequency')
    if frequency:
        try:
            fields['frequency'] = Frequency(frequency)
        except ValueError:
            raise _fail(f"unknown frequency {frequency!r}", url)

    column_names = obj.get('column_names')
    if column_names is not None:
        if not isinstance(column_names, list) or not all(isinstance(c, str) for c in column_names):
            raise _fail("'column_names' must be a list of strings", url)
        fields['column_names'] = tuple(column_names)

    data = obj.get('data')
    if data is not None:
        if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
            raise _fail("'data' must be a list of rows", url)
        fields['data'] = freeze(data)

    return fields


def decode_dataset(
    content: Union[bytes, str],
    url: str = '',
    wrapper: str = DEFAULT_WRAPPER
) -> Dataset:
    """
    Decode a JSON response body into a Dataset.

    When the wrapper key is absent (e.g. database listings and search
    results, which use other top-level keys) an empty Dataset is returned;
    the full body is always available as ``Dataset.raw``.

    Args:
        content: Raw response body
        url: Request URL, recorded on the Dataset and on errors
        wrapper: Top-level key holding the dataset object

    Returns:
        Decoded Dataset

    Raises:
        DecodeError: If the body is not valid JSON or does not match the schema
    """
    try:
        body = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}", url) from e

    if not isinstance(body, dict):
        raise _fail(f"expected a JSON object, got {type(body).__name__}", url)

    obj = body.get(wrapper)
    if obj is None:
        obj = {}
    elif not isinstance(obj, dict):
        raise _fail(f"'{wrapper}' must be a JSON object", url)

    return Dataset(request_url=url, raw=freeze(body), **_decode_fields(obj, url))

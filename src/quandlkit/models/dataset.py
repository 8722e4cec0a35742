"""
Dataset record and the enumerations used by the client.

Dataset mirrors the JSON object the API returns under the top-level
"dataset" key. Dates are kept as the opaque strings the API sends.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

import pandas as pd


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, dict):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


class ResponseFormat(str, Enum):
    """Output format requested from the API."""

    JSON = 'json'
    CSV = 'csv'
    OBJECT = 'object'

    @classmethod
    def parse(cls, value: Union[str, 'ResponseFormat', None]) -> 'ResponseFormat':
        """
        Convert a user-supplied format into a ResponseFormat.

        Empty or missing values mean OBJECT (request JSON, decode to Dataset).

        Raises:
            ValueError: If the value is not a known format
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.OBJECT
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = [f.value for f in cls]
            raise ValueError(f"Invalid format: {value!r}. Valid: {valid}")


class Frequency(str, Enum):
    """Sampling frequency of a dataset."""

    NONE = 'none'
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'
    QUARTERLY = 'quarterly'
    ANNUAL = 'annual'


@dataclass(frozen=True)
class Dataset:
    """
    A Quandl dataset: metadata plus tabular time-series values.

    Each row in ``data`` is ordered like ``column_names`` and may mix
    numbers, strings and None.

    Example:
        ```python
        from quandlkit import QuandlClient

        client = QuandlClient('my-api-key')
        ds = client.fetch_by_symbol('WIKI/AAPL', {'start_date': '2020-01-01'})
        print(ds.dataset_code, ds.column_names)
        df = ds.to_frame()
        ```
    """

    id: int = 0
    dataset_code: str = ''
    database_code: str = ''
    name: str = ''
    description: str = ''
    refreshed_at: str = ''
    newest_available_date: str = ''
    oldest_available_date: str = ''
    column_names: Tuple[str, ...] = ()
    frequency: Optional[Frequency] = None
    type: str = ''
    premium: bool = False
    limit: str = ''
    transform: str = ''
    column_index: str = ''
    start_date: str = ''
    end_date: str = ''
    # Cells may hold JSON objects, which are not hashable
    data: Tuple[Tuple[Any, ...], ...] = field(default=(), hash=False)
    collapse: str = ''
    order: str = ''
    database_id: int = 0

    # Not part of the API schema
    request_url: str = field(default='', compare=False)
    raw: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    @property
    def symbol(self) -> str:
        """Quandl code in DATABASE/DATASET form, or '' if either part is missing."""
        if self.database_code and self.dataset_code:
            return f"{self.database_code}/{self.dataset_code}"
        return ''

    def to_frame(self) -> pd.DataFrame:
        """
        Convert the tabular payload into a DataFrame.

        Returns:
            DataFrame with one column per entry in ``column_names``. When the
            first column is named 'Date' it becomes the index (left as strings).
            Rows wider than ``column_names`` get positional column names;
            shorter rows are padded with missing values.
        """
        columns = list(self.column_names)
        width = max([len(columns)] + [len(row) for row in self.data])
        columns += [str(i) for i in range(len(columns), width)]

        df = pd.DataFrame([list(row) for row in self.data], columns=columns or None)

        if columns and columns[0].lower() == 'date' and not df.empty:
            df = df.set_index(columns[0])

        return df

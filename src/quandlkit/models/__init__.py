"""Typed records returned by the Quandl API client."""

from .dataset import Dataset, Frequency, ResponseFormat, freeze

__all__ = ['Dataset', 'Frequency', 'ResponseFormat', 'freeze']

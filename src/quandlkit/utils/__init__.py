"""Shared utilities for quandlkit."""

"""Utility functions and helpers."""

from .http import HTTPClient

__all__ = ["HTTPClient"]

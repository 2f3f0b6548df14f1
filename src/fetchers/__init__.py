"""Clients for upstream commerce APIs."""

from src.fetchers.polar import PolarAPIError, PolarClient

__all__ = ["PolarAPIError", "PolarClient"]

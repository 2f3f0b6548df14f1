"""Polar product catalog sync."""

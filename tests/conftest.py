"""Pytest fixtures for the catalog sync tests."""

import pytest

from src.config import Settings


class FakePolarClient:
    """In-memory stand-in for PolarClient recording every call."""

    def __init__(self, products=None, links=None, lookup_error=None, create_error=None):
        self.products = products or []
        self.links = links or {}
        self.lookup_error = lookup_error
        self.create_error = create_error
        self.created: list[tuple[str, str]] = []
        self.lookups: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True

    def list_products(self, limit=100):
        return list(self.products)

    def list_checkout_links(self, product_id, limit=1):
        self.lookups.append(product_id)
        if self.lookup_error:
            raise self.lookup_error
        return list(self.links.get(product_id, []))[:limit]

    def create_checkout_link(self, price_id, payment_processor):
        if self.create_error:
            raise self.create_error
        self.created.append((price_id, payment_processor))
        return {"id": f"link-{price_id}", "url": f"https://buy.polar.sh/{price_id}"}


@pytest.fixture
def settings(tmp_path):
    return Settings(api_key="test-key", output_path=tmp_path / "products" / "out.json")


@pytest.fixture
def make_client():
    return FakePolarClient

"""Resolve or create a checkout link for a product."""

import logging

from src.fetchers.polar import PolarClient
from src.models import Product, select_price

logger = logging.getLogger(__name__)


def find_existing_link(client: PolarClient, product: Product) -> dict | None:
    """
    Return an existing checkout link for the product, if any.

    Lookup errors are swallowed: some Polar deployments reject the
    product_id filter, and the caller then creates a new link. A transient
    failure here can therefore produce a duplicate link.
    """
    try:
        items = client.list_checkout_links(product.id, limit=1)
    except Exception as e:
        logger.debug("Checkout link lookup failed for %s: %s", product.id, e)
        return None
    return items[0] if items else None


def get_or_create_checkout_link(
    client: PolarClient,
    product: Product,
    payment_processor: str,
) -> str | None:
    """
    Return a checkout URL for the product, creating a link when none exists.

    Creation errors propagate to the caller.
    """
    price = select_price(product)
    if price is None:
        return None

    existing = find_existing_link(client, product)
    if existing is not None:
        logger.info("  [existing] %s", product.name)
        return existing.get("url")

    link = client.create_checkout_link(price.id, payment_processor)
    logger.info("  [created]  %s", product.name)
    return link.get("url")

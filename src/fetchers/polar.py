"""Polar API client."""

import logging
from urllib.parse import urlencode

import requests

from src.config import Settings

logger = logging.getLogger(__name__)

PRODUCT_PAGE_LIMIT = 100


class PolarAPIError(RuntimeError):
    """Polar answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Polar API {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class PolarClient:
    """Thin authenticated wrapper around the Polar REST API."""

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.base_url = settings.api_url
        self.timeout = settings.request_timeout
        self.session = session or requests.Session()
        self._api_key = settings.api_key

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PolarClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: dict | None = None,
        headers: dict | None = None,
    ):
        """
        Send a request to `endpoint` (relative to the base URL).

        Returns the parsed JSON body. Raises PolarAPIError on any non-2xx
        response; nothing is retried.
        """
        merged_headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        if headers:
            merged_headers.update(headers)

        url = f"{self.base_url}{endpoint}"
        logger.debug("Polar %s %s", method, url)
        resp = self.session.request(
            method,
            url,
            json=body,
            headers=merged_headers,
            timeout=self.timeout,
        )
        logger.debug("Polar response status: %d", resp.status_code)

        if not 200 <= resp.status_code < 300:
            raise PolarAPIError(resp.status_code, resp.text)
        return resp.json()

    def list_products(self, limit: int = PRODUCT_PAGE_LIMIT) -> list[dict]:
        """Fetch one page of non-archived products."""
        query = urlencode({"limit": limit, "is_archived": "false"})
        data = self.request(f"/products?{query}")
        return data.get("items") or []

    def list_checkout_links(self, product_id: str, limit: int = 1) -> list[dict]:
        """Fetch checkout links filtered by product id."""
        query = urlencode({"product_id": product_id, "limit": limit})
        data = self.request(f"/checkout-links?{query}")
        return data.get("items") or []

    def create_checkout_link(self, price_id: str, payment_processor: str) -> dict:
        """Create a checkout link bound to a single price."""
        return self.request(
            "/checkout-links",
            method="POST",
            body={"product_price_id": price_id, "payment_processor": payment_processor},
        )

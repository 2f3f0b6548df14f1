"""Data models for the Polar catalog sync."""

from dataclasses import dataclass, field
from enum import Enum


class PriceType(str, Enum):
    """Polar price type."""

    ONE_TIME = "one_time"
    RECURRING = "recurring"


@dataclass
class Price:
    """Price variant attached to a product."""

    id: str
    type: str
    price_amount: int | float | None = None
    price_currency: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "Price":
        return cls(
            id=data.get("id", ""),
            type=data.get("type", ""),
            price_amount=data.get("price_amount"),
            price_currency=data.get("price_currency"),
        )


@dataclass
class Product:
    """Product as returned by the Polar products endpoint."""

    id: str
    name: str
    description: str | None = None
    prices: list[Price] = field(default_factory=list)
    medias: list[dict] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Product":
        """Build Product from API response, ignoring fields we don't use."""
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description"),
            prices=[Price.from_api(p) for p in data.get("prices") or [] if isinstance(p, dict)],
            medias=list(data.get("medias") or []),
        )

    @property
    def image_url(self) -> str | None:
        """Public URL of the first media entry, if any."""
        if not self.medias or not isinstance(self.medias[0], dict):
            return None
        return self.medias[0].get("public_url") or None


@dataclass
class OutputRecord:
    """Storefront record written to the output file."""

    id: str
    name: str
    description: str
    category: str
    price: int | float | None
    currency: str
    image: str | None = None
    checkout_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "price": self.price,
            "currency": self.currency,
            "image": self.image,
            "checkoutUrl": self.checkout_url,
        }


def select_price(product: Product) -> Price | None:
    """
    Pick the price used for the storefront.

    First one-time price wins; otherwise the first listed price. None when
    the product has no prices at all.
    """
    for price in product.prices:
        if price.type == PriceType.ONE_TIME.value:
            return price
    return product.prices[0] if product.prices else None


def build_record(
    product: Product,
    price: Price,
    category: str,
    checkout_url: str | None,
) -> OutputRecord:
    """Assemble the output record for a product and its selected price."""
    return OutputRecord(
        id=product.id,
        name=product.name,
        description=product.description or "",
        category=category,
        price=price.price_amount,
        currency=(price.price_currency or "usd").upper(),
        image=product.image_url,
        checkout_url=checkout_url,
    )

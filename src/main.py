"""Entry point for the Polar product sync."""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from src.checkout import get_or_create_checkout_link
from src.config import USAGE, ConfigError, Settings, load_settings
from src.fetchers.polar import PolarClient
from src.models import OutputRecord, Product, build_record, select_price
from src.storage import write_products

logger = logging.getLogger(__name__)


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(level: str = "INFO") -> None:
    """Progress lines go to stdout, warnings and errors to stderr."""
    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.addFilter(_BelowWarning())
    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)

    # getLevelName maps known names to ints and anything else to a string
    levelno = logging.getLevelName(level)
    if not isinstance(levelno, int):
        levelno = logging.INFO

    logging.basicConfig(
        level=levelno,
        format="%(message)s",
        handlers=[out_handler, err_handler],
        force=True,
    )
    # Keep urllib3 connection chatter out of the progress output
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def sync_catalog(client: PolarClient, settings: Settings) -> list[OutputRecord]:
    """Fetch the catalog and build one output record per priced product."""
    products = [Product.from_api(p) for p in client.list_products()]
    logger.info("Found %d product(s)\n", len(products))

    records: list[OutputRecord] = []
    for product in products:
        price = select_price(product)
        if price is None:
            logger.warning('  [skipped]  "%s" - no price found', product.name)
            continue

        checkout_url = None
        try:
            checkout_url = get_or_create_checkout_link(
                client, product, settings.payment_processor
            )
        except Exception as e:
            logger.warning(
                '  [warning]  checkout link failed for "%s": %s', product.name, e
            )

        records.append(build_record(product, price, settings.category, checkout_url))

    return records


def run(settings: Settings, client: PolarClient | None = None) -> Path:
    """Sync the catalog and write it to the configured output path."""
    logger.info("Fetching products from Polar...\n")
    if client is None:
        with PolarClient(settings) as owned_client:
            records = sync_catalog(owned_client, settings)
    else:
        records = sync_catalog(client, settings)
    path = write_products(records, settings.output_path)

    logger.info("\nDone - wrote %d product(s) to %s", len(records), path)
    return path


def main() -> int:
    """Run one sync. Returns the process exit code."""
    configure_logging(os.environ.get("LOG_LEVEL", "INFO").upper())

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("Error: %s", e)
        logger.error(USAGE)
        return 1

    try:
        run(settings)
    except Exception as e:
        logger.error("\nFatal: %s", e)
        logger.debug("Traceback:", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

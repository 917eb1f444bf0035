#!/usr/bin/env python3
"""Startup script: print the current listings of the configured marketplace."""

import asyncio
import sys
import logging

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("web3_marketplace")


async def show_items(project_id: str, marketplace_id: str) -> None:
    from web3_marketplace import MarketplacePlugin

    plugin = MarketplacePlugin()
    result = await plugin.get_marketplace_items(project_id, marketplace_id)
    logger.info(f"{result.total} items (page {result.page_number}, size {result.page_size})")
    for item in result.items:
        name = item.token.metadata.name or item.token.token_id
        logger.info(f"#{item.id} {name}: {item.price} wei, {item.status}, seller {item.seller}")


def main() -> int:
    """Main entry point."""
    from web3_marketplace.config import settings
    from web3_marketplace.errors import MarketplaceApiError

    logging.getLogger().setLevel(settings.log_level.upper())

    errors = settings.validate_for_run()
    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        logger.error("Please check your .env file")
        return 1

    logger.info(f"API: {settings.api_url}")
    try:
        asyncio.run(show_items(settings.project_id, settings.marketplace_id))
    except MarketplaceApiError as e:
        logger.error(f"{e.message}: {e.response}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

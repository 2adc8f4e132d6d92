"""Reactive completion demo entry point.

Usage:
    python -m src.main
    swapi-reactive-demo

Environment variables (see src/core/config.py) override the endpoint,
person id, timeout, delay and log level.
"""

import asyncio

from src.core.config import settings
from src.core.container import (
    get_future_session,
    get_logger,
    get_rx_session,
    get_swapi_client,
)
from src.presentation.demo import run_demo


async def main() -> None:
    """Fetch the configured person through every reactive variant."""
    logger = get_logger()
    request = get_swapi_client().person_request(settings.swapi_person_id)

    await run_demo(
        rx_session=get_rx_session(),
        future_session=get_future_session(),
        request=request,
        logger=logger,
        delay=settings.demo_delay_seconds,
    )


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()

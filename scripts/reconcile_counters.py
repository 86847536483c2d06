#!/usr/bin/env python3
"""Rewrite item upvote counters that drifted from the vote ledger.

The counters are only ever adjusted together with the ledger, so drift
means a manual data fix or a bug. Run after restoring a backup or editing
votes by hand.
"""

import asyncio
import sys

import logfire

from promptu.config import Settings
from promptu.domain.service import VotingService
from promptu.util.di.container import create_container
from promptu.util.logging import get_logger, setup_logging
from promptu.util.observability import configure_logfire

logger = get_logger(__name__)


async def reconcile() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            voting_service = await request_container.get(VotingService)
            return await voting_service.reconcile_all_upvote_counts()
    finally:
        await container.close()


def main() -> int:
    """Reconcile every counter and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        checked = asyncio.run(reconcile())
        logger.info(f"Reconciled upvote counters for {checked} items")
        return 0

    except Exception as e:
        logfire.error(
            "Counter reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

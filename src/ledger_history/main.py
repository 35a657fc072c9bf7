# -*- coding: utf-8 -*-
"""
Entry point: fetch and log one account's normalized transaction history.

Orchestrates: logging, settings, container, one history fetch, shutdown.
Account and block bound come from HISTORY__ADDRESS and HISTORY__END_BLOCK.

Run with: python -m ledger_history.main
"""
from __future__ import annotations

import asyncio
import structlog
from typing import Any

from ledger_history.DI import Container
from ledger_history.config import get_settings
from ledger_history.exceptions import MissingRequiredConfigError
from ledger_history.logging.config import configure_logging
from ledger_history.models.transaction import Transaction
from ledger_history.utils import mask_address


def _log_transaction(logger: Any, tx: Transaction) -> None:
    logger.info(
        "main_transaction",
        tx_hash=tx.id,
        tx_timestamp=tx.timestamp.isoformat(),
        tx_direction=tx.direction.value if tx.direction else None,
        tx_counterparty=tx.counterparty_address.hex,
        tx_contract_creation=tx.is_contract_creation,
        # str: amounts routinely exceed JSON-safe integer range
        tx_amount=str(tx.amount),
        tx_fee=str(tx.fee),
        tx_confirmations=tx.num_confirmations,
    )


async def run() -> list[Transaction]:
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    address = settings.history.address.strip()
    if not address:
        logger.error(
            "main_missing_address",
            message="HISTORY__ADDRESS is not set",
        )
        raise MissingRequiredConfigError("HISTORY__ADDRESS")

    container = Container()
    http_client = container.http_client()
    history_service = container.account_history_service()

    logger.info(
        "main_history_started",
        address=mask_address(address),
        end_block=settings.history.end_block,
        explorer_url=settings.explorer.api_url,
    )
    try:
        transactions = await history_service.history(address, end_block=settings.history.end_block)
    finally:
        await http_client.aclose()

    for tx in transactions:
        _log_transaction(logger, tx)
    logger.info("main_history_complete", tx_count=len(transactions))
    return transactions


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()

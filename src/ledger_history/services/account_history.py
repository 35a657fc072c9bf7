"""Account history: fetch and normalize one account's explorer history."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from ledger_history.models.address import Address
from ledger_history.models.transaction import Transaction, TxDirection
from ledger_history.utils.validation import mask_address

if TYPE_CHECKING:
    from ledger_history.clients.explorer_api import ExplorerClient
    from ledger_history.config import Settings


class AccountHistoryService:
    """Entry point for account-sync callers: raw address in, classified history out."""

    def __init__(
        self,
        explorer: ExplorerClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            explorer: Rate-limited explorer client (injected).
            settings: Application settings (uses settings.history.end_block as default bound).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._explorer = explorer
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def history(self, address: str, *, end_block: int | None = None) -> list[Transaction]:
        """Return the normalized history of address, most recent first.

        Args:
            address: 0x account address (any case).
            end_block: Upper block bound; default from settings.history.end_block.

        Raises:
            InvalidAddressError: If address is malformed.
            LedgerHistoryError: Any fetch, decode or normalization failure.
        """
        account = Address.parse(address)
        bound = end_block if end_block is not None else self._settings.history.end_block

        with bound_contextvars(history_address_masked=mask_address(account.hex), history_end_block=bound):
            transactions = await self._explorer.transactions(account, bound)
            directions = Counter(tx.direction for tx in transactions)
            self._logger.info(
                "account_history_loaded",
                history_tx_count=len(transactions),
                history_send_count=directions[TxDirection.SEND],
                history_receive_count=directions[TxDirection.RECEIVE],
                history_send_self_count=directions[TxDirection.SEND_SELF],
                history_total_fees=str(total_fees_paid(transactions)),
            )
            return transactions


def total_fees_paid(transactions: list[Transaction]) -> int:
    """Sum of fees of transactions sent by the account (send and send_self)."""
    return sum(tx.fee for tx in transactions if tx.direction in (TxDirection.SEND, TxDirection.SEND_SELF))

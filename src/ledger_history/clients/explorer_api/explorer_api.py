# -*- coding: utf-8 -*-
"""Rate-limited block explorer client (account txlist)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, cast
from structlog.contextvars import bound_contextvars

from ledger_history.clients.explorer_api.schema import (
    ExplorerTransactionSchema,
    TxListResponseSchema,
)
from ledger_history.clients.rate_limiter import CallRateLimiter
from ledger_history.config import Settings
from ledger_history.exceptions import DecodeError, LedgerHistoryError
from ledger_history.models.address import Address
from ledger_history.models.transaction import Transaction
from ledger_history.services.normalizer import normalize_transactions
from ledger_history.utils.validation import mask_address

if TYPE_CHECKING:
    from ledger_history.clients.http import AsyncHttpClient


def _result_field(envelope: Mapping[str, object]) -> Any:
    """Return the envelope's result value, matching the key case-insensitively."""
    for key, value in envelope.items():
        if isinstance(key, str) and key.lower() == "result":
            return value
    raise DecodeError("response has no result field", field="result")


def _decode_transactions(data: Any) -> List[Transaction]:
    """Decode a txlist response body into Transaction records.

    Any malformed record aborts the whole batch with its originating error.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"JSON object expected, got {type(data).__name__}")
    envelope = cast(TxListResponseSchema, data)
    result = _result_field(envelope)
    if isinstance(result, str):
        # Explorer error envelope, e.g. {"status": "0", "result": "Max rate limit reached"}
        raise DecodeError(f"explorer returned an error: {result}", field="result")
    if not isinstance(result, list):
        raise DecodeError(f"result: array expected, got {type(result).__name__}", field="result")
    return [
        Transaction.from_response(cast(ExplorerTransactionSchema, item))
        for item in cast(List[Any], result)
    ]


class ExplorerClient:
    """Client for an Etherscan-compatible explorer (module=account, action=txlist).

    All calls through one instance are serialized and spaced by at least
    settings.explorer.call_interval_seconds.
    """

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        rate_limiter: Optional[CallRateLimiter] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.explorer).
            rate_limiter: Optional limiter; by default one is created per client
                with settings.explorer.call_interval_seconds.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._rate_limiter = rate_limiter or CallRateLimiter(
            settings.explorer.call_interval_seconds,
            get_logger=get_logger,
        )
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.explorer.api_url.rstrip("/")

    def _txlist_params(self, address: Address, end_block: int) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "module": "account",
            "action": "txlist",
            "startblock": "0",
            "tag": "latest",
            "sort": "desc",  # desc by block number
            "endblock": str(end_block),
            "address": address.hex,
        }
        api_key = self._settings.explorer.api_key
        if api_key:
            params["apikey"] = api_key
        return params

    async def _call(self, params: Dict[str, Any]) -> Any:
        async with self._rate_limiter.slot():
            return await self._http.get(self._base_url(), params=params)

    async def fetch_transactions(self, address: Address, end_block: int) -> List[Transaction]:
        """Fetch the raw (unnormalized) txlist for address up to end_block.

        Args:
            address: Account to query.
            end_block: Upper block bound (inclusive), non-negative.

        Returns:
            Decoded records in explorer order (most recent first), unclassified.

        Raises:
            TransportError: HTTP failure.
            DecodeError: Malformed body or record.
            InvalidAddressError: Malformed address in a record.
            MissingCounterpartyError: Record without `to` and `contractAddress`.
        """
        if isinstance(end_block, bool) or not isinstance(end_block, int) or end_block < 0:
            raise ValueError(f"end_block must be a non-negative int, got {end_block!r}")

        with bound_contextvars(
            explorer_address_masked=mask_address(address.hex),
            explorer_end_block=end_block,
        ):
            data = await self._call(self._txlist_params(address, end_block))
            try:
                transactions = _decode_transactions(data)
            except LedgerHistoryError as e:
                self._logger.warning(
                    "explorer_txlist_decode_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            self._logger.debug("explorer_txlist_fetched", explorer_tx_count=len(transactions))
            return transactions

    async def transactions(self, address: Address, end_block: int) -> List[Transaction]:
        """Fetch and normalize the history of address up to end_block.

        Returns:
            De-duplicated records, most recent first, each classified
            (send, receive, send_self) relative to address.

        Raises:
            OwnershipMismatchError: A record involves neither side of address.
            Plus everything fetch_transactions() raises. No partial result.
        """
        batch = await self.fetch_transactions(address, end_block)
        with bound_contextvars(explorer_address_masked=mask_address(address.hex)):
            try:
                normalized = normalize_transactions(batch, address)
            except LedgerHistoryError as e:
                self._logger.warning(
                    "explorer_txlist_normalize_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            self._logger.debug(
                "explorer_txlist_normalized",
                explorer_tx_count=len(batch),
                explorer_unique_tx_count=len(normalized),
            )
            return normalized

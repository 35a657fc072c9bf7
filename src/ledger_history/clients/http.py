# -*- coding: utf-8 -*-
"""Async HTTP client for the explorer API (single attempt, no retries)."""

from __future__ import annotations

import asyncio
import json
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from ledger_history.config import Settings
from ledger_history.exceptions import DecodeError, TransportError


class AsyncHttpClient:
    """Async HTTP GET client returning decoded JSON.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager.

    Failed requests are not retried; the caller decides whether to retry.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (uses settings.explorer.timeout_seconds).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            # timeout_seconds unset means no client-side deadline
            timeout = aiohttp.ClientTimeout(total=self._settings.explorer.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Args:
            url: Full URL to request.
            params: Optional query parameters (str or int values).

        Returns:
            Parsed JSON response (dict or list).

        Raises:
            TransportError: Connection failure, timeout or non-2xx status.
            DecodeError: Body is not valid JSON.
        """
        params = params or {}
        request_id = uuid.uuid4().hex[:12]

        with bound_contextvars(http_url=url, http_request_id=request_id):
            try:
                session = await self._get_session()
                async with session.get(url, params=params) as response:
                    response.raise_for_status()
                    body = await response.read()
            # str(e) carries the request URL with its query (apikey, address); never log it.
            except aiohttp.ClientResponseError as e:
                self._logger.warning(
                    "http_get_failed",
                    http_status_code=e.status,
                    error_type=type(e).__name__,
                    error_message=e.message,
                )
                raise TransportError(
                    f"GET failed with status {e.status}: {url}",
                    url=url,
                    status_code=e.status,
                    cause=e,
                ) from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.warning("http_get_failed", error_type=type(e).__name__)
                raise TransportError(f"GET failed: {url}", url=url, cause=e) from e

            try:
                return json.loads(body)
            except ValueError as e:
                # JSONDecodeError or UnicodeDecodeError
                self._logger.warning(
                    "http_get_invalid_json",
                    error_message=str(e),
                    http_body_length=len(body),
                )
                raise DecodeError(f"invalid JSON response from {url}: {e}") from e

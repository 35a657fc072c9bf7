# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from ledger_history.clients.explorer_api import ExplorerClient
from ledger_history.clients.http import AsyncHttpClient
from ledger_history.config import get_settings
from ledger_history.services.account_history import AccountHistoryService


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, explorer client, history service."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    # One instance per process so every caller shares the same rate limiter.
    explorer_client = providers.Singleton(
        ExplorerClient,
        http_client=http_client,
        settings=config,
    )

    account_history_service = providers.Singleton(
        AccountHistoryService,
        explorer=explorer_client,
        settings=config,
    )

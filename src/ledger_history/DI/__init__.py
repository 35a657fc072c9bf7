"""Dependency injection."""

from ledger_history.DI.container import Container

__all__ = ["Container"]

"""
Custom exception hierarchy for the invoice engine.

The computation core (totals, number words) is total over its input domain
and raises nothing. These exceptions cover the edges around it, where a
machine-readable code makes the failure reportable.
"""

from __future__ import annotations


class InvoiceEngineError(Exception):
    """Base exception for all invoice engine failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ConfigError(InvoiceEngineError):
    """An environment setting is missing its expected shape or range."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("CONFIG_INVALID", message, details)

"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_invoice_env(monkeypatch):
    """Keep a developer's INVOICE_* variables (or .env) out of the tests."""
    for name in (
        "INVOICE_START_NUMBER",
        "INVOICE_DEFAULT_TAX_RATE",
        "INVOICE_DEFAULT_DISCOUNT_RATE",
    ):
        monkeypatch.delenv(name, raising=False)
    yield

"""
Environment-driven settings for the invoice form defaults.

Entry points (main.py, api.py) load a local .env first; Settings then reads
the INVOICE_* variables from the process environment. Tests pass an explicit
mapping instead, which is validated without touching os.environ.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

ENV_PREFIX = "INVOICE_"

DEFAULT_START_NUMBER = 3541
DEFAULT_TAX_RATE = Decimal(10)
DEFAULT_DISCOUNT_RATE = Decimal(0)

# What each field has to look like, for error messages
_EXPECTED: dict[str, str] = {
    "start_number": "an integer of at least 1",
    "default_tax_rate": "a number between 0 and 100",
    "default_discount_rate": "a number between 0 and 100",
}


class Settings(BaseSettings):
    """Defaults applied to a new invoice draft."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
    )

    start_number: int = Field(DEFAULT_START_NUMBER, ge=1)
    default_tax_rate: Decimal = Field(DEFAULT_TAX_RATE, ge=0, le=100, allow_inf_nan=False)
    default_discount_rate: Decimal = Field(
        DEFAULT_DISCOUNT_RATE, ge=0, le=100, allow_inf_nan=False
    )


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read INVOICE_* variables, falling back to the built-in defaults.

    Blank variables count as unset.

    Raises:
        ConfigError: If a variable is set but not a usable value.
    """
    try:
        if environ is None:
            return Settings()
        return Settings.model_validate(_fields_from(environ))
    except ValidationError as e:
        raise _config_error(e) from e


# ─── Helpers ─────────────────────────────────────────────────────────


def _fields_from(environ: Mapping[str, str]) -> dict[str, str]:
    """Pick the non-blank INVOICE_* entries, keyed by field name."""
    fields: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            fields[name] = raw.strip()
    return fields


def _config_error(error: ValidationError) -> ConfigError:
    """Turn the first validation failure into a ConfigError naming the variable."""
    first = error.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else ""
    variable = ENV_PREFIX + field.upper()
    value = first.get("input")
    expected = _EXPECTED.get(field, "valid")
    return ConfigError(
        f"{variable} must be {expected}, got {value!r}",
        {"variable": variable, "value": value, "reason": first["msg"]},
    )

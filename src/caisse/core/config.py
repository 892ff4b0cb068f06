"""Config loading from the environment; settings object passed to Application(config=...)."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Optional


class Config:
    """
    Application config helpers. Settings classes build themselves from
    Config.load_from_env() and are then available via container.resolve(Settings).
    """

    @classmethod
    def load_from_env(cls, prefix: str = "CAISSE_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for MySettings(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {value!r}")


def _as_count(name: str, value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name}: expected an integer, got {value!r}") from None
    if number <= 0:
        raise ValueError(f"{name}: must be positive, got {number}")
    return number


@dataclass
class Settings:
    """Checkout simulation settings."""

    customers: int = 5
    products: int = 10
    seed: Optional[int] = None
    locale: str = "en_US"
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self) -> None:
        self.customers = _as_count("customers", self.customers)
        self.products = _as_count("products", self.products)
        if self.seed is not None and self.seed != "":
            try:
                self.seed = int(self.seed)
            except (TypeError, ValueError):
                raise ValueError(f"seed: expected an integer, got {self.seed!r}") from None
        else:
            self.seed = None
        self.log_level = str(self.log_level).upper()
        self.log_json = _as_bool("log_json", self.log_json)

    @classmethod
    def from_env(cls, prefix: str = "CAISSE_", **overrides: Any) -> Settings:
        """Build settings from CAISSE_* variables; explicit overrides that are not None win."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in Config.load_from_env(prefix).items() if k in known}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

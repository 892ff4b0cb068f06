"""Pricing context: money, discount kinds, typed discount specs and the strategy protocol (no framework)."""
from __future__ import annotations

import enum
import functools
import inspect
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Protocol, Union

from caisse.domain import ValueObject

Money = Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class DiscountError(ValueError):
    """Base for pricing errors. Always a programming or configuration mistake, never transient."""


class InvalidDiscountKind(DiscountError):
    """Requested discount kind is outside the closed set of DiscountKind."""


class InvalidParameters(DiscountError):
    """Missing, extra, mistyped or out-of-range parameters for a discount kind."""


class DiscountKind(enum.Enum):
    PERCENTAGE = "percentage"
    BOGO = "bogo"
    FIXED_AMOUNT = "fixed_amount"
    FREE_SHIPPING = "free_shipping"
    BTGOF = "btgof"

    @classmethod
    def parse(cls, value: DiscountKind | str) -> DiscountKind:
        """Accept a member, its value or its name in any case ("fixed-amount" works too)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for kind in cls:
                if key in (kind.value, kind.name.lower()):
                    return kind
        raise InvalidDiscountKind(f"Invalid discount kind: {value!r}")


def to_money(value: object, field: str) -> Money:
    """Exact conversion for monetary inputs. Floats are refused."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise InvalidParameters(f"{field} must be a Decimal or int, got {type(value).__name__}")
    money = Decimal(value)
    if not money.is_finite():
        raise InvalidParameters(f"{field} must be finite, got {value}")
    return money


def _to_quantity(value: object, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameters(f"{field} must be an int, got {type(value).__name__}")
    return value


def discount_spec(cls: type) -> type:
    """Frozen dataclass whose constructor reports a wrong parameter set as InvalidParameters."""
    cls = dataclass(frozen=True)(cls)
    init = cls.__init__
    signature = inspect.signature(init)

    @functools.wraps(init)
    def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
        try:
            signature.bind(self, *args, **kwargs)
        except TypeError as exc:
            raise InvalidParameters(f"{cls.__name__}: {exc}") from None
        init(self, *args, **kwargs)

    cls.__init__ = __init__
    return cls


@discount_spec
class PercentageSpec(ValueObject):
    """Subtract ``rate`` percent of the price."""

    kind: ClassVar[DiscountKind] = DiscountKind.PERCENTAGE
    rate: Money

    def __post_init__(self) -> None:
        rate = to_money(self.rate, "rate")
        if not ZERO <= rate <= HUNDRED:
            raise InvalidParameters(f"rate must be within [0, 100], got {rate}")
        object.__setattr__(self, "rate", rate)


@discount_spec
class BogoSpec(ValueObject):
    """Buy ``buy_quantity``, get ``free_quantity`` free."""

    kind: ClassVar[DiscountKind] = DiscountKind.BOGO
    buy_quantity: int
    free_quantity: int

    def __post_init__(self) -> None:
        if _to_quantity(self.buy_quantity, "buy_quantity") <= 0:
            raise InvalidParameters(f"buy_quantity must be > 0, got {self.buy_quantity}")
        if _to_quantity(self.free_quantity, "free_quantity") < 0:
            raise InvalidParameters(f"free_quantity must be >= 0, got {self.free_quantity}")


@discount_spec
class FixedAmountSpec(ValueObject):
    """Subtract a fixed ``amount``."""

    kind: ClassVar[DiscountKind] = DiscountKind.FIXED_AMOUNT
    amount: Money

    def __post_init__(self) -> None:
        amount = to_money(self.amount, "amount")
        if amount < ZERO:
            raise InvalidParameters(f"amount must be >= 0, got {amount}")
        object.__setattr__(self, "amount", amount)


@discount_spec
class FreeShippingSpec(ValueObject):
    kind: ClassVar[DiscountKind] = DiscountKind.FREE_SHIPPING


@discount_spec
class BtgofSpec(ValueObject):
    """Buy two, get one free: a flat third off, whatever the quantity."""

    kind: ClassVar[DiscountKind] = DiscountKind.BTGOF


DiscountSpec = Union[PercentageSpec, BogoSpec, FixedAmountSpec, FreeShippingSpec, BtgofSpec]

SPEC_TYPES: dict[DiscountKind, type] = {
    DiscountKind.PERCENTAGE: PercentageSpec,
    DiscountKind.BOGO: BogoSpec,
    DiscountKind.FIXED_AMOUNT: FixedAmountSpec,
    DiscountKind.FREE_SHIPPING: FreeShippingSpec,
    DiscountKind.BTGOF: BtgofSpec,
}


class DiscountStrategy(Protocol):
    def apply(self, original_price: Money) -> Money:
        ...

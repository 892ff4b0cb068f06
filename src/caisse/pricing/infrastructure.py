"""Pricing: discount strategy implementations and the factory that builds them."""
from __future__ import annotations

import logging
from dataclasses import fields
from decimal import ROUND_FLOOR, Decimal

from .domain import (
    HUNDRED,
    SPEC_TYPES,
    ZERO,
    BogoSpec,
    BtgofSpec,
    DiscountKind,
    DiscountSpec,
    DiscountStrategy,
    FixedAmountSpec,
    FreeShippingSpec,
    InvalidParameters,
    Money,
    PercentageSpec,
    to_money,
)

logger = logging.getLogger(__name__)

THREE = Decimal("3")


def _price(original_price: object) -> Money:
    price = to_money(original_price, "original_price")
    if price < ZERO:
        raise InvalidParameters(f"original_price must be >= 0, got {price}")
    return price


def _expect(spec: object, spec_type: type) -> object:
    if not isinstance(spec, spec_type):
        raise InvalidParameters(f"expected a {spec_type.__name__}, got {spec!r}")
    return spec


class PercentageDiscount:
    def __init__(self, spec: PercentageSpec):
        self.spec = _expect(spec, PercentageSpec)

    def apply(self, original_price: Money) -> Money:
        price = _price(original_price)
        return price - price * (self.spec.rate / HUNDRED)


class BogoDiscount:
    """Kept literally: the price is split as if it were a unit count."""

    def __init__(self, spec: BogoSpec):
        self.spec = _expect(spec, BogoSpec)

    def apply(self, original_price: Money) -> Money:
        price = _price(original_price)
        buy = self.spec.buy_quantity
        total = buy + self.spec.free_quantity
        if total <= 0:
            return ZERO
        units = (price / total).to_integral_value(rounding=ROUND_FLOOR)
        return units * buy * price / total


class FixedAmountDiscount:
    def __init__(self, spec: FixedAmountSpec):
        self.spec = _expect(spec, FixedAmountSpec)

    def apply(self, original_price: Money) -> Money:
        # not clamped at zero
        return _price(original_price) - self.spec.amount


class FreeShippingDiscount:
    """Always 0. The price is still checked, so a negative or non-money price is refused like elsewhere."""

    def __init__(self, spec: FreeShippingSpec | None = None):
        self.spec = FreeShippingSpec() if spec is None else _expect(spec, FreeShippingSpec)

    def apply(self, original_price: Money) -> Money:
        _price(original_price)
        return ZERO


class BtgofDiscount:
    def __init__(self, spec: BtgofSpec | None = None):
        self.spec = BtgofSpec() if spec is None else _expect(spec, BtgofSpec)

    def apply(self, original_price: Money) -> Money:
        price = _price(original_price)
        return price - price / THREE


STRATEGIES: dict[DiscountKind, type] = {
    DiscountKind.PERCENTAGE: PercentageDiscount,
    DiscountKind.BOGO: BogoDiscount,
    DiscountKind.FIXED_AMOUNT: FixedAmountDiscount,
    DiscountKind.FREE_SHIPPING: FreeShippingDiscount,
    DiscountKind.BTGOF: BtgofDiscount,
}


def parameter_names(kind: DiscountKind | str) -> tuple[str, ...]:
    """Positional parameters expected by DiscountFactory.create for this kind."""
    return tuple(f.name for f in fields(SPEC_TYPES[DiscountKind.parse(kind)]))


class DiscountFactory:
    """Builds a strategy for a kind. Never chooses the kind itself."""

    def build_spec(self, kind: DiscountKind | str, *params: object) -> DiscountSpec:
        kind = DiscountKind.parse(kind)
        names = parameter_names(kind)
        if len(params) != len(names):
            expected = ", ".join(names) or "no parameters"
            raise InvalidParameters(
                f"{kind.value} takes {len(names)} parameter(s) ({expected}), got {len(params)}"
            )
        return SPEC_TYPES[kind](*params)

    def from_spec(self, spec: DiscountSpec) -> DiscountStrategy:
        kind = getattr(spec, "kind", None)
        if not isinstance(kind, DiscountKind) or not isinstance(spec, SPEC_TYPES[kind]):
            raise InvalidParameters(f"Not a discount spec: {spec!r}")
        strategy = STRATEGIES[kind](spec)
        logger.debug("built %s from %r", type(strategy).__name__, spec)
        return strategy

    def create(self, kind: DiscountKind | str, *params: object) -> DiscountStrategy:
        return self.from_spec(self.build_spec(kind, *params))

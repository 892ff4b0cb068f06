"""Discount strategies, their typed specs and the factory that builds them."""
from caisse.pricing.domain import (
    BogoSpec,
    BtgofSpec,
    DiscountError,
    DiscountKind,
    DiscountSpec,
    DiscountStrategy,
    FixedAmountSpec,
    FreeShippingSpec,
    InvalidDiscountKind,
    InvalidParameters,
    Money,
    PercentageSpec,
)
from caisse.pricing.infrastructure import (
    BogoDiscount,
    BtgofDiscount,
    DiscountFactory,
    FixedAmountDiscount,
    FreeShippingDiscount,
    PercentageDiscount,
    parameter_names,
)

__all__ = [
    "BogoSpec",
    "BtgofSpec",
    "DiscountError",
    "DiscountKind",
    "DiscountSpec",
    "DiscountStrategy",
    "FixedAmountSpec",
    "FreeShippingSpec",
    "InvalidDiscountKind",
    "InvalidParameters",
    "Money",
    "PercentageSpec",
    "BogoDiscount",
    "BtgofDiscount",
    "DiscountFactory",
    "FixedAmountDiscount",
    "FreeShippingDiscount",
    "PercentageDiscount",
    "parameter_names",
]

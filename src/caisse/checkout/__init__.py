"""Checkout simulation: the caller of the pricing context."""
from caisse.checkout.application import CheckoutService, SimulateCheckout, SimulateCheckoutHandler
from caisse.checkout.domain import CartLine, Catalog, Customer, DiscountPolicy, Invoice, Product, QuantityPicker
from caisse.checkout.infrastructure import (
    FakerCatalog,
    FixedDiscountPolicy,
    RandomDiscountPolicy,
    RandomQuantityPicker,
    make_faker,
)

__all__ = [
    "CheckoutService",
    "SimulateCheckout",
    "SimulateCheckoutHandler",
    "CartLine",
    "Catalog",
    "Customer",
    "DiscountPolicy",
    "Invoice",
    "Product",
    "QuantityPicker",
    "FakerCatalog",
    "FixedDiscountPolicy",
    "RandomDiscountPolicy",
    "RandomQuantityPicker",
    "make_faker",
]

"""Checkout bounded context: catalog, discount policy and quantity picker are injected."""
from __future__ import annotations

from faker import Faker

from caisse.ddd import DomainModule

from .application import CheckoutService, SimulateCheckout, SimulateCheckoutHandler
from .domain import Catalog, DiscountPolicy, QuantityPicker
from .infrastructure import FakerCatalog, RandomDiscountPolicy, RandomQuantityPicker


def checkout_module(
    faker: Faker,
    policy: DiscountPolicy | None = None,
    quantity_picker: QuantityPicker | None = None,
) -> DomainModule:
    """Random policy and 1..4 quantities unless the caller supplies its own."""
    module = (
        DomainModule("checkout")
        .instance(Faker, faker)
        .bind(Catalog, FakerCatalog)
        .bind(CheckoutService, CheckoutService)
        .command(SimulateCheckout, SimulateCheckoutHandler)
    )
    if policy is None:
        module.bind(DiscountPolicy, RandomDiscountPolicy)
    else:
        module.instance(DiscountPolicy, policy)
    if quantity_picker is None:
        module.bind(QuantityPicker, RandomQuantityPicker)
    else:
        module.instance(QuantityPicker, quantity_picker)
    return module

"""Pricing bounded context: discount factory and handlers via .bind()."""
from caisse.ddd import DomainModule

from .application import ApplyDiscount, ApplyDiscountHandler, ListDiscountKinds, list_discount_kinds_handler
from .infrastructure import DiscountFactory


pricing_module = (
    DomainModule("pricing")
    .bind(DiscountFactory, DiscountFactory)
    .command(ApplyDiscount, ApplyDiscountHandler)
    .query(ListDiscountKinds, list_discount_kinds_handler)
)

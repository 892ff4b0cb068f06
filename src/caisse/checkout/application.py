"""Checkout: cart totalling service, the simulation command and its handler."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from caisse.ddd import Command
from caisse.pricing.infrastructure import DiscountFactory

from .domain import CartLine, Catalog, Customer, DiscountPolicy, Invoice, Product, QuantityPicker

logger = logging.getLogger(__name__)


class CheckoutService:
    def __init__(self, factory: DiscountFactory, policy: DiscountPolicy, quantity_picker: QuantityPicker):
        self._factory = factory
        self._policy = policy
        self._pick_quantity = quantity_picker

    def line_for(self, product: Product, quantity: int) -> CartLine:
        if quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {quantity}")
        spec = self._policy.choose(product)
        discounted = self._factory.from_spec(spec).apply(product.price)
        return CartLine(product=product, quantity=quantity, discount=spec, discounted_price=discounted)

    def checkout(self, customer: Customer, products: Iterable[Product]) -> Invoice:
        lines = tuple(self.line_for(product, self._pick_quantity(product)) for product in products)
        invoice = Invoice(customer=customer, lines=lines)
        logger.info(
            "invoice for %s: %d line(s), total %s",
            customer.name,
            len(lines),
            invoice.total,
            extra={"extra": {"customer_id": customer.id, "lines": len(lines), "total": str(invoice.total)}},
        )
        return invoice


@dataclass(frozen=True)
class SimulateCheckout(Command):
    customers: int = 5
    products: int = 10


class SimulateCheckoutHandler:
    """Every customer buys every product of one generated catalog."""

    def __init__(self, catalog: Catalog, service: CheckoutService):
        self._catalog = catalog
        self._service = service

    def __call__(self, cmd: SimulateCheckout) -> list[Invoice]:
        if cmd.customers <= 0 or cmd.products <= 0:
            raise ValueError("customers and products must be positive")
        products = self._catalog.products(cmd.products)
        customers = self._catalog.customers(cmd.customers)
        logger.debug("simulating %d customer(s) over %d product(s)", len(customers), len(products))
        return [self._service.checkout(customer, products) for customer in customers]

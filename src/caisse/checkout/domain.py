"""Checkout context: products, customers, cart lines, invoices and the policies the simulation depends on."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_FLOOR, Decimal
from typing import Protocol, Sequence

from caisse.domain import Entity
from caisse.pricing.domain import ZERO, DiscountSpec, Money, to_money


class Product(Entity):
    def __init__(self, id: str, name: str, price: Money) -> None:
        super().__init__(id)
        self.name = name
        self.price = to_money(price, "price")
        if self.price <= ZERO:
            raise ValueError(f"Product price must be positive, got {self.price}")

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price})"


class Customer(Entity):
    def __init__(self, id: str, name: str) -> None:
        super().__init__(id)
        self.name = name

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, name={self.name!r})"


@dataclass(frozen=True)
class CartLine:
    """
    One purchased product after its discount decision.
    The discounted price scales the purchased quantity down (or up) to the
    quantity actually billed at full price.
    """

    product: Product
    quantity: int
    discount: DiscountSpec
    discounted_price: Money

    @property
    def billed_quantity(self) -> int:
        ratio = self.quantity * self.discounted_price / self.product.price
        return int(ratio.to_integral_value(rounding=ROUND_FLOOR))

    @property
    def total(self) -> Money:
        return self.product.price * self.billed_quantity


@dataclass(frozen=True)
class Invoice:
    customer: Customer
    lines: tuple[CartLine, ...] = field(default_factory=tuple)

    @property
    def total(self) -> Money:
        return sum((line.total for line in self.lines), Decimal("0"))


class DiscountPolicy(Protocol):
    """Decides which discount a product gets. The factory never does."""

    def choose(self, product: Product) -> DiscountSpec:
        ...


class Catalog(Protocol):
    def products(self, count: int) -> Sequence[Product]:
        ...

    def customers(self, count: int) -> Sequence[Customer]:
        ...


class QuantityPicker(Protocol):
    """How many units of a product the customer puts in the cart."""

    def __call__(self, product: Product) -> int:
        ...

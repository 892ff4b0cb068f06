"""Checkout: Faker-backed catalog and the random pieces of the simulation."""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from faker import Faker

from caisse.pricing.domain import DiscountKind, DiscountSpec
from caisse.pricing.infrastructure import DiscountFactory

from .domain import Customer, Product


def make_faker(locale: str = "en_US", seed: Optional[int] = None) -> Faker:
    try:
        fake = Faker(locale)
    except AttributeError as exc:
        # Faker signals an unknown locale with AttributeError
        raise ValueError(f"Unknown locale: {locale!r}") from exc
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def _cents(fake: Faker, low: int, high: int) -> Decimal:
    """Random amount with two decimals in [low, high], drawn as whole cents."""
    return Decimal(fake.random_int(min=low * 100, max=high * 100)) / 100


class FakerCatalog:
    def __init__(self, faker: Faker):
        self._fake = faker

    def products(self, count: int) -> list[Product]:
        return [
            Product(
                id=f"P{index:03d}",
                name=f"{self._fake.color_name()} {self._fake.word().capitalize()}",
                price=_cents(self._fake, 1, 100),
            )
            for index in range(1, count + 1)
        ]

    def customers(self, count: int) -> list[Customer]:
        return [Customer(id=f"C{index:03d}", name=self._fake.name()) for index in range(1, count + 1)]


class RandomDiscountPolicy:
    """Uniform pick among all kinds, with random parameters for the kinds that take some."""

    def __init__(self, faker: Faker, factory: DiscountFactory):
        self._fake = faker
        self._factory = factory

    def choose(self, product: Product) -> DiscountSpec:
        kind = self._fake.random_element(elements=list(DiscountKind))
        return self._factory.build_spec(kind, *self._parameters(kind))

    def _parameters(self, kind: DiscountKind) -> tuple:
        if kind is DiscountKind.PERCENTAGE:
            return (_cents(self._fake, 1, 50),)
        if kind is DiscountKind.BOGO:
            return (self._fake.random_int(min=1, max=5), self._fake.random_int(min=1, max=5))
        if kind is DiscountKind.FIXED_AMOUNT:
            return (_cents(self._fake, 1, 10),)
        return ()


class FixedDiscountPolicy:
    """Same discount for every product."""

    def __init__(self, spec: DiscountSpec):
        self._spec = spec

    def choose(self, product: Product) -> DiscountSpec:
        return self._spec


class RandomQuantityPicker:
    def __init__(self, faker: Faker, low: int = 1, high: int = 4):
        if not 0 < low <= high:
            raise ValueError(f"Invalid quantity range [{low}, {high}]")
        self._fake = faker
        self._low = low
        self._high = high

    def __call__(self, product: Product) -> int:
        return self._fake.random_int(min=self._low, max=self._high)

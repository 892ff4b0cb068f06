"""Pricing: commands, queries and handlers (factory injected)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from caisse.ddd import Command, Query

from .domain import DiscountKind, Money
from .infrastructure import DiscountFactory, parameter_names


@dataclass(frozen=True)
class ApplyDiscount(Command):
    price: Money
    kind: DiscountKind | str
    params: tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ListDiscountKinds(Query):
    pass


class ApplyDiscountHandler:
    def __init__(self, factory: DiscountFactory):
        self._factory = factory

    def __call__(self, cmd: ApplyDiscount) -> Money:
        return self._factory.create(cmd.kind, *cmd.params).apply(cmd.price)


def list_discount_kinds_handler(query: ListDiscountKinds) -> dict[str, tuple[str, ...]]:
    return {kind.value: parameter_names(kind) for kind in DiscountKind}

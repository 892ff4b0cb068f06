"""
DomainModule: one object per bounded context.
Describes DI bindings, commands and queries.
"""
from __future__ import annotations

from typing import Any, Callable, Type

from caisse.core.app import Application
from caisse.core.module import Module
from caisse.ddd.commands import Command, Query


class DomainModule(Module):
    """
    One object = full bounded context.
    .bind() .instance() .command() .query()
    Register via app.register(module).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._bindings: list[tuple[Type[Any], Type[Any]]] = []
        self._instances: list[tuple[Any, Any]] = []
        self._commands: list[tuple[Type[Command], Type[Any] | Callable[..., Any]]] = []
        self._queries: list[tuple[Type[Query], Type[Any] | Callable[..., Any]]] = []

    def bind(self, interface: Type[Any], impl: Type[Any]) -> DomainModule:
        """Register any interface → implementation for DI (e.g. domain services, strategies)."""
        self._bindings.append((interface, impl))
        return self

    def instance(self, key: Any, obj: Any) -> DomainModule:
        """Register a ready-made object (e.g. a seeded Faker or a fixed policy)."""
        self._instances.append((key, obj))
        return self

    def command(self, cmd_type: Type[Command], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._commands.append((cmd_type, handler))
        return self

    def query(self, query_type: Type[Query], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._queries.append((query_type, handler))
        return self

    def register_into(self, app: Application) -> None:
        container = app.container

        for key, obj in self._instances:
            container.register_instance(key, obj)

        # Arbitrary bindings (domain services, strategies, adapters)
        for iface, impl in self._bindings:
            container.register_class(impl)
            if iface is not impl:
                container.register(iface, lambda c=container, i=impl: c.resolve(i))

        for cmd_type, handler in self._commands:
            app.add_handler(self.name, cmd_type, handler)

        for query_type, handler in self._queries:
            app.add_handler(self.name, query_type, handler)

"""Application: composed from modules via app.register(module). Dispatches commands in-process."""
from __future__ import annotations

import logging
from typing import Any, Callable

from caisse.core.container import Container
from caisse.core.module import Module

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Commands go through send(), queries through ask(); both are synchronous.
    """

    def __init__(self, config: Any = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._handlers: dict[type, tuple[str, Any]] = {}  # message type -> (context, handler)
        if config is not None:
            self._container.register_instance(type(config), config)
            self._container.register_instance("config", config)

    @property
    def container(self) -> Container:
        return self._container

    @property
    def modules(self) -> list[Module]:
        return list(self._modules)

    def register(self, module: Module) -> Application:
        """Register a module (DomainModule or any object with register_into). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        return self

    def add_handler(self, context: str, message_type: type, handler: type[Any] | Callable[..., Any]) -> None:
        """Route a command or query type to its handler. Handler classes are built by the container."""
        if message_type in self._handlers:
            raise ValueError(f"Handler for {message_type.__name__} already registered")
        if isinstance(handler, type):
            self._container.register_class(handler)
        self._handlers[message_type] = (context, handler)
        logger.debug("registered %s handler for %s", context, message_type.__name__)

    def send(self, command: Any) -> Any:
        """Execute a command with its registered handler and return the handler's result."""
        return self._dispatch(command)

    def ask(self, query: Any) -> Any:
        """Run a query with its registered handler."""
        return self._dispatch(query)

    def _dispatch(self, message: Any) -> Any:
        try:
            context, handler = self._handlers[type(message)]
        except KeyError:
            raise LookupError(f"No handler registered for {type(message).__name__}") from None
        if isinstance(handler, type):
            handler = self._container.resolve(handler)
        logger.debug("dispatching %s to %s", type(message).__name__, context)
        return handler(message)

from caisse.core.app import Application
from caisse.core.container import Container
from caisse.core.module import Module
from caisse.core.config import Config, Settings
from caisse.core.logging_config import JsonFormatter, configure_logging

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "Settings",
    "JsonFormatter",
    "configure_logging",
]

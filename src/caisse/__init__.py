"""
caisse: retail checkout simulation around a discount strategy layer.
Application is composed from module objects via app.register(module).
"""
from caisse.core import Application, Config, Settings, configure_logging
from caisse.main import create_app

__all__ = [
    "Application",
    "Config",
    "Settings",
    "configure_logging",
    "create_app",
]

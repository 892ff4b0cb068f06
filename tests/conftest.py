import logging
import os
from decimal import Decimal

import pytest

from caisse.checkout import Product


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("CAISSE_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def restore_caisse_logger():
    logger = logging.getLogger("caisse")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.fixture
def widget():
    return Product("P001", "Widget", Decimal("10.00"))

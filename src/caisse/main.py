"""
App composition: pricing and checkout contexts registered as modules.
"""
from __future__ import annotations

from caisse.checkout.domain import DiscountPolicy, QuantityPicker
from caisse.checkout.infrastructure import make_faker
from caisse.checkout.module import checkout_module
from caisse.core import Application, Settings
from caisse.pricing.module import pricing_module


def create_app(
    settings: Settings | None = None,
    policy: DiscountPolicy | None = None,
    quantity_picker: QuantityPicker | None = None,
) -> Application:
    settings = settings or Settings.from_env()
    app = Application(config=settings)

    # Domain modules (bounded contexts)
    app.register(pricing_module)
    app.register(checkout_module(make_faker(settings.locale, settings.seed), policy, quantity_picker))
    return app

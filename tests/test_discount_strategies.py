from decimal import Decimal

import pytest

from caisse.pricing import (
    BogoDiscount,
    BogoSpec,
    BtgofDiscount,
    BtgofSpec,
    FixedAmountDiscount,
    FixedAmountSpec,
    FreeShippingDiscount,
    FreeShippingSpec,
    InvalidParameters,
    PercentageDiscount,
    PercentageSpec,
)

TOLERANCE = Decimal("1e-20")


@pytest.mark.parametrize(
    "strategy, price, expected",
    [
        (PercentageDiscount(PercentageSpec(20)), 100, 80),
        (BogoDiscount(BogoSpec(1, 1)), 50, 625),
        (FixedAmountDiscount(FixedAmountSpec(10)), 100, 90),
        (FreeShippingDiscount(), 100, 0),
        (BtgofDiscount(), 150, 100),
    ],
)
def test_reference_scenarios(strategy, price, expected):
    assert strategy.apply(Decimal(price)) == expected


@pytest.mark.parametrize("rate", ["0", "12.5", "33", "99.99", "100"])
@pytest.mark.parametrize("price", ["0", "0.01", "19.99", "100", "12345.67"])
def test_percentage_matches_complement(rate, price):
    rate, price = Decimal(rate), Decimal(price)
    result = PercentageDiscount(PercentageSpec(rate)).apply(price)
    assert abs(result - price * (1 - rate / 100)) <= TOLERANCE


def test_percentage_keeps_cents_exact():
    assert PercentageDiscount(PercentageSpec(Decimal("15"))).apply(Decimal("19.99")) == Decimal("16.9915")


def test_fixed_amount_is_not_clamped():
    assert FixedAmountDiscount(FixedAmountSpec(10)).apply(Decimal("4.50")) == Decimal("-5.50")


def test_fixed_amount_is_exact():
    assert FixedAmountDiscount(FixedAmountSpec(Decimal("0.10"))).apply(Decimal("0.30")) == Decimal("0.20")


@pytest.mark.parametrize("price", ["0", "1", "99.99", "1000000"])
def test_free_shipping_ignores_price(price):
    assert FreeShippingDiscount().apply(Decimal(price)) == 0


@pytest.mark.parametrize("price", ["0", "1", "100", "99.99"])
def test_btgof_is_two_thirds(price):
    price = Decimal(price)
    assert abs(BtgofDiscount().apply(price) - 2 * price / 3) <= TOLERANCE


def test_bogo_splits_price_as_if_it_were_a_unit_count():
    # total 3 -> floor(10 / 3) = 3 -> 3 * 2 * 10 / 3
    assert BogoDiscount(BogoSpec(2, 1)).apply(Decimal("10")) == 20


def test_bogo_without_free_units():
    assert BogoDiscount(BogoSpec(1, 0)).apply(Decimal("7")) == 49


def test_bogo_below_bundle_size_is_zero():
    assert BogoDiscount(BogoSpec(3, 2)).apply(Decimal("4.99")) == 0


def test_int_price_is_accepted():
    assert PercentageDiscount(PercentageSpec(50)).apply(10) == 5


@pytest.mark.parametrize("price", [-1, Decimal("-0.01")])
def test_negative_price_is_rejected(price):
    with pytest.raises(InvalidParameters):
        BtgofDiscount().apply(price)


@pytest.mark.parametrize("price", [10.0, "10", None, True, Decimal("NaN")])
def test_non_money_price_is_rejected(price):
    with pytest.raises(InvalidParameters):
        FreeShippingDiscount().apply(price)


def test_strategies_do_not_change_between_calls():
    strategy = PercentageDiscount(PercentageSpec(25))
    assert strategy.apply(Decimal("8")) == strategy.apply(Decimal("8")) == 6
    assert strategy.spec == PercentageSpec(25)


@pytest.mark.parametrize(
    "strategy_type, spec",
    [
        (PercentageDiscount, BogoSpec(1, 1)),
        (PercentageDiscount, 20),
        (BogoDiscount, PercentageSpec(20)),
        (FixedAmountDiscount, Decimal("10")),
        (FreeShippingDiscount, BtgofSpec()),
        (BtgofDiscount, FreeShippingSpec()),
    ],
)
def test_strategy_rejects_spec_of_another_kind(strategy_type, spec):
    with pytest.raises(InvalidParameters):
        strategy_type(spec)

from decimal import Decimal

import pytest

from caisse.checkout import (
    CartLine,
    CheckoutService,
    Customer,
    FakerCatalog,
    FixedDiscountPolicy,
    Invoice,
    Product,
    RandomDiscountPolicy,
    RandomQuantityPicker,
    make_faker,
)
from caisse.pricing import (
    BogoSpec,
    DiscountFactory,
    DiscountKind,
    FixedAmountSpec,
    FreeShippingSpec,
    PercentageSpec,
)


def service(spec, quantity):
    return CheckoutService(DiscountFactory(), FixedDiscountPolicy(spec), lambda product: quantity)


def test_product_price_must_be_positive():
    with pytest.raises(ValueError):
        Product("P1", "Free lunch", Decimal("0"))
    with pytest.raises(ValueError):
        Product("P1", "Float", 9.99)


def test_entities_compare_by_id():
    assert Product("P1", "A", Decimal("1")) == Product("P1", "B", Decimal("2"))
    assert Customer("C1", "Ann") != Customer("C2", "Ann")
    assert Product("X", "A", Decimal("1")) != Customer("X", "A")


def test_line_scales_quantity_by_discounted_price(widget):
    line = service(PercentageSpec(50), 3).line_for(widget, 3)
    assert line.discounted_price == 5
    assert line.billed_quantity == 1
    assert line.total == Decimal("10.00")


def test_fixed_amount_line(widget):
    line = service(FixedAmountSpec(Decimal("2.50")), 4).line_for(widget, 4)
    assert line.discounted_price == Decimal("7.50")
    assert line.billed_quantity == 3
    assert line.total == Decimal("30.00")


def test_free_shipping_line_bills_nothing(widget):
    line = service(FreeShippingSpec(), 2).line_for(widget, 2)
    assert line.billed_quantity == 0
    assert line.total == 0


def test_fixed_amount_above_price_bills_negative(widget):
    line = service(FixedAmountSpec(15), 2).line_for(widget, 2)
    assert line.discounted_price == Decimal("-5.00")
    assert line.billed_quantity == -1
    assert line.total == Decimal("-10.00")


def test_bogo_line_keeps_its_quirk(widget):
    # floor(10 / 2) * 1 * 10 / 2 = 25 -> 1 * 25 / 10
    line = service(BogoSpec(1, 1), 1).line_for(widget, 1)
    assert line.discounted_price == 25
    assert line.billed_quantity == 2


def test_quantity_must_be_positive(widget):
    with pytest.raises(ValueError):
        service(PercentageSpec(10), 1).line_for(widget, 0)


def test_invoice_total(widget):
    gadget = Product("P002", "Gadget", Decimal("3.30"))
    invoice = service(PercentageSpec(0), 2).checkout(Customer("C001", "Ann"), [widget, gadget])
    assert [line.product for line in invoice.lines] == [widget, gadget]
    assert invoice.total == Decimal("26.60")


def test_empty_invoice():
    invoice = Invoice(customer=Customer("C001", "Ann"))
    assert invoice.lines == ()
    assert invoice.total == Decimal("0")


def test_line_is_immutable(widget):
    line = CartLine(widget, 1, PercentageSpec(10), Decimal("9"))
    with pytest.raises(AttributeError):
        line.quantity = 2


def test_random_policy_covers_every_kind_with_valid_parameters(widget):
    policy = RandomDiscountPolicy(make_faker(seed=3), DiscountFactory())
    specs = [policy.choose(widget) for _ in range(300)]
    assert {spec.kind for spec in specs} == set(DiscountKind)
    for spec in specs:
        if spec.kind is DiscountKind.PERCENTAGE:
            assert Decimal("1") <= spec.rate <= Decimal("50")
        elif spec.kind is DiscountKind.BOGO:
            assert 1 <= spec.buy_quantity <= 5
            assert 1 <= spec.free_quantity <= 5
        elif spec.kind is DiscountKind.FIXED_AMOUNT:
            assert Decimal("1") <= spec.amount <= Decimal("10")
            assert spec.amount == spec.amount.quantize(Decimal("0.01"))


def test_random_policy_is_reproducible(widget):
    first = RandomDiscountPolicy(make_faker(seed=11), DiscountFactory())
    second = RandomDiscountPolicy(make_faker(seed=11), DiscountFactory())
    assert [first.choose(widget) for _ in range(20)] == [second.choose(widget) for _ in range(20)]


def test_random_quantity_range(widget):
    picker = RandomQuantityPicker(make_faker(seed=5))
    assert {picker(widget) for _ in range(200)} == {1, 2, 3, 4}


def test_random_quantity_rejects_bad_range():
    with pytest.raises(ValueError):
        RandomQuantityPicker(make_faker(), low=0, high=3)
    with pytest.raises(ValueError):
        RandomQuantityPicker(make_faker(), low=4, high=3)


def test_faker_catalog():
    catalog = FakerCatalog(make_faker(seed=1))
    products = catalog.products(4)
    assert [p.id for p in products] == ["P001", "P002", "P003", "P004"]
    for product in products:
        assert product.name
        assert Decimal("1") <= product.price <= Decimal("100")
        assert product.price == product.price.quantize(Decimal("0.01"))
    customers = catalog.customers(2)
    assert [c.id for c in customers] == ["C001", "C002"]
    assert all(c.name for c in customers)


def test_faker_catalog_is_reproducible():
    names = [p.name for p in FakerCatalog(make_faker(seed=9)).products(5)]
    assert names == [p.name for p in FakerCatalog(make_faker(seed=9)).products(5)]


def test_unknown_locale():
    with pytest.raises(ValueError, match="Unknown locale"):
        make_faker("xx_XX")

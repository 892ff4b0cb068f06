"""
CLI: simulate a checkout run, price a single item, list discount kinds.
Everything goes through an Application built by create_app().
"""

import logging
from dataclasses import fields
from decimal import Decimal, InvalidOperation
from typing import List, Optional

import typer

from caisse.checkout.application import SimulateCheckout
from caisse.checkout.domain import CartLine, Invoice
from caisse.core import Settings, configure_logging
from caisse.main import create_app
from caisse.pricing.application import ApplyDiscount, ListDiscountKinds
from caisse.pricing.domain import DiscountError, DiscountKind, InvalidParameters
from caisse.pricing.infrastructure import parameter_names

app = typer.Typer(help="Caisse CLI: checkout simulation and discount pricing.", no_args_is_help=True)

logger = logging.getLogger(__name__)

_QUANTITY_PARAMS = {"buy_quantity", "free_quantity"}


def _decimal(value: str, field: str) -> Decimal:
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise InvalidParameters(f"{field}: not a number: {value!r}") from None
    if not number.is_finite():
        raise InvalidParameters(f"{field}: not a finite number: {value!r}")
    return number


def _parse_params(kind: DiscountKind, raw: List[str]) -> tuple:
    """Text from the command line to typed parameters; counts are checked by the factory."""
    names = parameter_names(kind)
    parsed: list = []
    for index, value in enumerate(raw):
        name = names[index] if index < len(names) else f"param{index + 1}"
        if name in _QUANTITY_PARAMS:
            try:
                parsed.append(int(value))
            except ValueError:
                raise InvalidParameters(f"{name}: not an integer: {value!r}") from None
        else:
            parsed.append(_decimal(value, name))
    return tuple(parsed)


def _describe(line: CartLine) -> str:
    spec = line.discount
    params = ", ".join(f"{f.name}={getattr(spec, f.name)}" for f in fields(spec))
    return f"{spec.kind.value}({params})" if params else spec.kind.value


def _render(invoice: Invoice) -> None:
    typer.echo(f"Customer: {invoice.customer.name}")
    for line in invoice.lines:
        typer.echo(
            f"  {line.quantity} x {line.product.name} @ {line.product.price:.2f}"
            f"  {_describe(line)} -> {line.discounted_price:.2f}"
            f"  billed {line.billed_quantity} = {line.total:.2f}"
        )
    typer.echo(f"Total: {invoice.total:.2f}")
    typer.echo("")


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(2)


@app.callback()
def main_options(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (default from CAISSE_LOG_LEVEL or INFO)"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Log as JSON lines (default from CAISSE_LOG_JSON)"),
) -> None:
    """Configure logging before any command runs."""
    try:
        settings = Settings.from_env(log_level=log_level, log_json=json_logs or None)
        configure_logging(settings.log_level, settings.log_json)
    except ValueError as exc:
        _fail(exc)
    ctx.obj = settings


@app.command()
def simulate(
    ctx: typer.Context,
    customers: Optional[int] = typer.Option(None, "--customers", "-c", help="Number of customers"),
    products: Optional[int] = typer.Option(None, "--products", "-p", help="Number of products in the catalog"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed for reproducible runs"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Faker locale for names"),
) -> None:
    """Generate customers and products, apply random discounts, print each invoice."""
    base: Settings = ctx.obj or Settings.from_env()
    try:
        settings = Settings(
            customers=customers if customers is not None else base.customers,
            products=products if products is not None else base.products,
            seed=seed if seed is not None else base.seed,
            locale=locale or base.locale,
            log_level=base.log_level,
            log_json=base.log_json,
        )
        application = create_app(settings)
    except ValueError as exc:
        _fail(exc)
    invoices = application.send(SimulateCheckout(customers=settings.customers, products=settings.products))
    for invoice in invoices:
        _render(invoice)
    grand_total = sum((invoice.total for invoice in invoices), Decimal("0"))
    typer.echo(f"Invoices: {len(invoices)}  Grand total: {grand_total:.2f}")


@app.command()
def price(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="Discount kind (see `caisse kinds`)"),
    amount: str = typer.Argument(..., help="Original price"),
    params: Optional[List[str]] = typer.Argument(None, help="Discount parameters, in order"),
) -> None:
    """Apply one discount to one price."""
    try:
        discount_kind = DiscountKind.parse(kind)
        command = ApplyDiscount(
            price=_decimal(amount, "price"),
            kind=discount_kind,
            params=_parse_params(discount_kind, params or []),
        )
        result = create_app(ctx.obj).send(command)
    except DiscountError as exc:
        logger.debug("pricing failed", exc_info=True)
        _fail(exc)
    typer.echo(str(result))


@app.command()
def kinds(ctx: typer.Context) -> None:
    """List discount kinds and the parameters each one takes."""
    for name, names in create_app(ctx.obj).ask(ListDiscountKinds()).items():
        typer.echo(f"{name}: {', '.join(names) if names else '-'}")


def main() -> None:
    """Entry point for the caisse console command."""
    app()


if __name__ == "__main__":
    main()

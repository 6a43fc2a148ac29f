from __future__ import annotations

import argparse
import sys
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from shipping_cost.adapters.config_store import ShippingConfigStore
from shipping_cost.adapters.event_sinks import JsonlEventSink, StdoutEventSink
from shipping_cost.app.composition_root import build_runtime
from shipping_cost.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from shipping_cost.domain.events import RuleApplied
from shipping_cost.domain.money import parse_money
from shipping_cost.domain.order import Order, Product
from shipping_cost.domain.order_date import OrderDate
from shipping_cost.domain.weight import Weight
from shipping_cost.kernel.calculator import CalculationResult
from shipping_cost.ports.country_repository import CountryRepository
from shipping_cost.ports.event_sink import EventSink

# Thin presentation layer: build an order from flags, run the calculator, print the steps.


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shipping-cost",
        description="Calculates shipping cost for an order",
        epilog=(
            "Examples: --country PL --weight 7.2 --value 100 | "
            "--country US --weight 2 --value 500 --date 2024-01-19 | "
            '--product "Laptop:2500:2.5:1" --product "Mouse:100:0.2:2"'
        ),
    )
    parser.add_argument("--config", help="Path to YAML config (defaults to the packaged config)")
    parser.add_argument("-c", "--country", default="PL", help="Delivery country code, e.g. PL, DE, US")
    parser.add_argument("-w", "--weight", default="1.0", help="Total weight in kilograms, e.g. 7.2")
    parser.add_argument("-a", "--value", default="100.00", help="Cart value, e.g. 450.00")
    parser.add_argument("-d", "--date", help="Order date, YYYY-MM-DD (defaults to today)")
    parser.add_argument(
        "-p",
        "--product",
        action="append",
        default=[],
        help='Product as "name:price:weight[:quantity]"; repeatable',
    )
    parser.add_argument("--order-id", help="Order identifier (generated when omitted)")
    parser.add_argument(
        "--events",
        choices=["none", "stdout", "jsonl"],
        default="none",
        help="Where to forward domain events",
    )
    parser.add_argument("--events-path", help="JSONL file for --events jsonl")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Caller passes argv for testability.
    return build_parser().parse_args(argv)


def parse_products(specs: Sequence[str], *, currency: str) -> list[Product]:
    products: list[Product] = []
    for index, spec in enumerate(specs, start=1):
        parts = spec.split(":")
        if len(parts) < 3 or len(parts) > 4:
            raise ValueError(f'Invalid product format: "{spec}". Expected "name:price:weight[:quantity]"')
        name, price, weight = parts[0], parts[1], parts[2]
        try:
            quantity = int(parts[3]) if len(parts) == 4 else 1
        except ValueError as exc:
            raise ValueError(f'Invalid product quantity in "{spec}"') from exc
        products.append(
            Product(
                id=f"product_{index}",
                name=name,
                price=parse_money(price, currency=currency),
                weight=Weight.from_kilograms(weight),
                quantity=quantity,
            )
        )
    return products


def build_order(args: argparse.Namespace, countries: CountryRepository, *, currency: str) -> Order:
    country = countries.find_by_code(args.country)
    if country is None:
        raise ValueError(f'Country with code "{args.country}" not found')
    order_date = OrderDate.from_string(args.date) if args.date else OrderDate.today()
    order_id = args.order_id or f"order_{uuid.uuid4().hex[:13]}"

    if args.product:
        return Order.create(order_id, parse_products(args.product, currency=currency), country, order_date)

    weight = Weight.from_kilograms(args.weight)
    value = parse_money(args.value, currency=currency)
    placeholder = Product(id="product_1", name="Order items", price=value, weight=weight)
    return Order.with_explicit_values(
        order_id,
        country=country,
        order_date=order_date,
        total_weight=weight,
        cart_value=value,
        products=[placeholder],
    )


def render(result: CalculationResult, out: TextIO) -> None:
    order = result.order
    out.write("Shipping Cost Calculator\n\n")
    out.write("Order details\n")
    _write_rows(
        out,
        [
            ("Order ID", order.id),
            ("Delivery country", f"{order.country.name} ({order.country.code})"),
            ("Total weight", order.total_weight.format()),
            ("Cart value", order.cart_value.format()),
            ("Order date", f"{order.order_date.format()} ({order.order_date.day_name})"),
            ("Products count", str(order.product_count)),
        ],
    )

    steps = [event for event in result.events if isinstance(event, RuleApplied)]
    if steps:
        out.write("\nCalculation steps\n")
        for event in steps:
            out.write(
                f"  {event.rule_name:<20} {event.cost_before.format():>12} -> "
                f"{event.cost_after.format():>12}  {event.description}\n"
            )

    out.write("\nResult\n")
    if result.is_free_shipping:
        out.write("  FREE SHIPPING!\n")
    else:
        out.write(f"  Shipping cost: {result.shipping_cost.format()}\n")
    out.write(f"  Applied rules: {' -> '.join(result.applied_rules)}\n")


def _write_rows(out: TextIO, rows: list[tuple[str, str]]) -> None:
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        out.write(f"  {label:<{width}}  {value}\n")


def _event_sink(args: argparse.Namespace, out: TextIO) -> EventSink | None:
    if args.events == "stdout":
        return StdoutEventSink(out)
    if args.events == "jsonl":
        if not args.events_path:
            raise ValueError("--events-path is required with --events jsonl")
        return JsonlEventSink(Path(args.events_path))
    return None


def run(argv: Sequence[str] | None = None, *, out: TextIO | None = None, err: TextIO | None = None) -> int:
    # Errors become a message and exit code here; the calculator itself never catches.
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    args = parse_args(argv)
    sink: EventSink | None = None
    try:
        config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
        store = ShippingConfigStore.from_config(load_config(config_path))
        sink = _event_sink(args, out)
        runtime = build_runtime(store, event_sink=sink)
        order = build_order(args, runtime.countries, currency=store.active_configuration().currency)
        result = runtime.calculator.calculate(order)
    except (ConfigError, ValueError) as exc:
        err.write(f"error: {exc}\n")
        return 1
    finally:
        if isinstance(sink, JsonlEventSink):
            sink.close()
    render(result, out)
    return 0


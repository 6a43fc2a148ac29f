from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from shipping_cost.adapters.country_repository import InMemoryCountryRepository
from shipping_cost.app.cli import build_order, parse_args, parse_products, run
from shipping_cost.domain.country import Country
from shipping_cost.main import main


def _run(argv: list[str]) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    code = run(argv, out=out, err=err)
    return code, out.getvalue(), err.getvalue()


def test_defaults() -> None:
    args = parse_args([])
    assert args.country == "PL"
    assert args.weight == "1.0"
    assert args.value == "100.00"
    assert args.events == "none"
    assert args.product == []


def test_run_prints_steps_and_result() -> None:
    code, out, err = _run(["-c", "pl", "-w", "7.2", "-a", "100", "-d", "2024-01-19", "--order-id", "o-1"])
    assert code == 0
    assert err == ""
    assert "Order ID" in out
    assert "Poland (PL)" in out
    assert "2024-01-19 (Friday)" in out
    assert "Weight surcharge: 3 excess kg(s)" in out
    assert "Shipping cost: 9.50 PLN" in out
    assert "Applied rules: base_country_rate -> weight_surcharge -> friday_promotion" in out


def test_run_reports_free_shipping() -> None:
    code, out, _ = _run(["-c", "DE", "-a", "450.00", "-d", "2024-01-15"])
    assert code == 0
    assert "FREE SHIPPING!" in out


def test_run_with_products() -> None:
    code, out, _ = _run(
        ["-c", "US", "-d", "2024-01-15", "-p", "Laptop:2500:2.5:1", "-p", "Mouse:100:0.2:2"]
    )
    assert code == 0
    assert "Products count    3" in out
    assert "Shipping cost: 25.00 PLN" in out


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["-c", "XX"], 'Country with code "XX" not found'),
        (["-d", "19.01.2024"], "Invalid date format"),
        (["-a", "abc"], "abc"),
        (["-p", "Laptop:2500"], "Invalid product format"),
        (["--events", "jsonl"], "--events-path is required"),
    ],
)
def test_run_reports_input_errors(argv: list[str], message: str) -> None:
    code, out, err = _run(argv)
    assert code == 1
    assert out == ""
    assert err.startswith("error: ")
    assert message in err


def test_run_reports_config_errors(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("version: 1\n", encoding="utf-8")
    code, _, err = _run(["--config", str(path)])
    assert code == 1
    assert "configurations" in err


def test_run_writes_jsonl_events(tmp_path: Path) -> None:
    path = tmp_path / "events.jsonl"
    code, _, _ = _run(["-c", "PL", "-d", "2024-01-15", "--events", "jsonl", "--events-path", str(path)])
    assert code == 0
    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [record["type"] for record in records] == ["rule_applied", "calculation_completed"]


def test_run_streams_events_to_stdout() -> None:
    code, out, _ = _run(["-c", "PL", "-d", "2024-01-15", "--events", "stdout"])
    assert code == 0
    first_line = out.splitlines()[0]
    assert json.loads(first_line)["rule"] == "base_country_rate"


def test_parse_products_defaults_quantity_and_rejects_bad_quantity() -> None:
    (product,) = parse_products(["Mouse:100:0.2"], currency="PLN")
    assert product.quantity == 1
    assert product.weight.grams == 200
    with pytest.raises(ValueError, match="quantity"):
        parse_products(["Mouse:100:0.2:many"], currency="PLN")


def test_build_order_without_products_uses_explicit_totals() -> None:
    countries = InMemoryCountryRepository.from_countries([Country.create("PL", "Poland")])
    args = parse_args(["-w", "7.2", "-a", "123.45", "-d", "2024-01-15", "--order-id", "o-9"])
    order = build_order(args, countries, currency="PLN")
    assert order.id == "o-9"
    assert order.total_weight.grams == 7200
    assert order.cart_value.cents == 12345
    assert order.product_count == 1


def test_main_delegates_to_run(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-c", "FR", "-d", "2024-01-15"]) == 0
    assert "Shipping cost: 39.99 PLN" in capsys.readouterr().out


def test_run_fails_when_base_rate_is_disabled(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(
        "\n".join(
            [
                "version: 1",
                "countries:",
                "  - {code: PL, name: Poland}",
                "configurations:",
                "  - id: 1",
                "    name: broken",
                "    active: true",
                "    rules:",
                "      base_rate: {enabled: false, default_amount: '39.99'}",
                "      weight_surcharge: {limit_kg: '5.0', surcharge_per_kg: '3.00'}",
                "      free_shipping: {threshold: '400.00', countries: [PL]}",
                "      half_price_shipping: {threshold: '400.00', discount_percent: 50, countries: []}",
                "      friday_promotion: {discount_percent: 50}",
            ]
        ),
        encoding="utf-8",
    )
    code, out, err = _run(["--config", str(path), "-c", "PL", "-d", "2024-01-15"])
    assert code == 1
    assert "FREE SHIPPING!" not in out
    assert "Base rate configuration not found" in err

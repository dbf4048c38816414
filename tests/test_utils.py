from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.core.security import Role, normalize_role
from app.schemas.order import OrderItemCreate
from app.utils.money import tax_breakdown, to_money
from app.utils.seats import parse_seat_label


@pytest.mark.parametrize(
    "total,subtotal,tax",
    [
        ("85", "73.28", "11.72"),
        ("116", "100.00", "16.00"),
        ("0.01", "0.01", "0.00"),
        ("0", "0.00", "0.00"),
        ("250.50", "215.95", "34.55"),
    ],
)
def test_tax_breakdown(total, subtotal, tax):
    breakdown = tax_breakdown(Decimal(total), Decimal("0.16"))

    assert breakdown.subtotal == Decimal(subtotal)
    assert breakdown.tax == Decimal(tax)
    assert breakdown.subtotal + breakdown.tax == breakdown.total


def test_to_money_rounds_half_up():
    assert to_money("2.675") == Decimal("2.68")
    assert to_money(0.1 + 0.2) == Decimal("0.30")


@pytest.mark.parametrize(
    "label,expected", [("B7", ("B", 7)), ("a10", ("A", 10)), (" J 12 ", ("J", 12))]
)
def test_parse_seat_label(label, expected):
    assert parse_seat_label(label) == expected


@pytest.mark.parametrize("label", ["", "7B", "B", "B-7"])
def test_parse_seat_label_rejects_garbage(label):
    with pytest.raises(ValueError):
        parse_seat_label(label)


@pytest.mark.parametrize(
    "raw,role",
    [
        ("admin", Role.ADMIN),
        ("administrador", Role.ADMIN),
        (" Administrador ", Role.ADMIN),
        ("customer", Role.CUSTOMER),
        ("cliente", Role.CUSTOMER),
        ("superuser", Role.CUSTOMER),
        ("", Role.CUSTOMER),
        (None, Role.CUSTOMER),
    ],
)
def test_normalize_role(raw, role):
    assert normalize_role(raw) is role


# ---------------------------------------------------------------------------
# Order item validation
# ---------------------------------------------------------------------------


def test_ticket_item_accepts_seat_label_and_computes_subtotal():
    item = OrderItemCreate(type="ticket", showtime_id=5, seat="b7", unit_price="85")

    assert (item.seat_row, item.seat_number) == ("B", 7)
    assert item.subtotal == Decimal("85.00")


def test_product_subtotal_is_unit_price_times_quantity():
    item = OrderItemCreate(type="product", product_id=1, quantity=3, unit_price="45.50")

    assert item.subtotal == Decimal("136.50")


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "ticket", "showtime_id": 5, "unit_price": "85"},
        {"type": "ticket", "showtime_id": 5, "seat": "A1", "quantity": 2, "unit_price": "85"},
        {"type": "ticket", "showtime_id": 5, "seat": "A1", "product_id": 1, "unit_price": "85"},
        {"type": "product", "quantity": 1, "unit_price": "10"},
        {"type": "product", "product_id": 1, "showtime_id": 5, "unit_price": "10"},
        {"type": "product", "product_id": 1, "quantity": 2, "unit_price": "10", "subtotal": "15"},
        {"type": "product", "product_id": 1, "quantity": 0, "unit_price": "10"},
        {"type": "combo", "product_id": 1, "unit_price": "10"},
    ],
)
def test_malformed_items_are_rejected(payload):
    with pytest.raises(ValidationError):
        OrderItemCreate(**payload)

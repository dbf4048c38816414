"""Checkout coordinator: tax split, folio, all-or-nothing commit."""

from decimal import Decimal

import pytest

from app.core.errors import FolioConflictError, InvalidInputError, SeatConflictError
from app.models.order import Order
from app.schemas.checkout import CheckoutRequest
from app.services import checkout as checkout_service
from app.services.checkout import CheckoutCoordinator


@pytest.fixture
def coordinator(ledger, settings):
    return CheckoutCoordinator.from_settings(ledger, settings)


def cart(showtime_id, seats=("A1",), price="85", **extra):
    return CheckoutRequest(
        customer_name="Ana",
        customer_email="ana@x.com",
        items=[
            {"type": "ticket", "showtime_id": showtime_id, "seat": seat, "unit_price": price}
            for seat in seats
        ],
        **extra,
    )


def test_checkout_splits_tax_out_of_the_total(coordinator, make_showtime):
    showtime_id = make_showtime()

    result = coordinator.checkout(cart(showtime_id))

    assert result.total == Decimal("85.00")
    assert result.subtotal == Decimal("73.28")
    assert result.tax == Decimal("11.72")
    assert result.subtotal + result.tax == result.total


def test_checkout_persists_folio_and_breakdown(coordinator, ledger, make_showtime):
    showtime_id = make_showtime()

    result = coordinator.checkout(cart(showtime_id, seats=("B1", "B2")))

    assert result.folio.startswith("STAR-")
    assert result.qr_url.endswith(f"folio={result.folio}")
    order = ledger.get_order_by_folio(result.folio)
    assert order.id == result.order_id
    assert order.total == Decimal("170.00")
    assert order.subtotal == result.subtotal
    assert order.tax == result.tax
    assert len(order.items) == 2


def test_checkout_sells_the_seats(coordinator, seat_store, make_showtime):
    showtime_id = make_showtime()

    coordinator.checkout(cart(showtime_id, seats=("J12",)))

    statuses = {(s.row, s.number): s.status for s in seat_store.get_seats(showtime_id)}
    assert statuses[("J", 12)] == "sold"


def test_folios_are_unique(coordinator, make_showtime):
    showtime_id = make_showtime()

    first = coordinator.checkout(cart(showtime_id, seats=("A1",)))
    second = coordinator.checkout(cart(showtime_id, seats=("A2",)))

    assert first.folio != second.folio


def test_matching_client_total_is_accepted(coordinator, make_showtime):
    showtime_id = make_showtime()

    result = coordinator.checkout(cart(showtime_id, seats=("A1", "A2"), total=Decimal("170")))

    assert result.total == Decimal("170.00")


def test_mismatched_client_total_is_rejected(coordinator, make_showtime, db):
    showtime_id = make_showtime()

    with pytest.raises(InvalidInputError):
        coordinator.checkout(cart(showtime_id, total=Decimal("197.20")))
    assert db.query(Order).count() == 0


def test_empty_cart_is_rejected(coordinator):
    with pytest.raises(InvalidInputError):
        coordinator.checkout(CheckoutRequest(customer_name="Ana", customer_email="ana@x.com", items=[]))


def test_sold_seat_fails_the_whole_checkout(coordinator, make_showtime, db):
    showtime_id = make_showtime()
    coordinator.checkout(cart(showtime_id, seats=("C1",)))

    with pytest.raises(SeatConflictError):
        coordinator.checkout(cart(showtime_id, seats=("C2", "C1")))
    assert db.query(Order).count() == 1


def test_taken_folio_is_retried_with_a_new_one(coordinator, make_showtime, monkeypatch, db):
    showtime_id = make_showtime()
    folios = iter(["STAR-1", "STAR-1", "STAR-2"])
    monkeypatch.setattr(checkout_service, "generate_folio", lambda db, prefix: next(folios))

    first = coordinator.checkout(cart(showtime_id, seats=("A1",)))
    second = coordinator.checkout(cart(showtime_id, seats=("A2",)))

    assert (first.folio, second.folio) == ("STAR-1", "STAR-2")
    assert db.query(Order).count() == 2


def test_folio_retries_are_bounded(coordinator, make_showtime, monkeypatch, db):
    showtime_id = make_showtime()
    monkeypatch.setattr(checkout_service, "generate_folio", lambda db, prefix: "STAR-1")
    coordinator.checkout(cart(showtime_id, seats=("A1",)))

    with pytest.raises(FolioConflictError):
        coordinator.checkout(cart(showtime_id, seats=("A2",)))
    assert db.query(Order).count() == 1

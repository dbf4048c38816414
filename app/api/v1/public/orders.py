from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import EmailStr

from app.api.deps import get_checkout, get_order_ledger, get_settings
from app.core.config import Settings
from app.schemas.checkout import CheckoutRequest, CheckoutResponse
from app.schemas.order import Order as OrderSchema, OrderCreate, OrderCreateResponse, TicketLine
from app.services.checkout import CheckoutCoordinator
from app.services.order_ledger import OrderLedger
from app.utils.receipt import qr_png, receipt_url

router = APIRouter(prefix="/orders", tags=["Orders"])
checkout_router = APIRouter(prefix="/checkout", tags=["Orders"])


# ---------------------------------------------------------------------------
# POST /orders: record an order and sell its ticket seats
# ---------------------------------------------------------------------------


@router.post("/", response_model=OrderCreateResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    data: OrderCreate,
    ledger: OrderLedger = Depends(get_order_ledger),
):
    order = ledger.create_order(data.customer_name, data.customer_email, data.items)
    return OrderCreateResponse(order_id=order.id, total=order.total)


@router.get("/", response_model=List[OrderSchema])
def list_orders_by_email(
    email: EmailStr = Query(..., description="Customer email"),
    ledger: OrderLedger = Depends(get_order_ledger),
):
    """Orders placed with this email, newest first, with their items."""
    return ledger.get_orders_by_email(email)


@router.get("/tickets", response_model=List[TicketLine])
def list_tickets_by_email(
    email: EmailStr = Query(..., description="Customer email"),
    ledger: OrderLedger = Depends(get_order_ledger),
):
    return ledger.get_tickets_by_email(email)


# ---------------------------------------------------------------------------
# Receipts
# ---------------------------------------------------------------------------


@router.get("/folio/{folio}", response_model=OrderSchema)
def get_order_by_folio(
    folio: str,
    ledger: OrderLedger = Depends(get_order_ledger),
):
    return ledger.get_order_by_folio(folio)


@router.get(
    "/folio/{folio}/qr.png",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
def get_receipt_qr(
    folio: str,
    ledger: OrderLedger = Depends(get_order_ledger),
    settings: Settings = Depends(get_settings),
):
    """QR code pointing at the public ticket page for this folio."""
    order = ledger.get_order_by_folio(folio)
    png = qr_png(receipt_url(settings.PUBLIC_BASE_URL, order.folio))
    return Response(content=png, media_type="image/png")


# ---------------------------------------------------------------------------
# POST /checkout: cart to order + folio
# ---------------------------------------------------------------------------


@checkout_router.post("/", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED)
def checkout(
    cart: CheckoutRequest,
    coordinator: CheckoutCoordinator = Depends(get_checkout),
):
    """
    Confirm the cart as one order.

    Ticket seats are sold and product stock is taken in the same transaction
    as the order itself. Prices are tax inclusive; the response splits the
    total into subtotal and 16% tax and carries the folio printed on the
    receipt.
    """
    return coordinator.checkout(cart)

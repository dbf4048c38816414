import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.core.errors import (
    FolioConflictError,
    InvalidInputError,
    InvalidSeatError,
    NotFoundError,
    OutOfStockError,
)
from app.db.unit_of_work import atomic
from app.models.order import ItemType, Order, OrderItem
from app.models.product import Product
from app.models.seat import SeatStatus
from app.schemas.order import OrderItemCreate, TicketLine
from app.schemas.seat import SeatRef
from app.services.seat_grid import SeatGridStore
from app.utils.money import sum_money, to_money
from app.utils.seats import seat_label

logger = logging.getLogger(__name__)

# A seat can be bought while free or while held by a reservation, never twice
SELLABLE_FROM = (SeatStatus.AVAILABLE.value, SeatStatus.RESERVED.value)


class OrderLedger:
    def __init__(self, db: Session, seats: SeatGridStore):
        self.db = db
        self.seats = seats

    def create_order(
        self,
        customer_name: str,
        customer_email: str,
        items: Sequence[OrderItemCreate],
        folio: Optional[str] = None,
        subtotal: Optional[Decimal] = None,
        tax: Optional[Decimal] = None,
    ) -> Order:
        """
        Persist an order, its items and the sale of its ticket seats.

        Everything happens in one transaction: the order row, every item row,
        the stock decrement of product items and the ``sold`` transition of
        every ticket seat. Any failure leaves nothing behind.
        """
        customer_name = (customer_name or "").strip()
        customer_email = (customer_email or "").strip()
        if not customer_name or not customer_email:
            raise InvalidInputError("customer_name and customer_email are required")
        if not items:
            raise InvalidInputError("An order needs at least one item")

        tickets: Dict[int, List[SeatRef]] = {}
        for item in items:
            if item.type != ItemType.TICKET:
                continue
            refs = tickets.setdefault(item.showtime_id, [])
            try:
                ref = SeatRef(row=item.seat_row, number=item.seat_number)
            except ValidationError:
                raise InvalidSeatError(
                    f"Malformed seat reference {item.seat_row!r}{item.seat_number}"
                )
            if ref in refs:
                raise InvalidInputError(
                    f"Seat {seat_label(ref.row, ref.number)} appears more than once in the order"
                )
            refs.append(ref)

        total = sum_money(item.subtotal for item in items)

        with atomic(self.db):
            order = Order(
                customer_name=customer_name,
                customer_email=customer_email,
                total=total,
                subtotal=subtotal,
                tax=tax,
                folio=folio,
            )
            self.db.add(order)
            try:
                self.db.flush()  # get order.id
            except IntegrityError:
                # folio is the only unique column an insert can collide on
                raise FolioConflictError(f"Folio {folio} is already in use")

            for item in items:
                if item.type == ItemType.PRODUCT:
                    self._take_stock(item.product_id, item.quantity)
                self.db.add(OrderItem(
                    order_id=order.id,
                    item_type=item.type.value,
                    showtime_id=item.showtime_id,
                    seat_row=item.seat_row,
                    seat_number=item.seat_number,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=to_money(item.unit_price),
                    subtotal=to_money(item.subtotal),
                ))

            for showtime_id, refs in tickets.items():
                self.seats.stage_status(
                    showtime_id, refs, SeatStatus.SOLD.value, allowed_from=SELLABLE_FROM
                )

        self.db.refresh(order)
        logger.info(
            "Order %s created for %s: %d item(s), total %s",
            order.id, customer_email, len(items), order.total,
        )
        return order

    def _take_stock(self, product_id: int, quantity: int) -> None:
        product = (
            self.db.query(Product)
            .filter(Product.id == product_id, Product.is_active == True)
            .with_for_update()
            .first()
        )
        if not product:
            raise NotFoundError(f"Product {product_id} not found")
        if product.stock < quantity:
            raise OutOfStockError(
                f"Only {product.stock} unit(s) of {product.name} left, {quantity} requested"
            )
        product.stock -= quantity

    def _orders_query(self):
        return self.db.query(Order).options(selectinload(Order.items))

    def get_orders_by_email(self, email: str) -> List[Order]:
        """All orders placed with this email, newest first."""
        return (
            self._orders_query()
            .filter(func.lower(Order.customer_email) == (email or "").strip().lower())
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all()
        )

    def get_order_by_folio(self, folio: str) -> Order:
        order = self._orders_query().filter(Order.folio == folio).first()
        if not order:
            raise NotFoundError(f"No order with folio {folio}")
        return order

    def get_tickets_by_email(self, email: str) -> List[TicketLine]:
        rows = (
            self.db.query(OrderItem, Order)
            .join(Order, Order.id == OrderItem.order_id)
            .filter(
                func.lower(Order.customer_email) == (email or "").strip().lower(),
                OrderItem.item_type == ItemType.TICKET.value,
            )
            .order_by(Order.created_at.desc(), Order.id.desc(), OrderItem.id)
            .all()
        )
        return [
            TicketLine(
                order_id=order.id,
                folio=order.folio,
                showtime_id=item.showtime_id,
                seat_row=item.seat_row,
                seat_number=item.seat_number,
                unit_price=item.unit_price,
                created_at=order.created_at,
            )
            for item, order in rows
        ]

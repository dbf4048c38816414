from typing import List, Optional
from decimal import Decimal
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, model_validator

from app.models.order import ItemType
from app.utils.money import to_money
from app.utils.seats import parse_seat_label


# Order item: Create (one cart line)
class OrderItemCreate(BaseModel):
    type: ItemType
    showtime_id: Optional[int] = None
    seat_row: Optional[str] = None
    seat_number: Optional[int] = None
    seat: Optional[str] = None  # "B7", alternative to seat_row + seat_number
    product_id: Optional[int] = None
    quantity: int = Field(1, ge=1)
    unit_price: Decimal = Field(ge=0)
    subtotal: Optional[Decimal] = None

    @model_validator(mode="after")
    def check_kind(self):
        if self.type == ItemType.TICKET:
            if self.seat and self.seat_row is None and self.seat_number is None:
                self.seat_row, self.seat_number = parse_seat_label(self.seat)
            if self.showtime_id is None or not self.seat_row or self.seat_number is None:
                raise ValueError("ticket items need showtime_id and a seat")
            if self.product_id is not None:
                raise ValueError("ticket items cannot reference a product")
            if self.quantity != 1:
                raise ValueError("ticket items always have quantity 1")
            self.seat_row = self.seat_row.strip().upper()
        else:
            if self.product_id is None:
                raise ValueError("product items need product_id")
            if self.showtime_id is not None or self.seat_row or self.seat_number is not None:
                raise ValueError("product items cannot reference a seat")

        expected = to_money(self.unit_price * self.quantity)
        if self.subtotal is None:
            self.subtotal = expected
        elif to_money(self.subtotal) != expected:
            raise ValueError(f"subtotal {self.subtotal} does not match unit_price x quantity ({expected})")
        return self


# Order: Create (POST /orders)
class OrderCreate(BaseModel):
    customer_name: str = Field(min_length=1)
    customer_email: EmailStr
    items: List[OrderItemCreate] = []


class OrderCreateResponse(BaseModel):
    ok: bool = True
    order_id: int
    total: Decimal


class OrderItem(BaseModel):
    id: int
    type: str = Field(validation_alias="item_type")
    showtime_id: Optional[int] = None
    seat_row: Optional[str] = None
    seat_number: Optional[int] = None
    product_id: Optional[int] = None
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    class Config:
        from_attributes = True


# Order: Full response (GET /orders, GET /orders/folio/{folio})
class Order(BaseModel):
    id: int
    customer_name: str
    customer_email: str
    total: Decimal
    subtotal: Optional[Decimal] = None
    tax: Optional[Decimal] = None
    folio: Optional[str] = None
    created_at: Optional[datetime] = None
    items: List[OrderItem] = []

    class Config:
        from_attributes = True


# Ticket line joined to its order (GET /orders/tickets)
class TicketLine(BaseModel):
    order_id: int
    folio: Optional[str] = None
    showtime_id: int
    seat_row: str
    seat_number: int
    unit_price: Decimal
    created_at: Optional[datetime] = None

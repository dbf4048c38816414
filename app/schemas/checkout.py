from typing import List, Optional
from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field

from app.schemas.order import OrderItemCreate


class CheckoutRequest(BaseModel):
    customer_name: str = Field(min_length=1)
    customer_email: EmailStr
    items: List[OrderItemCreate] = []
    # Optional client-side total; must match the sum of the items
    total: Optional[Decimal] = None


class CheckoutResponse(BaseModel):
    ok: bool = True
    order_id: int
    folio: str
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    qr_url: str

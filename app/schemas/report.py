from typing import List, Optional
from decimal import Decimal
from datetime import date
from pydantic import BaseModel


class ProductReportRow(BaseModel):
    id: int
    sku: str
    name: str
    category: Optional[str] = None
    price: Decimal
    stock: int
    inventory_value: Decimal


class ProductReport(BaseModel):
    total_products: int
    total_stock: int
    inventory_value: Decimal
    products: List[ProductReportRow]


class SalesReport(BaseModel):
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    total_orders: int
    tickets_sold: int
    products_sold: int
    ticket_revenue: Decimal
    product_revenue: Decimal
    total_revenue: Decimal

from datetime import date, datetime, time, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.order import ItemType, Order, OrderItem
from app.models.product import Product
from app.schemas.report import ProductReport, ProductReportRow, SalesReport
from app.utils.money import to_money

router = APIRouter(prefix="/admin/reports", tags=["Admin - Reports"])


@router.get("/products", response_model=ProductReport)
def product_report(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """
    Concession inventory: every active product with its stock and the value
    of that stock at the current price, plus the totals across all products.
    """
    products = (
        db.query(Product)
        .options(joinedload(Product.category))
        .filter(Product.is_active == True)
        .order_by(Product.name)
        .all()
    )

    rows = [
        ProductReportRow(
            id=p.id,
            sku=p.sku,
            name=p.name,
            category=p.category.name if p.category else None,
            price=p.price,
            stock=p.stock,
            inventory_value=to_money(p.price * p.stock),
        )
        for p in products
    ]

    return ProductReport(
        total_products=len(rows),
        total_stock=sum(r.stock for r in rows),
        inventory_value=to_money(sum((r.inventory_value for r in rows), 0)),
        products=rows,
    )


@router.get("/sales", response_model=SalesReport)
def sales_report(
    date_from: Optional[date] = Query(None, description="Start date (YYYY-MM-DD)"),
    date_to: Optional[date] = Query(None, description="End date (YYYY-MM-DD), inclusive"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Tickets and concessions sold, and the revenue of each, over a date range."""
    if date_from and date_to and date_from > date_to:
        raise HTTPException(status_code=400, detail="date_from must not be after date_to")

    filters = []
    if date_from:
        filters.append(Order.created_at >= datetime.combine(date_from, time.min))
    if date_to:
        filters.append(Order.created_at < datetime.combine(date_to + timedelta(days=1), time.min))

    total_orders = db.query(func.count(Order.id)).filter(*filters).scalar()

    lines = {
        r.item_type: r
        for r in (
            db.query(OrderItem)
            .join(Order, Order.id == OrderItem.order_id)
            .with_entities(
                OrderItem.item_type.label("item_type"),
                func.coalesce(func.sum(OrderItem.quantity), 0).label("units"),
                func.coalesce(func.sum(OrderItem.subtotal), 0).label("revenue"),
            )
            .filter(*filters)
            .group_by(OrderItem.item_type)
            .all()
        )
    }

    tickets = lines.get(ItemType.TICKET.value)
    products = lines.get(ItemType.PRODUCT.value)
    ticket_revenue = to_money(tickets.revenue if tickets else 0)
    product_revenue = to_money(products.revenue if products else 0)

    return SalesReport(
        date_from=date_from,
        date_to=date_to,
        total_orders=total_orders,
        tickets_sold=tickets.units if tickets else 0,
        products_sold=products.units if products else 0,
        ticket_revenue=ticket_revenue,
        product_revenue=product_revenue,
        total_revenue=ticket_revenue + product_revenue,
    )

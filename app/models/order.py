import enum
from sqlalchemy import Column, String, DateTime, func, DECIMAL, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.session import Base

class ItemType(str, enum.Enum):
    TICKET = "ticket"
    PRODUCT = "product"

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255), nullable=False, index=True)
    total = Column(DECIMAL(10, 2), nullable=False)
    # Set only for orders placed through checkout
    subtotal = Column(DECIMAL(10, 2), nullable=True)
    tax = Column(DECIMAL(10, 2), nullable=True)
    folio = Column(String(40), unique=True, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    items = relationship("OrderItem", back_populates="order", order_by="OrderItem.id")

class OrderItem(Base):
    __tablename__ = "order_items"
    __table_args__ = (
        CheckConstraint(
            "(item_type = 'ticket' AND showtime_id IS NOT NULL AND seat_row IS NOT NULL "
            "AND seat_number IS NOT NULL AND product_id IS NULL) OR "
            "(item_type = 'product' AND product_id IS NOT NULL AND showtime_id IS NULL)",
            name="ck_order_item_kind",
        ),
    )

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    item_type = Column(String(10), nullable=False) # ticket, product
    showtime_id = Column(Integer, ForeignKey("showtimes.id"), nullable=True, index=True)
    seat_row = Column(String(5), nullable=True)
    seat_number = Column(Integer, nullable=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(DECIMAL(10, 2), nullable=False)
    subtotal = Column(DECIMAL(10, 2), nullable=False)

    order = relationship("Order", back_populates="items")
    showtime = relationship("Showtime")
    product = relationship("Product")

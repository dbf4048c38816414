import enum
from sqlalchemy import Column, String, Integer, ForeignKey, DateTime, UniqueConstraint, func
from sqlalchemy.orm import relationship
from app.db.session import Base

class SeatStatus(str, enum.Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"

class Seat(Base):
    __tablename__ = "seats"
    __table_args__ = (
        UniqueConstraint("showtime_id", "row_label", "seat_number", name="uq_seat_showtime_row_number"),
    )

    id = Column(Integer, primary_key=True)
    showtime_id = Column(Integer, ForeignKey("showtimes.id"), nullable=False, index=True)
    row_label = Column(String(5), nullable=False)
    seat_number = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default=SeatStatus.AVAILABLE.value) # available, reserved, sold
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    showtime = relationship("Showtime", back_populates="seats")

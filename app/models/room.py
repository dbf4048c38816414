from sqlalchemy import Column, String, Boolean, Integer
from sqlalchemy.orm import relationship
from app.db.session import Base

class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    capacity = Column(Integer, nullable=False)
    type = Column(String(20), nullable=False, default="2D") # 2D, 3D, VIP
    is_active = Column(Boolean, default=True)

    showtimes = relationship("Showtime", back_populates="room")

    @property
    def is_vip(self) -> bool:
        return (self.type or "").strip().lower() == "vip"

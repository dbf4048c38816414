from sqlalchemy import Column, Date, Time, Integer, DECIMAL, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from app.db.session import Base

class Showtime(Base):
    __tablename__ = "showtimes"

    id = Column(Integer, primary_key=True)
    movie_id = Column(Integer, ForeignKey("movies.id"), nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)
    show_date = Column(Date, nullable=False, index=True)
    show_time = Column(Time, nullable=False)
    price = Column(DECIMAL(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    movie = relationship("Movie", back_populates="showtimes")
    room = relationship("Room", back_populates="showtimes")
    seats = relationship("Seat", back_populates="showtime")

    @property
    def room_name(self):
        return self.room.name if self.room else None

    @property
    def room_type(self):
        return self.room.type if self.room else None

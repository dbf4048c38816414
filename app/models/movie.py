from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, func
from sqlalchemy.orm import relationship
from app.db.session import Base

class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=False) # minutes
    rating = Column(String(10), nullable=True) # A, B, B15, C...
    genre = Column(String(100), nullable=True)
    image = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    format = Column(String(5), nullable=False, default="2D") # 2D, 3D
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    showtimes = relationship("Showtime", back_populates="movie")

from typing import List, Literal
from pydantic import BaseModel, Field, field_validator


class SeatRef(BaseModel):
    row: str = Field(min_length=1, max_length=5)
    number: int

    @field_validator("row")
    @classmethod
    def normalize_row(cls, v: str) -> str:
        return v.strip().upper()


# --- Seat grid (seat selection screen) ---

class SeatState(BaseModel):
    row: str
    number: int
    status: str  # available, reserved, sold


# --- Seat status write (POST /showtimes/{id}/seats) ---

class SeatStatusUpdate(BaseModel):
    seats: List[SeatRef]
    status: Literal["reserved", "sold"] = "reserved"


class SeatStatusUpdateResponse(BaseModel):
    ok: bool = True
    showtime_id: int
    status: str
    seats: List[SeatState]

from typing import List
from pydantic import BaseModel


# Error responses
class ErrorResponse(BaseModel):
    error: str
    message: str


class SeatConflictErrorResponse(ErrorResponse):
    unavailable_seats: List[str]

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_seat_store
from app.schemas.seat import SeatState, SeatStatusUpdate, SeatStatusUpdateResponse
from app.services.seat_grid import SeatGridStore

router = APIRouter(prefix="/showtimes", tags=["Seats"])


@router.get("/{showtime_id}/seats", response_model=List[SeatState])
def get_seats(
    showtime_id: int,
    store: SeatGridStore = Depends(get_seat_store),
):
    """
    Seat grid for a showtime, row by row.
    Seats that were never reserved or sold are reported as available.
    """
    return store.get_seats(showtime_id)


@router.post("/{showtime_id}/seats", response_model=SeatStatusUpdateResponse)
def set_seat_status(
    showtime_id: int,
    body: SeatStatusUpdate,
    store: SeatGridStore = Depends(get_seat_store),
):
    """
    Reserve or sell a set of seats, all or nothing.
    - `reserved`: held, not paid.
    - `sold`: purchased. A sold seat cannot be moved back to reserved.
    """
    changed = store.set_seat_status(showtime_id, body.seats, body.status)
    return SeatStatusUpdateResponse(showtime_id=showtime_id, status=body.status, seats=changed)

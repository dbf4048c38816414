"""
Seat grid store: the status of every seat of every showtime.

Seats are materialized lazily. A showtime with no seat rows is the default
grid with every seat available; a row is written the first time a seat is
reserved or sold and is never deleted afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Collection, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.core.config import Settings
from app.core.errors import InvalidInputError, InvalidSeatError, NotFoundError, SeatConflictError
from app.db.unit_of_work import atomic
from app.models.seat import Seat, SeatStatus
from app.models.showtime import Showtime
from app.schemas.seat import SeatRef, SeatState
from app.utils.seats import seat_label

logger = logging.getLogger(__name__)

SeatKey = Tuple[str, int]


@dataclass(frozen=True)
class SeatLayout:
    rows: Tuple[str, ...]
    seats_per_row: int
    vip_rows: Tuple[str, ...] = ()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SeatLayout":
        return cls(
            rows=tuple(r.upper() for r in settings.SEAT_ROWS),
            seats_per_row=settings.SEATS_PER_ROW,
            vip_rows=tuple(r.upper() for r in settings.VIP_ROWS),
        )

    @property
    def size(self) -> int:
        return len(self.rows) * self.seats_per_row

    def keys(self) -> Iterable[SeatKey]:
        for row in self.rows:
            for number in range(1, self.seats_per_row + 1):
                yield row, number

    def check(self, row: str, number: int, vip_only: bool = False) -> None:
        if row not in self.rows or not 1 <= number <= self.seats_per_row:
            raise InvalidSeatError(f"Seat {seat_label(row, number)} does not exist in this room")
        if vip_only and row not in self.vip_rows:
            raise InvalidSeatError(
                f"Seat {seat_label(row, number)} is not in a VIP row ({', '.join(self.vip_rows)})"
            )


class SeatGridStore:
    def __init__(self, db: Session, layout: SeatLayout):
        self.db = db
        self.layout = layout

    def _get_showtime(self, showtime_id: int) -> Showtime:
        showtime = (
            self.db.query(Showtime)
            .options(joinedload(Showtime.room))
            .filter(Showtime.id == showtime_id)
            .first()
        )
        if not showtime:
            raise NotFoundError(f"Showtime {showtime_id} not found")
        return showtime

    def _persisted(self, showtime_id: int, for_update: bool = False) -> Dict[SeatKey, Seat]:
        query = self.db.query(Seat).filter(Seat.showtime_id == showtime_id)
        if for_update:
            query = query.with_for_update()
        return {(s.row_label, s.seat_number): s for s in query.all()}

    def get_seats(self, showtime_id: int) -> List[SeatState]:
        """Full grid for a showtime, persisted statuses overlaid on the default layout."""
        self._get_showtime(showtime_id)
        persisted = self._persisted(showtime_id)
        return [
            SeatState(
                row=row,
                number=number,
                status=persisted[(row, number)].status
                if (row, number) in persisted
                else SeatStatus.AVAILABLE.value,
            )
            for row, number in self.layout.keys()
        ]

    def set_seat_status(
        self, showtime_id: int, seats: Iterable[SeatRef], status: str
    ) -> List[SeatState]:
        """
        Move every named seat to ``status`` in a single transaction.

        All seats transition or none do. A sold seat can be written as sold
        again (no-op) but never moved back to reserved.
        """
        with atomic(self.db):
            changed = self.stage_status(showtime_id, seats, status)
        return [SeatState(row=s.row_label, number=s.seat_number, status=s.status) for s in changed]

    def stage_status(
        self,
        showtime_id: int,
        seats: Iterable[SeatRef],
        status: str,
        allowed_from: Optional[Collection[str]] = None,
    ) -> List[Seat]:
        """
        Write seat statuses into the current transaction without committing.

        ``allowed_from`` turns the upsert into a conditional write: every seat's
        current status must be one of these values, otherwise the whole batch
        is rejected with SeatConflictError.
        """
        try:
            target = SeatStatus(status).value
        except ValueError:
            raise InvalidInputError(f"Unknown seat status '{status}'")
        if target == SeatStatus.AVAILABLE.value:
            raise InvalidInputError("Seats can only be reserved or sold")

        showtime = self._get_showtime(showtime_id)
        vip_only = bool(showtime.room and showtime.room.is_vip)

        keys: List[SeatKey] = []
        for ref in seats:
            key = (ref.row, ref.number)
            self.layout.check(*key, vip_only=vip_only)
            if key not in keys:
                keys.append(key)
        if not keys:
            raise InvalidInputError("At least one seat is required")

        persisted = self._persisted(showtime_id, for_update=True)

        conflicts = []
        for key in keys:
            seat = persisted.get(key)
            current = seat.status if seat else SeatStatus.AVAILABLE.value
            if allowed_from is not None and current not in allowed_from:
                conflicts.append(seat_label(*key))
            elif current == SeatStatus.SOLD.value and target != SeatStatus.SOLD.value:
                conflicts.append(seat_label(*key))
        if conflicts:
            logger.warning(
                "Rejected %s for showtime %s, seats unavailable: %s",
                target, showtime_id, ", ".join(conflicts),
            )
            raise SeatConflictError(
                f"Seats no longer available: {', '.join(conflicts)}", seats=conflicts
            )

        changed = []
        for row, number in keys:
            seat = persisted.get((row, number))
            if seat is None:
                seat = Seat(showtime_id=showtime_id, row_label=row, seat_number=number, status=target)
                self.db.add(seat)
            else:
                seat.status = target
            changed.append(seat)

        try:
            self.db.flush()
        except IntegrityError:
            # Another transaction materialized one of these seats first
            labels = [seat_label(*k) for k in keys]
            raise SeatConflictError(
                "Seats were updated by another purchase, please reload the seat map",
                seats=labels,
            )

        logger.info(
            "Showtime %s: %d seat(s) -> %s (%s)",
            showtime_id, len(keys), target, ", ".join(seat_label(*k) for k in keys),
        )
        return changed

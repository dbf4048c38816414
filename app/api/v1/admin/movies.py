from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.movie import Movie
from app.models.room import Room
from app.models.showtime import Showtime
from app.schemas.catalog import (
    MovieCreate,
    MovieUpdate,
    Movie as MovieSchema,
    RoomCreate,
    RoomUpdate,
    Room as RoomSchema,
    ShowtimeCreate,
    Showtime as ShowtimeSchema,
)

router = APIRouter(prefix="/admin/movies", tags=["Admin - Movies"])
room_router = APIRouter(prefix="/admin/rooms", tags=["Admin - Rooms"])
showtime_router = APIRouter(prefix="/admin/showtimes", tags=["Admin - Showtimes"])


# ---------------------------------------------------------------------------
# Movie CRUD
# ---------------------------------------------------------------------------


@router.post("/", response_model=MovieSchema, status_code=status.HTTP_201_CREATED)
def create_movie(
    data: MovieCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    movie = Movie(**data.model_dump())
    db.add(movie)
    db.commit()
    db.refresh(movie)
    return movie


@router.patch("/{id}", response_model=MovieSchema)
def update_movie(
    id: int,
    data: MovieUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    movie = db.query(Movie).filter(Movie.id == id, Movie.is_active == True).first()
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(movie, field, value)

    db.commit()
    db.refresh(movie)
    return movie


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Soft delete: showtimes and sold tickets keep referencing the movie."""
    movie = db.query(Movie).filter(Movie.id == id, Movie.is_active == True).first()
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")

    movie.is_active = False
    db.commit()


# ---------------------------------------------------------------------------
# Room CRUD
# ---------------------------------------------------------------------------


@room_router.post("/", response_model=RoomSchema, status_code=status.HTTP_201_CREATED)
def create_room(
    data: RoomCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    room = Room(**data.model_dump())
    db.add(room)
    db.commit()
    db.refresh(room)
    return room


@room_router.patch("/{id}", response_model=RoomSchema)
def update_room(
    id: int,
    data: RoomUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    room = db.query(Room).filter(Room.id == id, Room.is_active == True).first()
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(room, field, value)

    db.commit()
    db.refresh(room)
    return room


@room_router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    room = db.query(Room).filter(Room.id == id, Room.is_active == True).first()
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")

    room.is_active = False
    db.commit()


# ---------------------------------------------------------------------------
# Showtimes: create only, a showtime never changes once tickets can exist
# ---------------------------------------------------------------------------


@showtime_router.post("/", response_model=ShowtimeSchema, status_code=status.HTTP_201_CREATED)
def create_showtime(
    data: ShowtimeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    movie = db.query(Movie).filter(Movie.id == data.movie_id, Movie.is_active == True).first()
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    room = db.query(Room).filter(Room.id == data.room_id, Room.is_active == True).first()
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")

    showtime = Showtime(**data.model_dump())
    db.add(showtime)
    db.commit()
    db.refresh(showtime)
    return showtime

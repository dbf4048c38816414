from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.models.movie import Movie
from app.models.room import Room
from app.models.showtime import Showtime
from app.models.product import Category, Product
from app.schemas.catalog import (
    Movie as MovieSchema,
    Room as RoomSchema,
    Showtime as ShowtimeSchema,
    Category as CategorySchema,
    Product as ProductSchema,
)

movies_router = APIRouter(prefix="/movies", tags=["Catalog"])
rooms_router = APIRouter(prefix="/rooms", tags=["Catalog"])
showtimes_router = APIRouter(prefix="/showtimes", tags=["Catalog"])
categories_router = APIRouter(prefix="/categories", tags=["Catalog"])
products_router = APIRouter(prefix="/products", tags=["Catalog"])


# ---------------------------------------------------------------------------
# Movies
# ---------------------------------------------------------------------------


@movies_router.get("/", response_model=List[MovieSchema])
def list_movies(db: Session = Depends(get_db)):
    return db.query(Movie).filter(Movie.is_active == True).order_by(Movie.title).all()


@movies_router.get("/{movie_id}", response_model=MovieSchema)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    movie = db.query(Movie).filter(Movie.id == movie_id, Movie.is_active == True).first()
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


# ---------------------------------------------------------------------------
# Rooms
# ---------------------------------------------------------------------------


@rooms_router.get("/", response_model=List[RoomSchema])
def list_rooms(db: Session = Depends(get_db)):
    return db.query(Room).filter(Room.is_active == True).order_by(Room.name).all()


@rooms_router.get("/{room_id}", response_model=RoomSchema)
def get_room(room_id: int, db: Session = Depends(get_db)):
    room = db.query(Room).filter(Room.id == room_id, Room.is_active == True).first()
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


# ---------------------------------------------------------------------------
# Showtimes
# ---------------------------------------------------------------------------


@showtimes_router.get("/", response_model=List[ShowtimeSchema])
def list_showtimes(
    movie_id: Optional[int] = Query(None, description="Only showtimes of this movie"),
    db: Session = Depends(get_db),
):
    """Showtimes ordered by date and time, optionally for a single movie."""
    query = db.query(Showtime).options(joinedload(Showtime.room))
    if movie_id is not None:
        query = query.filter(Showtime.movie_id == movie_id)
    return query.order_by(Showtime.show_date, Showtime.show_time).all()


@showtimes_router.get("/{showtime_id}", response_model=ShowtimeSchema)
def get_showtime(showtime_id: int, db: Session = Depends(get_db)):
    showtime = (
        db.query(Showtime)
        .options(joinedload(Showtime.room))
        .filter(Showtime.id == showtime_id)
        .first()
    )
    if not showtime:
        raise HTTPException(status_code=404, detail="Showtime not found")
    return showtime


# ---------------------------------------------------------------------------
# Concessions
# ---------------------------------------------------------------------------


@categories_router.get("/", response_model=List[CategorySchema])
def list_categories(db: Session = Depends(get_db)):
    return db.query(Category).order_by(Category.name).all()


@products_router.get("/", response_model=List[ProductSchema])
def list_products(
    category_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    query = db.query(Product).filter(Product.is_active == True)
    if category_id is not None:
        query = query.filter(Product.category_id == category_id)
    return query.order_by(Product.name).all()

from typing import Literal, Optional
from pydantic import BaseModel, Field
from decimal import Decimal
from datetime import date, time


# Movie Schemas
class MovieBase(BaseModel):
    title: str
    duration: int = Field(gt=0)
    rating: Optional[str] = None
    genre: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    format: Literal["2D", "3D"] = "2D"


class MovieCreate(MovieBase):
    pass


class MovieUpdate(BaseModel):
    title: Optional[str] = None
    duration: Optional[int] = Field(None, gt=0)
    rating: Optional[str] = None
    genre: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    format: Optional[Literal["2D", "3D"]] = None


class Movie(MovieBase):
    id: int

    class Config:
        from_attributes = True


# Room Schemas
class RoomBase(BaseModel):
    name: str
    capacity: int = Field(gt=0)
    type: str = "2D"


class RoomCreate(RoomBase):
    pass


class RoomUpdate(BaseModel):
    name: Optional[str] = None
    capacity: Optional[int] = Field(None, gt=0)
    type: Optional[str] = None


class Room(RoomBase):
    id: int

    class Config:
        from_attributes = True


# Showtime Schemas: immutable once created, so no update schema
class ShowtimeCreate(BaseModel):
    movie_id: int
    room_id: int
    show_date: date
    show_time: time
    price: Decimal = Field(ge=0)


class Showtime(ShowtimeCreate):
    id: int
    room_name: Optional[str] = None
    room_type: Optional[str] = None

    class Config:
        from_attributes = True


# Category Schemas
class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)


class Category(CategoryCreate):
    id: int

    class Config:
        from_attributes = True


# Product Schemas
class ProductBase(BaseModel):
    sku: str
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    stock: int = Field(0, ge=0)
    category_id: int
    image_url: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    sku: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None
    image_url: Optional[str] = None


class Product(ProductBase):
    id: int

    class Config:
        from_attributes = True

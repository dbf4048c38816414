from app.models.user import User
from app.models.movie import Movie
from app.models.room import Room
from app.models.showtime import Showtime
from app.models.seat import Seat, SeatStatus
from app.models.product import Category, Product
from app.models.order import Order, OrderItem, ItemType

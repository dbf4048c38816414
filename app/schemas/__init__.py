from app.schemas.common import ErrorResponse, SeatConflictErrorResponse
from app.schemas.user import LoginRequest, LoginResponse, UserCreate, AdminCreate, UserSummary
from app.schemas.catalog import (
    Movie, MovieCreate, MovieUpdate,
    Room, RoomCreate, RoomUpdate,
    Showtime, ShowtimeCreate,
    Category, CategoryCreate,
    Product, ProductCreate, ProductUpdate,
)
from app.schemas.seat import SeatRef, SeatState, SeatStatusUpdate, SeatStatusUpdateResponse
from app.schemas.order import (
    Order, OrderCreate, OrderCreateResponse, OrderItem, OrderItemCreate, TicketLine,
)
from app.schemas.checkout import CheckoutRequest, CheckoutResponse
from app.schemas.report import ProductReport, ProductReportRow, SalesReport

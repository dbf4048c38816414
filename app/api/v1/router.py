from fastapi import APIRouter

# Auth
from app.api.v1.public.auth import router as auth_router

# Public: catalog
from app.api.v1.public.catalog import (
    movies_router,
    rooms_router,
    showtimes_router,
    categories_router,
    products_router,
)

# Public: seat grid
from app.api.v1.public.seats import router as seats_router

# Public: orders, checkout, receipts
from app.api.v1.public.orders import router as orders_router, checkout_router

# Admin
from app.api.v1.admin.movies import router as admin_movies_router, room_router, showtime_router
from app.api.v1.admin.products import router as admin_products_router, category_router
from app.api.v1.admin.reports import router as reports_router

api_router = APIRouter()

# --- Auth ---
api_router.include_router(auth_router)

# --- Public: catalog ---
api_router.include_router(movies_router)
api_router.include_router(rooms_router)
api_router.include_router(showtimes_router)
api_router.include_router(categories_router)
api_router.include_router(products_router)

# --- Public: seats (adds /{showtime_id}/seats to /showtimes prefix) ---
api_router.include_router(seats_router)

# --- Public: orders ---
api_router.include_router(orders_router)
api_router.include_router(checkout_router)

# --- Admin ---
api_router.include_router(admin_movies_router)
api_router.include_router(room_router)
api_router.include_router(showtime_router)
api_router.include_router(category_router)
api_router.include_router(admin_products_router)
api_router.include_router(reports_router)

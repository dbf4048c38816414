"""Shared fixtures: an in-memory SQLite app, a session on it, and catalog factories."""

from datetime import date, time
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.security import get_password_hash
from app.db.init_db import init_db
from app.main import create_app
from app.models.movie import Movie
from app.models.product import Category, Product
from app.models.room import Room
from app.models.showtime import Showtime
from app.models.user import User
from app.services.order_ledger import OrderLedger
from app.services.seat_grid import SeatGridStore, SeatLayout

ADMIN_EMAIL = "admin@starlight.com"
ADMIN_PASSWORD = "adminpassword"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    app = create_app(settings)
    init_db(app.state.engine)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def layout(settings) -> SeatLayout:
    return SeatLayout.from_settings(settings)


@pytest.fixture
def seat_store(db, layout) -> SeatGridStore:
    return SeatGridStore(db, layout)


@pytest.fixture
def ledger(db, seat_store) -> OrderLedger:
    return OrderLedger(db, seat_store)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_showtime(db):
    def _make(showtime_id=None, room_type="2D", price="85.00"):
        movie = Movie(title="Dune: Part Two", duration=166, rating="B", genre="Sci-Fi", format="2D")
        room = Room(name=f"Sala {room_type}", capacity=120, type=room_type)
        db.add_all([movie, room])
        db.flush()
        showtime = Showtime(
            id=showtime_id,
            movie_id=movie.id,
            room_id=room.id,
            show_date=date(2026, 11, 20),
            show_time=time(19, 30),
            price=Decimal(price),
        )
        db.add(showtime)
        db.commit()
        return showtime.id

    return _make


@pytest.fixture
def make_product(db):
    def _make(sku="POP-L", name="Large popcorn", price="95.00", stock=10):
        category = db.query(Category).filter(Category.name == "Snacks").first()
        if not category:
            category = Category(name="Snacks")
            db.add(category)
            db.flush()
        product = Product(
            sku=sku, name=name, price=Decimal(price), stock=stock, category_id=category.id
        )
        db.add(product)
        db.commit()
        return product.id

    return _make


@pytest.fixture
def make_user(db):
    def _make(email, password, role="customer"):
        user = User(email=email, password_hash=get_password_hash(password), role=role)
        db.add(user)
        db.commit()
        return user.id

    return _make


@pytest.fixture
def admin_headers(client, make_user):
    make_user(ADMIN_EMAIL, ADMIN_PASSWORD, role="administrador")
    response = client.post(
        "/api/v1/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}

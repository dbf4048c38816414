from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.security import Role, decode_token, normalize_role
from app.db.session import get_db
from app.models.user import User
from app.services.checkout import CheckoutCoordinator
from app.services.order_ledger import OrderLedger
from app.services.seat_grid import SeatGridStore, SeatLayout

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    user_id = decode_token(token, settings)
    if not user_id or not user_id.isdigit():
        raise credentials_exception
    user = db.query(User).filter(User.id == int(user_id)).first()
    if not user:
        raise credentials_exception
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is inactive")
    return user


def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    if normalize_role(current_user.role) != Role.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user


# ---------------------------------------------------------------------------
# Services: one instance per request, bound to the request's session
# ---------------------------------------------------------------------------


def get_seat_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SeatGridStore:
    return SeatGridStore(db, SeatLayout.from_settings(settings))


def get_order_ledger(
    db: Session = Depends(get_db),
    seats: SeatGridStore = Depends(get_seat_store),
) -> OrderLedger:
    return OrderLedger(db, seats)


def get_checkout(
    ledger: OrderLedger = Depends(get_order_ledger),
    settings: Settings = Depends(get_settings),
) -> CheckoutCoordinator:
    return CheckoutCoordinator.from_settings(ledger, settings)

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.config import Settings
from app.core.security import Role, create_access_token, get_password_hash, normalize_role, verify_password

from app.api.deps import get_settings
from app.models.user import User
from app.schemas.user import AdminCreate, LoginRequest, LoginResponse, UserCreate, UserSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _build_login_response(user: User, settings: Settings, message: str) -> LoginResponse:
    role = normalize_role(user.role).value
    return LoginResponse(
        message=message,
        email=user.email,
        role=role,
        user=UserSummary(id=user.id, email=user.email, role=role),
        access_token=create_access_token(subject=str(user.id), settings=settings),
    )


def _create_user(db: Session, body: UserCreate, role: Role) -> User:
    if db.query(User).filter(User.email == body.email).first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )
    user = User(
        email=body.email,
        password_hash=get_password_hash(body.password),
        full_name=body.full_name,
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered %s user %s", role.value, user.email)
    return user


@router.post("/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = _create_user(db, body, Role.CUSTOMER)
    return _build_login_response(user, settings, "Account created")


@router.post("/admin/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def admin_register(
    body: AdminCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if body.admin_secret != settings.ADMIN_SECRET_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin secret",
        )
    user = _create_user(db, body, Role.ADMIN)
    return _build_login_response(user, settings, "Account created")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Log in with email + password.
    The stored role may use either spelling ('administrador'/'admin',
    'cliente'/'customer'); the response always carries 'admin' or 'customer'.
    """
    if not body.email or not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )
    user = db.query(User).filter(User.email == body.email).first()
    if not user or not verify_password(body.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive",
        )
    return _build_login_response(user, settings, "Login successful")

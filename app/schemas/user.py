from typing import Optional
from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    email: str
    password: str


# Properties to receive via API on creation (POST /auth/register)
class UserCreate(BaseModel):
    email: EmailStr
    password: str
    full_name: Optional[str] = None


# Properties to receive via API on admin creation (POST /auth/admin/register)
class AdminCreate(UserCreate):
    admin_secret: str


# Compact user embedded in the login response; role is already folded
class UserSummary(BaseModel):
    id: int
    email: str
    role: str


class LoginResponse(BaseModel):
    ok: bool = True
    message: str
    email: str
    role: str
    user: UserSummary
    access_token: str
    token_type: str = "bearer"

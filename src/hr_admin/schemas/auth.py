from pydantic import BaseModel, EmailStr, Field

from hr_admin.schemas.admin import AdminRead


class LoginRequest(BaseModel):
    # Username or email
    identifier: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class TokenResponse(BaseModel):
    user: AdminRead
    token: str
    token_type: str = "bearer"

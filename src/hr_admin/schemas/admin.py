import uuid
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class AdminRole(StrEnum):
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class AdminCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    role: AdminRole = AdminRole.ADMIN


class AdminUpdate(BaseModel):
    username: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=1, max_length=128)
    role: AdminRole | None = None


class AdminRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

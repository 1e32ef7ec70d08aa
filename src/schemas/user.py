from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr
from .user_role import UserRoleOut


class UserBase(BaseModel):
    email: EmailStr
    full_name: Optional[str] = None
    role_id: int


class UserInDBBase(UserBase):
    id: int
    is_active: bool
    created_at: datetime
    last_login_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserOut(UserInDBBase):
    role: UserRoleOut


class TokenInfo(BaseModel):
    email: EmailStr
    id: int
    role: Optional[str] = None

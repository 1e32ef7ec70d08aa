from typing import Optional

from pydantic import BaseModel

from src.utils.constants import RoleConst


class UserRoleBase(BaseModel):
    role_name: RoleConst
    description: Optional[str] = None


class UserRoleOut(UserRoleBase):
    id: int

    class Config:
        from_attributes = True

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.utils.constants import BRAZILIAN_STATES, CNH_TYPES, DriverModalityConst


class DriverBase(BaseModel):
    name: str = Field(min_length=2, max_length=255)
    cpf: str = Field(min_length=11, max_length=14)
    phone: str = Field(min_length=10, max_length=20)
    email: Optional[EmailStr] = None
    birth_date: Optional[date] = None
    city: Optional[str] = None
    state: Optional[str] = None
    modality: DriverModalityConst
    cnh_type: str
    is_apto: bool = False

    @field_validator("state")
    @classmethod
    def _check_state(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in BRAZILIAN_STATES:
            raise ValueError(f"invalid state: {value}")
        return value

    @field_validator("cnh_type")
    @classmethod
    def _check_cnh_type(cls, value: str) -> str:
        if value not in CNH_TYPES:
            raise ValueError(f"invalid CNH type: {value}")
        return value


class DriverCreate(DriverBase):
    pass


class DriverUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=255)
    phone: Optional[str] = Field(default=None, min_length=10, max_length=20)
    email: Optional[EmailStr] = None
    birth_date: Optional[date] = None
    city: Optional[str] = None
    state: Optional[str] = None
    modality: Optional[DriverModalityConst] = None
    cnh_type: Optional[str] = None
    is_apto: Optional[bool] = None
    is_active: Optional[bool] = None

    @field_validator("state")
    @classmethod
    def _check_state(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in BRAZILIAN_STATES:
            raise ValueError(f"invalid state: {value}")
        return value


class DriverOut(DriverBase):
    id: int
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class DriverDeleteOut(BaseModel):
    id: int
    deleted: str

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.utils.constants import TransportStatusConst


class TransportBase(BaseModel):
    vehicle_chassi: str = Field(min_length=17, max_length=50)
    driver_id: Optional[int] = None
    delivery_date: Optional[date] = None
    notes: Optional[str] = None


class TransportCreate(TransportBase):
    status: TransportStatusConst = TransportStatusConst.PENDENTE


class TransportUpdate(BaseModel):
    driver_id: Optional[int] = None
    status: Optional[TransportStatusConst] = None
    delivery_date: Optional[date] = None
    notes: Optional[str] = None


class TransportOut(TransportBase):
    id: int
    request_number: str
    status: TransportStatusConst
    delivered_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class PendingTransportOut(TransportOut):
    driver_name: Optional[str] = None

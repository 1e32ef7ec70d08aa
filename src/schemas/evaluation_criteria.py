from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.utils.constants import ScoringConst


def _strip_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("name must not be blank")
    return value


class EvaluationCriteriaBase(BaseModel):
    name: str = Field(max_length=255)
    weight: float = Field(gt=0, le=100)
    penalty_leve: float = Field(default=ScoringConst.DEFAULT_PENALTY_LEVE, ge=0, le=100)
    penalty_medio: float = Field(default=ScoringConst.DEFAULT_PENALTY_MEDIO, ge=0, le=100)
    penalty_grave: float = Field(default=ScoringConst.DEFAULT_PENALTY_GRAVE, ge=0, le=100)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: Optional[str]) -> Optional[str]:
        return _strip_name(value)


class EvaluationCriteriaCreate(EvaluationCriteriaBase):
    order: Optional[int] = Field(default=None, ge=0)


class EvaluationCriteriaUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    weight: Optional[float] = Field(default=None, gt=0, le=100)
    penalty_leve: Optional[float] = Field(default=None, ge=0, le=100)
    penalty_medio: Optional[float] = Field(default=None, ge=0, le=100)
    penalty_grave: Optional[float] = Field(default=None, ge=0, le=100)
    order: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: Optional[str]) -> Optional[str]:
        return _strip_name(value)


class EvaluationCriteriaOut(EvaluationCriteriaBase):
    id: int
    is_active: bool
    order: int
    created_at: datetime

    class Config:
        from_attributes = True


class CriteriaWeightItem(BaseModel):
    id: int
    weight: float = Field(gt=0, le=100)
    order: Optional[int] = Field(default=None, ge=0)
    penalty_leve: Optional[float] = Field(default=None, ge=0, le=100)
    penalty_medio: Optional[float] = Field(default=None, ge=0, le=100)
    penalty_grave: Optional[float] = Field(default=None, ge=0, le=100)


class CriteriaBulkUpdate(BaseModel):
    criteria: List[CriteriaWeightItem] = Field(min_length=1)


class CriteriaWeightSummary(BaseModel):
    total: float
    remaining: float
    is_valid: bool
    active_count: int


class CriteriaDeleteOut(BaseModel):
    id: int
    deleted: Literal["soft", "hard"]

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.utils.constants import SeverityConst
from .scoring import CriterionScoreIn


class DriverEvaluationCreate(BaseModel):
    transport_id: int
    driver_id: int
    had_incident: bool = False
    incident_description: Optional[str] = None
    manual_score: Optional[float] = Field(default=None, ge=0, le=100)
    scores: List[CriterionScoreIn] = []


class DriverEvaluationScoreOut(BaseModel):
    id: int
    criterion_id: int
    criterion_name: str
    severity: Optional[SeverityConst] = None
    score: float
    weight: float

    class Config:
        from_attributes = True


class DriverEvaluationOut(BaseModel):
    id: int
    transport_id: int
    driver_id: int
    evaluator_id: Optional[int] = None
    had_incident: bool
    incident_description: Optional[str] = None
    average_score: float
    weighted_score: float
    computed_weighted_score: float
    is_manual_override: bool
    created_at: datetime
    scores: List[DriverEvaluationScoreOut] = []

    class Config:
        from_attributes = True

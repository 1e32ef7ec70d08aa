from typing import List, Optional

from pydantic import BaseModel, Field

from src.utils.constants import SeverityConst


class CriterionWeight(BaseModel):
    """What the scoring engine needs to know about one criterion."""

    criterion_id: int
    weight: float
    penalty_leve: float = 0.0
    penalty_medio: float = 0.0
    penalty_grave: float = 0.0
    is_active: bool = True
    name: Optional[str] = None


class CriterionScoreIn(BaseModel):
    """One rated criterion: either a severity tag or a raw 0-100 score."""

    criterion_id: int
    severity: Optional[SeverityConst] = None
    score: Optional[int] = Field(default=None, ge=0, le=100)


class FieldError(BaseModel):
    field: str
    message: str


class ScoreResult(BaseModel):
    average: float
    weighted: float


class ScoredCriterion(BaseModel):
    criterion_id: int
    severity: Optional[SeverityConst] = None
    score: float
    weight: float


class ScoringOutcome(BaseModel):
    result: Optional[ScoreResult] = None
    scored: List[ScoredCriterion] = []
    errors: List[FieldError] = []

    @property
    def ok(self) -> bool:
        return self.result is not None and not self.errors


class ScorePreviewRequest(BaseModel):
    scores: List[CriterionScoreIn]

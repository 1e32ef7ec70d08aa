from .user_role import UserRoleBase, UserRoleOut
from .user import UserBase, UserInDBBase, UserOut, TokenInfo
from .driver import DriverCreate, DriverUpdate, DriverOut, DriverDeleteOut
from .transport import TransportCreate, TransportUpdate, TransportOut, PendingTransportOut
from .evaluation_criteria import (
    EvaluationCriteriaCreate,
    EvaluationCriteriaUpdate,
    EvaluationCriteriaOut,
    CriteriaWeightItem,
    CriteriaBulkUpdate,
    CriteriaWeightSummary,
    CriteriaDeleteOut,
)
from .scoring import (
    CriterionWeight,
    CriterionScoreIn,
    FieldError,
    ScoreResult,
    ScoredCriterion,
    ScoringOutcome,
    ScorePreviewRequest,
)
from .driver_evaluation import (
    DriverEvaluationCreate,
    DriverEvaluationScoreOut,
    DriverEvaluationOut,
)
from .driver_ranking import DriverRankingEntry, RankingStats, DriverRanking

__all__ = [
    "UserRoleBase",
    "UserRoleOut",
    "UserBase",
    "UserInDBBase",
    "UserOut",
    "TokenInfo",
    "DriverCreate",
    "DriverUpdate",
    "DriverOut",
    "DriverDeleteOut",
    "TransportCreate",
    "TransportUpdate",
    "TransportOut",
    "PendingTransportOut",
    "EvaluationCriteriaCreate",
    "EvaluationCriteriaUpdate",
    "EvaluationCriteriaOut",
    "CriteriaWeightItem",
    "CriteriaBulkUpdate",
    "CriteriaWeightSummary",
    "CriteriaDeleteOut",
    "CriterionWeight",
    "CriterionScoreIn",
    "FieldError",
    "ScoreResult",
    "ScoredCriterion",
    "ScoringOutcome",
    "ScorePreviewRequest",
    "DriverEvaluationCreate",
    "DriverEvaluationScoreOut",
    "DriverEvaluationOut",
    "DriverRankingEntry",
    "RankingStats",
    "DriverRanking",
]

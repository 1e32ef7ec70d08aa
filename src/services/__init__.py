from .auth import AuthService
from .driver import DriverService
from .transport import TransportService
from .evaluation_criteria import EvaluationCriteriaService
from .driver_evaluation import DriverEvaluationService
from .driver_ranking import DriverRankingService

__all__ = [
    "AuthService",
    "DriverService",
    "TransportService",
    "EvaluationCriteriaService",
    "DriverEvaluationService",
    "DriverRankingService",
]

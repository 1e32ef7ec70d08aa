from .user import UserRepository
from .driver import DriverRepository
from .transport import TransportRepository
from .evaluation_criteria import EvaluationCriteriaRepository
from .driver_evaluation import DriverEvaluationRepository

__all__ = [
    "UserRepository",
    "DriverRepository",
    "TransportRepository",
    "EvaluationCriteriaRepository",
    "DriverEvaluationRepository",
]

from .user import User
from .user_role import UserRole
from .driver import Driver
from .transport import Transport
from .request_counter import RequestCounter
from .evaluation_criteria import EvaluationCriteria
from .driver_evaluation import DriverEvaluation
from .driver_evaluation_score import DriverEvaluationScore

__all__ = [
    "User",
    "UserRole",
    "Driver",
    "Transport",
    "RequestCounter",
    "EvaluationCriteria",
    "DriverEvaluation",
    "DriverEvaluationScore",
]

from .auth import router as auth_router
from .driver import router as driver_router
from .transport import router as transport_router
from .evaluation_criteria import router as evaluation_criteria_router
from .driver_evaluation import router as driver_evaluation_router
from .driver_ranking import router as driver_ranking_router

__all__ = [
    "auth_router",
    "driver_router",
    "transport_router",
    "evaluation_criteria_router",
    "driver_evaluation_router",
    "driver_ranking_router",
]

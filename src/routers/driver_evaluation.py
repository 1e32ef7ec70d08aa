from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from src.schemas import (
    DriverEvaluationCreate,
    DriverEvaluationOut,
    PendingTransportOut,
    ScorePreviewRequest,
    ScoreResult,
    TokenInfo,
)
from src.services import DriverEvaluationService
from src.utils.constants import RoleConst
from src.utils.dependencies import get_service, get_current_user, require_roles

router = APIRouter(prefix="/driver-evaluations", tags=["driver-evaluations"])

EvaluationServiceDep = Depends(get_service(DriverEvaluationService))
Evaluators = Depends(require_roles(RoleConst.ADMIN, RoleConst.OPERADOR))


@router.get("/pending-transports", response_model=list[PendingTransportOut])
def list_pending_transports(
    service: DriverEvaluationService = EvaluationServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.list_pending_transports()


@router.post("/preview", response_model=ScoreResult)
def preview_score(
    payload: ScorePreviewRequest,
    service: DriverEvaluationService = EvaluationServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.preview(payload.scores)


@router.post("/", response_model=DriverEvaluationOut, status_code=status.HTTP_201_CREATED)
def submit_evaluation(
    evaluation_in: DriverEvaluationCreate,
    service: DriverEvaluationService = EvaluationServiceDep,
    token: TokenInfo = Evaluators,
):
    return service.submit_evaluation(evaluation_in, token)


@router.get("/", response_model=list[DriverEvaluationOut])
def list_evaluations(
    skip: int = 0,
    limit: int | None = None,
    driver_id: Optional[int] = None,
    service: DriverEvaluationService = EvaluationServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.list_evaluations(skip=skip, limit=limit, driver_id=driver_id)


@router.get("/{evaluation_id}/", response_model=DriverEvaluationOut)
def read_evaluation(
    evaluation_id: int,
    service: DriverEvaluationService = EvaluationServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    evaluation = service.get_evaluation(evaluation_id)
    if not evaluation:
        raise HTTPException(status_code=404, detail="Evaluation not found")
    return evaluation

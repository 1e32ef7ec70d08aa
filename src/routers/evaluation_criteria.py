from fastapi import APIRouter, Depends, HTTPException, status

from src.schemas import (
    CriteriaBulkUpdate,
    CriteriaDeleteOut,
    CriteriaWeightSummary,
    EvaluationCriteriaCreate,
    EvaluationCriteriaOut,
    EvaluationCriteriaUpdate,
    TokenInfo,
)
from src.services import EvaluationCriteriaService
from src.utils.constants import RoleConst
from src.utils.dependencies import get_service, get_current_user, require_roles

router = APIRouter(prefix="/evaluation-criteria", tags=["evaluation-criteria"])

CriteriaServiceDep = Depends(get_service(EvaluationCriteriaService))
AdminOnly = Depends(require_roles(RoleConst.ADMIN))


@router.get("/", response_model=list[EvaluationCriteriaOut])
def list_criteria(
    active_only: bool = False,
    service: EvaluationCriteriaService = CriteriaServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.list_criteria(active_only=active_only)


@router.get("/weight-summary", response_model=CriteriaWeightSummary)
def weight_summary(
    service: EvaluationCriteriaService = CriteriaServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.weight_summary()


@router.put("/bulk-update", response_model=list[EvaluationCriteriaOut])
def bulk_update_criteria(
    payload: CriteriaBulkUpdate,
    service: EvaluationCriteriaService = CriteriaServiceDep,
    token: TokenInfo = AdminOnly,
):
    return service.bulk_update_weights(payload)


@router.post("/", response_model=EvaluationCriteriaOut, status_code=status.HTTP_201_CREATED)
def create_criteria(
    criteria_in: EvaluationCriteriaCreate,
    service: EvaluationCriteriaService = CriteriaServiceDep,
    token: TokenInfo = AdminOnly,
):
    return service.create_criteria(criteria_in)


@router.get("/{criteria_id}/", response_model=EvaluationCriteriaOut)
def read_criteria(
    criteria_id: int,
    service: EvaluationCriteriaService = CriteriaServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    criteria = service.get_criteria(criteria_id)
    if not criteria:
        raise HTTPException(status_code=404, detail="Evaluation criteria not found")
    return criteria


@router.patch("/{criteria_id}/", response_model=EvaluationCriteriaOut)
def update_criteria(
    criteria_id: int,
    criteria_in: EvaluationCriteriaUpdate,
    service: EvaluationCriteriaService = CriteriaServiceDep,
    token: TokenInfo = AdminOnly,
):
    updated = service.update_criteria(criteria_id, criteria_in)
    if not updated:
        raise HTTPException(status_code=404, detail="Evaluation criteria not found")
    return updated


@router.delete("/{criteria_id}/", response_model=CriteriaDeleteOut)
def delete_criteria(
    criteria_id: int,
    service: EvaluationCriteriaService = CriteriaServiceDep,
    token: TokenInfo = AdminOnly,
):
    result = service.delete_criteria(criteria_id)
    if not result:
        raise HTTPException(status_code=404, detail="Evaluation criteria not found")
    return result

from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from src.config.logger import get_logger
from src.models import EvaluationCriteria
from src.repositories import EvaluationCriteriaRepository
from src.schemas import (
    CriteriaBulkUpdate,
    CriteriaDeleteOut,
    CriteriaWeightSummary,
    CriterionWeight,
    EvaluationCriteriaCreate,
    EvaluationCriteriaOut,
    EvaluationCriteriaUpdate,
)
from src.services.scoring import check_weight_total
from src.utils.constants import ScoringConst
from src.utils.utils import round_score, to_decimal

logger = get_logger(__name__)


def to_criterion_weight(db_obj: EvaluationCriteria) -> CriterionWeight:
    return CriterionWeight(
        criterion_id=db_obj.id,
        name=db_obj.name,
        weight=float(db_obj.weight),
        penalty_leve=float(db_obj.penalty_leve),
        penalty_medio=float(db_obj.penalty_medio),
        penalty_grave=float(db_obj.penalty_grave),
        is_active=bool(db_obj.is_active),
    )


class EvaluationCriteriaService:
    def __init__(self, db: Session):
        self.repo = EvaluationCriteriaRepository(db)

    def list_criteria(self, active_only: bool = False) -> List[EvaluationCriteriaOut]:
        return self.repo.list(active_only=active_only)

    def get_criteria(self, criteria_id: int) -> Optional[EvaluationCriteriaOut]:
        return self.repo.get(criteria_id)

    def create_criteria(self, criteria_in: EvaluationCriteriaCreate) -> EvaluationCriteriaOut:
        logger.info("Creating evaluation criteria %s", criteria_in.name)
        self._ensure_unique_name(criteria_in.name)
        if criteria_in.order is None:
            criteria_in = criteria_in.model_copy(update={"order": self.repo.count_active()})
        return self.repo.create(criteria_in)

    def update_criteria(
        self, criteria_id: int, criteria_in: EvaluationCriteriaUpdate
    ) -> Optional[EvaluationCriteriaOut]:
        logger.info("Updating evaluation criteria %s", criteria_id)
        db_obj = self.repo.get(criteria_id)
        if not db_obj:
            return None
        if criteria_in.name is not None and criteria_in.name != db_obj.name:
            self._ensure_unique_name(criteria_in.name)
        return self.repo.update(db_obj, criteria_in)

    def bulk_update_weights(self, payload: CriteriaBulkUpdate) -> List[EvaluationCriteriaOut]:
        """
        Replace weights (and optionally order / penalties) for several criteria
        at once. The resulting active set must total 100, otherwise nothing is
        written.
        """
        ids = [item.id for item in payload.criteria]
        if len(ids) != len(set(ids)):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Each criterion may appear only once in a bulk update",
            )

        db_objs = {c.id: c for c in self.repo.get_many(ids)}
        missing = [cid for cid in ids if cid not in db_objs]
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Evaluation criteria not found: {', '.join(map(str, missing))}",
            )

        # quantized to the Numeric(5, 2) column scale
        items = [
            item.model_copy(update={"weight": round_score(item.weight, ScoringConst.DECIMALS)})
            for item in payload.criteria
        ]
        candidate = {c.id: c.weight for c in self.repo.list(active_only=True)}
        for item in items:
            if db_objs[item.id].is_active:
                candidate[item.id] = item.weight

        error = check_weight_total(candidate.values())
        if error:
            logger.warning("Rejected criteria bulk update: %s", error.message)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"message": error.message, "errors": [error.model_dump()]},
            )

        logger.info("Bulk updating weights for criteria %s", ids)
        self.repo.bulk_update(db_objs, items)
        return self.repo.list()

    def weight_summary(self) -> CriteriaWeightSummary:
        active = self.repo.list(active_only=True)
        total = sum((to_decimal(c.weight) for c in active), to_decimal(0))
        return CriteriaWeightSummary(
            total=round_score(total),
            remaining=round_score(ScoringConst.WEIGHT_TOTAL - total),
            is_valid=bool(active) and check_weight_total(c.weight for c in active) is None,
            active_count=len(active),
        )

    def delete_criteria(self, criteria_id: int) -> Optional[CriteriaDeleteOut]:
        db_obj = self.repo.get(criteria_id)
        if not db_obj:
            logger.warning("Evaluation criteria %s not found", criteria_id)
            return None

        # evaluations keep pointing at referenced criteria
        if self.repo.is_referenced(criteria_id):
            logger.info("Deactivating evaluation criteria %s", criteria_id)
            self.repo.deactivate(db_obj)
            return CriteriaDeleteOut(id=criteria_id, deleted="soft")

        logger.info("Deleting evaluation criteria %s", criteria_id)
        self.repo.delete(db_obj)
        return CriteriaDeleteOut(id=criteria_id, deleted="hard")

    def _ensure_unique_name(self, name: str) -> None:
        if self.repo.get_by_name(name):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Evaluation criteria '{name}' already exists",
            )

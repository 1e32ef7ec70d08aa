from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Optional, List

from src.models import DriverEvaluationScore, EvaluationCriteria
from src.schemas.evaluation_criteria import (
    CriteriaWeightItem,
    EvaluationCriteriaCreate,
    EvaluationCriteriaUpdate,
)


class EvaluationCriteriaRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, criteria_id: int) -> Optional[EvaluationCriteria]:
        return self.db.query(EvaluationCriteria).filter(EvaluationCriteria.id == criteria_id).first()

    def get_by_name(self, name: str) -> Optional[EvaluationCriteria]:
        return self.db.query(EvaluationCriteria).filter(EvaluationCriteria.name == name).first()

    def get_many(self, ids: List[int]) -> List[EvaluationCriteria]:
        if not ids:
            return []
        return self.db.query(EvaluationCriteria).filter(EvaluationCriteria.id.in_(ids)).all()

    def list(self, active_only: bool = False) -> List[EvaluationCriteria]:
        query = self.db.query(EvaluationCriteria)
        if active_only:
            query = query.filter(EvaluationCriteria.is_active.is_(True))
        return query.order_by(EvaluationCriteria.order, EvaluationCriteria.id).all()

    def count_active(self) -> int:
        return (
            self.db.query(func.count(EvaluationCriteria.id))
            .filter(EvaluationCriteria.is_active.is_(True))
            .scalar()
        )

    def is_referenced(self, criteria_id: int) -> bool:
        return (
            self.db.query(DriverEvaluationScore.id)
            .filter(DriverEvaluationScore.criterion_id == criteria_id)
            .first()
            is not None
        )

    def create(self, criteria_in: EvaluationCriteriaCreate) -> EvaluationCriteria:
        db_obj = EvaluationCriteria(**criteria_in.model_dump(exclude_none=True))
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: EvaluationCriteria, criteria_in: EvaluationCriteriaUpdate) -> EvaluationCriteria:
        update_data = criteria_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def bulk_update(
        self,
        db_objs: dict[int, EvaluationCriteria],
        items: List[CriteriaWeightItem],
    ) -> None:
        """Apply every item in one commit; nothing is written if any step fails."""
        try:
            for item in items:
                db_obj = db_objs[item.id]
                for field, value in item.model_dump(exclude={"id"}, exclude_none=True).items():
                    setattr(db_obj, field, value)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def deactivate(self, db_obj: EvaluationCriteria) -> EvaluationCriteria:
        db_obj.is_active = False
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: EvaluationCriteria) -> None:
        self.db.delete(db_obj)
        self.db.commit()

from sqlalchemy.orm import Session, selectinload
from typing import Optional, List

from src.models import DriverEvaluation, DriverEvaluationScore


class DriverEvaluationRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, evaluation_id: int) -> Optional[DriverEvaluation]:
        return (
            self.db.query(DriverEvaluation)
            .options(selectinload(DriverEvaluation.scores))
            .filter(DriverEvaluation.id == evaluation_id)
            .first()
        )

    def get_by_transport(self, transport_id: int) -> Optional[DriverEvaluation]:
        return (
            self.db.query(DriverEvaluation)
            .filter(DriverEvaluation.transport_id == transport_id)
            .first()
        )

    def list(
        self,
        skip: int = 0,
        limit: int | None = None,
        driver_id: int | None = None,
    ) -> List[DriverEvaluation]:
        query = self.db.query(DriverEvaluation).options(selectinload(DriverEvaluation.scores))
        if driver_id is not None:
            query = query.filter(DriverEvaluation.driver_id == driver_id)
        query = query.order_by(DriverEvaluation.id.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def list_all(self) -> List[DriverEvaluation]:
        return self.db.query(DriverEvaluation).all()

    def create(
        self,
        evaluation: DriverEvaluation,
        scores: List[DriverEvaluationScore],
    ) -> DriverEvaluation:
        """Persist the evaluation and its per-criterion rows together."""
        try:
            evaluation.scores = scores
            self.db.add(evaluation)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(evaluation)
        return evaluation

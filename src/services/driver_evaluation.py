from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from src.config.logger import get_logger
from src.models import DriverEvaluation, DriverEvaluationScore
from src.repositories import (
    DriverEvaluationRepository,
    DriverRepository,
    EvaluationCriteriaRepository,
    TransportRepository,
)
from src.schemas import (
    CriterionScoreIn,
    DriverEvaluationCreate,
    DriverEvaluationOut,
    FieldError,
    PendingTransportOut,
    ScoreResult,
    ScoringOutcome,
    TokenInfo,
)
from src.services import scoring
from src.services.evaluation_criteria import to_criterion_weight
from src.utils.constants import TransportStatusConst

logger = get_logger(__name__)


class DriverEvaluationService:
    def __init__(self, db: Session):
        self.repo = DriverEvaluationRepository(db)
        self.criteria_repo = EvaluationCriteriaRepository(db)
        self.transport_repo = TransportRepository(db)
        self.driver_repo = DriverRepository(db)

    def list_pending_transports(self) -> List[PendingTransportOut]:
        transports = self.transport_repo.list_pending_evaluation()
        return [
            PendingTransportOut.model_validate(t).model_copy(
                update={"driver_name": t.driver.name if t.driver else None}
            )
            for t in transports
        ]

    def list_evaluations(
        self, skip: int = 0, limit: int | None = None, driver_id: int | None = None
    ) -> List[DriverEvaluationOut]:
        return self.repo.list(skip=skip, limit=limit, driver_id=driver_id)

    def get_evaluation(self, evaluation_id: int) -> Optional[DriverEvaluationOut]:
        return self.repo.get(evaluation_id)

    def preview(self, entries: List[CriterionScoreIn]) -> ScoreResult:
        outcome = self._score(entries)
        if not outcome.ok:
            self._raise_scoring_errors(outcome.errors)
        return outcome.result

    def submit_evaluation(
        self, evaluation_in: DriverEvaluationCreate, token: TokenInfo | None = None
    ) -> DriverEvaluationOut:
        logger.info(
            "Submitting evaluation for transport %s / driver %s",
            evaluation_in.transport_id,
            evaluation_in.driver_id,
        )
        description = (evaluation_in.incident_description or "").strip()

        if evaluation_in.had_incident and not description:
            self._raise_scoring_errors([FieldError(
                field="incident_description",
                message="Describe what happened during the trip",
            )])
        if evaluation_in.manual_score is not None and not evaluation_in.had_incident:
            self._raise_scoring_errors([FieldError(
                field="manual_score",
                message="A manual score is only accepted when an incident is reported",
            )])

        transport = self.transport_repo.get(evaluation_in.transport_id)
        if not transport:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transport not found")
        if not self.driver_repo.get(evaluation_in.driver_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Driver not found")

        if transport.status != TransportStatusConst.ENTREGUE.value:
            self._raise_scoring_errors([FieldError(
                field="transport_id",
                message=f"Transport {transport.request_number} has not been delivered",
            )])
        if transport.driver_id != evaluation_in.driver_id:
            self._raise_scoring_errors([FieldError(
                field="driver_id",
                message=f"Driver {evaluation_in.driver_id} did not run transport {transport.request_number}",
            )])
        if self.repo.get_by_transport(transport.id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Transport {transport.request_number} was already evaluated",
            )

        outcome = self._score(evaluation_in.scores)
        if not outcome.ok:
            self._raise_scoring_errors(outcome.errors)

        computed = outcome.result
        is_override = evaluation_in.manual_score is not None
        names = {c.id: c.name for c in self.criteria_repo.get_many([s.criterion_id for s in outcome.scored])}

        evaluation = DriverEvaluation(
            transport_id=transport.id,
            driver_id=evaluation_in.driver_id,
            evaluator_id=token.id if token else None,
            had_incident=evaluation_in.had_incident,
            incident_description=description if evaluation_in.had_incident else None,
            average_score=computed.average,
            weighted_score=evaluation_in.manual_score if is_override else computed.weighted,
            computed_weighted_score=computed.weighted,
            is_manual_override=is_override,
        )
        scores = [
            DriverEvaluationScore(
                criterion_id=s.criterion_id,
                criterion_name=names[s.criterion_id],
                severity=s.severity.value if s.severity else None,
                score=s.score,
                weight=s.weight,
            )
            for s in outcome.scored
        ]

        created = self.repo.create(evaluation, scores)
        logger.info(
            "Evaluation %s stored: average=%s weighted=%s override=%s",
            created.id,
            computed.average,
            created.weighted_score,
            is_override,
        )
        return created

    def _score(self, entries: List[CriterionScoreIn]) -> ScoringOutcome:
        criteria = [to_criterion_weight(c) for c in self.criteria_repo.list(active_only=True)]
        return scoring.compute(criteria, entries)

    def _raise_scoring_errors(self, errors: List[FieldError]) -> None:
        logger.warning("Evaluation rejected: %s", "; ".join(e.message for e in errors))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": errors[0].message,
                "errors": [e.model_dump() for e in errors],
            },
        )

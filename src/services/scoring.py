"""Weighted driver-evaluation scoring.

Pure functions only: no database, no logging side effects. Callers validate
the request shape, hand the active criteria plus the submitted entries to
:func:`compute`, and render the returned field errors when scoring is
refused.

    score(sem_ocorrencia) = 100
    score(leve|medio|grave) = 100 - criterion.penalty_<tier>
    average  = sum(score_i) / n
    weighted = sum(score_i * weight_i / 100)
"""

from decimal import Decimal
from typing import Iterable, Optional

from src.schemas.scoring import (
    CriterionScoreIn,
    CriterionWeight,
    FieldError,
    ScoredCriterion,
    ScoreResult,
    ScoringOutcome,
)
from src.utils.constants import ScoringConst, SeverityConst
from src.utils.utils import round_score, to_decimal


def severity_score(criterion: CriterionWeight, severity: SeverityConst) -> Decimal:
    """Score (0-100 baseline) for a criterion rated at the given severity tier."""
    severity = SeverityConst(severity)
    if severity is SeverityConst.SEM_OCORRENCIA:
        return Decimal(ScoringConst.MAX_SCORE)

    penalty = {
        SeverityConst.LEVE: criterion.penalty_leve,
        SeverityConst.MEDIO: criterion.penalty_medio,
        SeverityConst.GRAVE: criterion.penalty_grave,
    }[severity]
    # not clamped; penalties are bounded to [0, 100] where criteria are written
    return Decimal(ScoringConst.MAX_SCORE) - to_decimal(penalty)


def check_weight_total(weights: Iterable[float]) -> Optional[FieldError]:
    """
    Validate that criterion weights add up to 100.

    The total must sit strictly inside the 0.01 tolerance band, so 100.005
    passes while 99.99 and 100.02 do not.

    Returns:
        None when the total is acceptable, otherwise a FieldError naming the
        total and how much is missing or in excess.
    """
    total = sum((to_decimal(w) for w in weights), Decimal("0"))
    delta = total - ScoringConst.WEIGHT_TOTAL
    if abs(delta) < ScoringConst.WEIGHT_TOLERANCE:
        return None

    if delta < 0:
        detail = f"missing {-delta:.2f}"
    else:
        detail = f"exceeds by {delta:.2f}"
    return FieldError(
        field="weight",
        message=f"Criteria weights must total 100; current total is {total:.2f} ({detail})",
    )


def compute(
    criteria: Iterable[CriterionWeight],
    entries: Iterable[CriterionScoreIn],
) -> ScoringOutcome:
    """
    Turn a set of rated criteria into the simple average and weighted score.

    Inactive criteria in ``criteria`` are ignored. The active weights must
    total 100, and every active criterion must be rated exactly once, either
    by severity or by a raw score.

    Returns:
        ScoringOutcome with ``result`` set, or with ``errors`` describing
        why scoring was refused. Never raises for bad user input.
    """
    active = {c.criterion_id: c for c in criteria if c.is_active}
    entries = list(entries)

    if not active:
        return ScoringOutcome(errors=[
            FieldError(field="criteria", message="No active evaluation criteria are configured"),
        ])

    weight_error = check_weight_total(c.weight for c in active.values())
    if weight_error:
        return ScoringOutcome(errors=[weight_error])

    errors: list[FieldError] = []
    scored: dict[int, ScoredCriterion] = {}
    raw_scores: dict[int, Decimal] = {}

    for i, entry in enumerate(entries):
        field = f"scores[{i}]"
        criterion = active.get(entry.criterion_id)
        if criterion is None:
            errors.append(FieldError(
                field=f"{field}.criterion_id",
                message=f"Criterion {entry.criterion_id} does not exist or is inactive",
            ))
            continue
        if entry.criterion_id in scored:
            errors.append(FieldError(
                field=f"{field}.criterion_id",
                message=f"Criterion {entry.criterion_id} was rated more than once",
            ))
            continue
        if (entry.severity is None) == (entry.score is None):
            errors.append(FieldError(
                field=field,
                message="Provide exactly one of severity or score",
            ))
            continue

        if entry.severity is not None:
            value = severity_score(criterion, entry.severity)
        else:
            value = to_decimal(entry.score)

        raw_scores[entry.criterion_id] = value
        scored[entry.criterion_id] = ScoredCriterion(
            criterion_id=entry.criterion_id,
            severity=entry.severity,
            score=float(value),
            weight=criterion.weight,
        )

    missing = sorted(set(active) - set(scored) - _rejected_ids(entries, active))
    if missing:
        errors.append(FieldError(
            field="scores",
            message="Missing rating for criteria: " + ", ".join(
                active[cid].name or str(cid) for cid in missing
            ),
        ))

    if errors:
        return ScoringOutcome(errors=errors)

    n = len(active)
    total = sum(raw_scores.values(), Decimal("0"))
    weighted = sum(
        (raw_scores[cid] * to_decimal(active[cid].weight) / ScoringConst.WEIGHT_TOTAL for cid in active),
        Decimal("0"),
    )

    return ScoringOutcome(
        result=ScoreResult(
            average=round_score(total / n, ScoringConst.DECIMALS),
            weighted=round_score(weighted, ScoringConst.DECIMALS),
        ),
        scored=[scored[cid] for cid in sorted(scored)],
    )


def _rejected_ids(entries: list[CriterionScoreIn], active: dict[int, CriterionWeight]) -> set[int]:
    # criteria that were rated but rejected already carry their own error
    return {
        e.criterion_id
        for e in entries
        if e.criterion_id in active and (e.severity is None) == (e.score is None)
    }

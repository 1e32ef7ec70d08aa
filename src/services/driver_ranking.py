from collections import defaultdict
from datetime import datetime, timedelta
from sqlalchemy.orm import Session
from typing import List

from src.repositories import DriverEvaluationRepository, DriverRepository, TransportRepository
from src.schemas import DriverRanking, DriverRankingEntry, RankingStats
from src.utils.constants import RankingConst
from src.utils.utils import mean, round_score, utc_now


class DriverRankingService:
    def __init__(self, db: Session):
        self.driver_repo = DriverRepository(db)
        self.transport_repo = TransportRepository(db)
        self.evaluation_repo = DriverEvaluationRepository(db)

    def get_ranking(self, now: datetime | None = None) -> DriverRanking:
        """
        Aggregate trips and evaluations per driver.

        average_score is the mean of the authoritative weighted scores, so
        manually overridden evaluations count with their override value.
        """
        now = now or utc_now()
        since = now - timedelta(days=RankingConst.LAST_MONTH_DAYS)

        trips: dict[int, int] = defaultdict(int)
        recent_trips: dict[int, int] = defaultdict(int)
        for t in self.transport_repo.list():
            if t.driver_id is None:
                continue
            trips[t.driver_id] += 1
            if t.created_at and t.created_at >= since:
                recent_trips[t.driver_id] += 1

        scores: dict[int, list[float]] = defaultdict(list)
        incidents: dict[int, int] = defaultdict(int)
        for e in self.evaluation_repo.list_all():
            scores[e.driver_id].append(float(e.weighted_score))
            if e.had_incident:
                incidents[e.driver_id] += 1

        entries: List[DriverRankingEntry] = []
        for d in self.driver_repo.list():
            avg = mean(scores[d.id])
            entries.append(DriverRankingEntry(
                id=d.id,
                name=d.name,
                cpf=d.cpf,
                city=d.city,
                state=d.state,
                birth_date=d.birth_date,
                modality=d.modality,
                is_active=bool(d.is_active),
                total_trips=trips[d.id],
                trips_last_month=recent_trips[d.id],
                average_score=round_score(avg) if avg is not None else None,
                total_evaluations=len(scores[d.id]),
                incident_count=incidents[d.id],
            ))

        evaluated = [e for e in entries if e.average_score is not None]
        overall = mean([e.average_score for e in evaluated])
        size = RankingConst.LIST_SIZE

        return DriverRanking(
            stats=RankingStats(
                total_drivers=len(entries),
                active_drivers=sum(1 for e in entries if e.is_active),
                total_trips=sum(e.total_trips for e in entries),
                average_score=round_score(overall) if overall is not None else 0.0,
                drivers_with_evaluations=len(evaluated),
            ),
            drivers=sorted(entries, key=lambda e: (e.average_score is None, -(e.average_score or 0), e.name)),
            top_drivers=sorted(evaluated, key=lambda e: (-e.average_score, e.name))[:size],
            bottom_drivers=sorted(evaluated, key=lambda e: (e.average_score, e.name))[:size],
            most_incidents=sorted(
                (e for e in entries if e.incident_count > 0),
                key=lambda e: (-e.incident_count, e.name),
            )[:size],
            least_incidents=sorted(evaluated, key=lambda e: (e.incident_count, e.name))[:size],
        )

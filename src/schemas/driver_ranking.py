from datetime import date
from typing import List, Optional

from pydantic import BaseModel


class DriverRankingEntry(BaseModel):
    id: int
    name: str
    cpf: str
    city: Optional[str] = None
    state: Optional[str] = None
    birth_date: Optional[date] = None
    modality: str
    is_active: bool
    total_trips: int = 0
    trips_last_month: int = 0
    average_score: Optional[float] = None
    total_evaluations: int = 0
    incident_count: int = 0


class RankingStats(BaseModel):
    total_drivers: int
    active_drivers: int
    total_trips: int
    average_score: float
    drivers_with_evaluations: int


class DriverRanking(BaseModel):
    stats: RankingStats
    drivers: List[DriverRankingEntry]
    top_drivers: List[DriverRankingEntry]
    bottom_drivers: List[DriverRankingEntry]
    most_incidents: List[DriverRankingEntry]
    least_incidents: List[DriverRankingEntry]

from fastapi import APIRouter, Depends

from src.schemas import DriverRanking, TokenInfo
from src.services import DriverRankingService
from src.utils.dependencies import get_service, get_current_user

router = APIRouter(prefix="/driver-ranking", tags=["driver-ranking"])

RankingServiceDep = Depends(get_service(DriverRankingService))


@router.get("/", response_model=DriverRanking)
def get_driver_ranking(
    service: DriverRankingService = RankingServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.get_ranking()

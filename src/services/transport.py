from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from src.config.logger import get_logger
from src.repositories import DriverRepository, TransportRepository
from src.schemas import TransportCreate, TransportOut, TransportUpdate
from src.utils.constants import TransportStatusConst
from src.utils.utils import utc_now

logger = get_logger(__name__)


class TransportService:
    def __init__(self, db: Session):
        self.repo = TransportRepository(db)
        self.driver_repo = DriverRepository(db)

    def create_transport(self, transport_in: TransportCreate) -> TransportOut:
        if transport_in.driver_id is not None:
            self._ensure_driver(transport_in.driver_id)
        delivered_at = utc_now() if transport_in.status == TransportStatusConst.ENTREGUE else None
        created = self.repo.create(transport_in, delivered_at=delivered_at)
        logger.info("Created transport %s", created.request_number)
        return created

    def get_transport(self, transport_id: int) -> Optional[TransportOut]:
        return self.repo.get(transport_id)

    def list_transports(
        self,
        skip: int = 0,
        limit: int | None = None,
        status: TransportStatusConst | None = None,
        driver_id: int | None = None,
    ) -> List[TransportOut]:
        return self.repo.list(skip=skip, limit=limit, status=status, driver_id=driver_id)

    def update_transport(self, transport_id: int, transport_in: TransportUpdate) -> Optional[TransportOut]:
        logger.info("Updating transport %s", transport_id)
        db_obj = self.repo.get(transport_id)
        if not db_obj:
            return None
        if transport_in.driver_id is not None:
            self._ensure_driver(transport_in.driver_id)

        delivered_at = None
        if transport_in.status == TransportStatusConst.ENTREGUE and db_obj.delivered_at is None:
            delivered_at = utc_now()
        return self.repo.update(db_obj, transport_in, delivered_at=delivered_at)

    def _ensure_driver(self, driver_id: int) -> None:
        if not self.driver_repo.get(driver_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Driver not found")

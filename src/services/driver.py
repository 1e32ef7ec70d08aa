from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from src.config.logger import get_logger
from src.repositories import DriverRepository
from src.schemas import DriverCreate, DriverDeleteOut, DriverOut, DriverUpdate

logger = get_logger(__name__)


class DriverService:
    def __init__(self, db: Session):
        self.repo = DriverRepository(db)

    def create_driver(self, driver_in: DriverCreate) -> DriverOut:
        logger.info("Creating driver %s", driver_in.name)
        if self.repo.get_by_cpf(driver_in.cpf):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"A driver with CPF {driver_in.cpf} already exists",
            )
        return self.repo.create(driver_in)

    def get_driver(self, driver_id: int) -> Optional[DriverOut]:
        return self.repo.get(driver_id)

    def list_drivers(
        self, skip: int = 0, limit: int | None = None, active_only: bool = False
    ) -> List[DriverOut]:
        return self.repo.list(skip=skip, limit=limit, active_only=active_only)

    def update_driver(self, driver_id: int, driver_in: DriverUpdate) -> Optional[DriverOut]:
        logger.info("Updating driver %s", driver_id)
        db_obj = self.repo.get(driver_id)
        if not db_obj:
            return None
        return self.repo.update(db_obj, driver_in)

    def delete_driver(self, driver_id: int) -> Optional[DriverDeleteOut]:
        db_obj = self.repo.get(driver_id)
        if not db_obj:
            logger.warning("Driver %s not found", driver_id)
            return None
        if self.repo.count_transports(driver_id):
            logger.info("Deactivating driver %s", driver_id)
            self.repo.deactivate(db_obj)
            return DriverDeleteOut(id=driver_id, deleted="soft")
        logger.info("Deleting driver %s", driver_id)
        self.repo.delete(db_obj)
        return DriverDeleteOut(id=driver_id, deleted="hard")

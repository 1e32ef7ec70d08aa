from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Optional, List

from src.models import Driver, Transport
from src.schemas.driver import DriverCreate, DriverUpdate


class DriverRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, driver_id: int) -> Optional[Driver]:
        return self.db.query(Driver).filter(Driver.id == driver_id).first()

    def get_by_cpf(self, cpf: str) -> Optional[Driver]:
        return self.db.query(Driver).filter(Driver.cpf == cpf).first()

    def list(
        self,
        skip: int = 0,
        limit: int | None = None,
        active_only: bool = False,
    ) -> List[Driver]:
        query = self.db.query(Driver)
        if active_only:
            query = query.filter(Driver.is_active.is_(True))
        query = query.order_by(Driver.name, Driver.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_transports(self, driver_id: int) -> int:
        return (
            self.db.query(func.count(Transport.id))
            .filter(Transport.driver_id == driver_id)
            .scalar()
        )

    def create(self, driver_in: DriverCreate) -> Driver:
        db_obj = Driver(**driver_in.model_dump(exclude_none=True))
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: Driver, driver_in: DriverUpdate) -> Driver:
        update_data = driver_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def deactivate(self, db_obj: Driver) -> Driver:
        db_obj.is_active = False
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: Driver) -> None:
        self.db.delete(db_obj)
        self.db.commit()

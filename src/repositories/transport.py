from sqlalchemy.orm import Session, selectinload
from typing import Optional, List

from src.models import DriverEvaluation, RequestCounter, Transport
from src.schemas.transport import TransportCreate, TransportUpdate
from src.utils.constants import TransportConst, TransportStatusConst
from src.utils.utils import format_request_number


class TransportRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, transport_id: int) -> Optional[Transport]:
        return (
            self.db.query(Transport)
            .options(selectinload(Transport.driver))
            .filter(Transport.id == transport_id)
            .first()
        )

    def list(
        self,
        skip: int = 0,
        limit: int | None = None,
        status: TransportStatusConst | None = None,
        driver_id: int | None = None,
    ) -> List[Transport]:
        query = self.db.query(Transport)
        if status is not None:
            query = query.filter(Transport.status == TransportStatusConst(status).value)
        if driver_id is not None:
            query = query.filter(Transport.driver_id == driver_id)
        query = query.order_by(Transport.id.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def list_pending_evaluation(self) -> List[Transport]:
        """Delivered transports with a driver and no evaluation yet."""
        return (
            self.db.query(Transport)
            .options(selectinload(Transport.driver))
            .outerjoin(DriverEvaluation, DriverEvaluation.transport_id == Transport.id)
            .filter(
                Transport.status == TransportStatusConst.ENTREGUE.value,
                Transport.driver_id.isnot(None),
                DriverEvaluation.id.is_(None),
            )
            .order_by(Transport.id.desc())
            .all()
        )

    def create(self, transport_in: TransportCreate, delivered_at=None) -> Transport:
        data = transport_in.model_dump(exclude_none=True)
        data["status"] = TransportStatusConst(data["status"]).value
        try:
            db_obj = Transport(
                **data,
                request_number=self._next_request_number(),
                delivered_at=delivered_at,
            )
            self.db.add(db_obj)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: Transport, transport_in: TransportUpdate, delivered_at=None) -> Transport:
        update_data = transport_in.model_dump(exclude_unset=True)
        if update_data.get("status") is not None:
            update_data["status"] = TransportStatusConst(update_data["status"]).value
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        if delivered_at is not None:
            db_obj.delivered_at = delivered_at
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def _next_request_number(self) -> str:
        # row lock keeps concurrent inserts from drawing the same number
        counter = (
            self.db.query(RequestCounter)
            .filter(RequestCounter.id == TransportConst.COUNTER_ID)
            .with_for_update()
            .first()
        )
        if counter is None:
            counter = RequestCounter(id=TransportConst.COUNTER_ID, last_number=0)
            self.db.add(counter)
        counter.last_number = (counter.last_number or 0) + 1
        self.db.flush()
        return format_request_number(
            counter.last_number,
            TransportConst.REQUEST_PREFIX,
            TransportConst.REQUEST_DIGITS,
        )

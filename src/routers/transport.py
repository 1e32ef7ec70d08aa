from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from src.schemas import TokenInfo, TransportCreate, TransportOut, TransportUpdate
from src.services import TransportService
from src.utils.constants import RoleConst, TransportStatusConst
from src.utils.dependencies import get_service, get_current_user, require_roles

router = APIRouter(prefix="/transports", tags=["transports"])

TransportServiceDep = Depends(get_service(TransportService))
Editors = Depends(require_roles(RoleConst.ADMIN, RoleConst.OPERADOR))


@router.post("/", response_model=TransportOut, status_code=status.HTTP_201_CREATED)
def create_transport(
    transport_in: TransportCreate,
    service: TransportService = TransportServiceDep,
    token: TokenInfo = Editors,
):
    return service.create_transport(transport_in)


@router.get("/{transport_id}/", response_model=TransportOut)
def read_transport(
    transport_id: int,
    service: TransportService = TransportServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    transport = service.get_transport(transport_id)
    if not transport:
        raise HTTPException(status_code=404, detail="Transport not found")
    return transport


@router.get("/", response_model=list[TransportOut])
def list_transports(
    skip: int = 0,
    limit: int | None = None,
    status: Optional[TransportStatusConst] = None,
    driver_id: Optional[int] = None,
    service: TransportService = TransportServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.list_transports(skip=skip, limit=limit, status=status, driver_id=driver_id)


@router.patch("/{transport_id}/", response_model=TransportOut)
def update_transport(
    transport_id: int,
    transport_in: TransportUpdate,
    service: TransportService = TransportServiceDep,
    token: TokenInfo = Editors,
):
    updated = service.update_transport(transport_id, transport_in)
    if not updated:
        raise HTTPException(status_code=404, detail="Transport not found")
    return updated

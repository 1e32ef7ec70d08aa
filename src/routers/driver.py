from fastapi import APIRouter, Depends, HTTPException, status

from src.schemas import DriverCreate, DriverDeleteOut, DriverOut, DriverUpdate, TokenInfo
from src.services import DriverService
from src.utils.constants import RoleConst
from src.utils.dependencies import get_service, get_current_user, require_roles

router = APIRouter(prefix="/drivers", tags=["drivers"])

DriverServiceDep = Depends(get_service(DriverService))
Editors = Depends(require_roles(RoleConst.ADMIN, RoleConst.OPERADOR))


@router.post("/", response_model=DriverOut, status_code=status.HTTP_201_CREATED)
def create_driver(
    driver_in: DriverCreate,
    service: DriverService = DriverServiceDep,
    token: TokenInfo = Editors,
):
    return service.create_driver(driver_in)


@router.get("/{driver_id}/", response_model=DriverOut)
def read_driver(
    driver_id: int,
    service: DriverService = DriverServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    driver = service.get_driver(driver_id)
    if not driver:
        raise HTTPException(status_code=404, detail="Driver not found")
    return driver


@router.get("/", response_model=list[DriverOut])
def list_drivers(
    skip: int = 0,
    limit: int | None = None,
    active_only: bool = False,
    service: DriverService = DriverServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    return service.list_drivers(skip=skip, limit=limit, active_only=active_only)


@router.patch("/{driver_id}/", response_model=DriverOut)
def update_driver(
    driver_id: int,
    driver_in: DriverUpdate,
    service: DriverService = DriverServiceDep,
    token: TokenInfo = Editors,
):
    updated = service.update_driver(driver_id, driver_in)
    if not updated:
        raise HTTPException(status_code=404, detail="Driver not found")
    return updated


@router.delete("/{driver_id}/", response_model=DriverDeleteOut)
def delete_driver(
    driver_id: int,
    service: DriverService = DriverServiceDep,
    token: TokenInfo = Depends(require_roles(RoleConst.ADMIN)),
):
    result = service.delete_driver(driver_id)
    if not result:
        raise HTTPException(status_code=404, detail="Driver not found")
    return result

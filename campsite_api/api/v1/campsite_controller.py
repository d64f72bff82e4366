"""
Campsite Controller
===================

FastAPI controller for top-level campsite endpoints.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from campsite_api.api.v1.dependencies import get_campsite_service, get_current_principal
from campsite_api.application.dto.campsite_dto import (
    CampsiteResponse,
    DeletionReportResponse,
    ErrorResponse,
)
from campsite_api.application.services.campsite_service import CampsiteService
from campsite_api.domain.exceptions import UnsupportedOperationError
from campsite_api.domain.models.principal import Principal

RESOURCE_PATH = "/campsites"

router = APIRouter(tags=["campsites"])


@router.get(
    "",
    response_model=List[CampsiteResponse],
    summary="List campsites",
    description="Get every campsite. Comment authors are resolved. No authentication required.",
)
def list_campsites(
    service: CampsiteService = Depends(get_campsite_service),
) -> List[CampsiteResponse]:
    """List all campsites."""
    return [CampsiteResponse.from_view(view) for view in service.list_all()]


@router.post(
    "",
    response_model=CampsiteResponse,
    summary="Create a campsite",
    description="Create a campsite from a field bag. Admin only. `id` and `comments` in the body are ignored.",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def create_campsite(
    payload: Dict[str, Any] = Body(...),
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
) -> CampsiteResponse:
    """Create a campsite."""
    return CampsiteResponse.from_entity(service.create(payload, principal))


@router.put(
    "",
    summary="Not supported",
    responses={403: {"model": ErrorResponse}},
)
def replace_all_campsites(principal: Principal = Depends(get_current_principal)) -> None:
    """PUT on the collection is deliberately not implemented."""
    raise UnsupportedOperationError("PUT", RESOURCE_PATH)


@router.delete(
    "",
    response_model=DeletionReportResponse,
    summary="Delete all campsites",
    description="Delete every campsite together with its comments. Admin only.",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def delete_all_campsites(
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
) -> DeletionReportResponse:
    """Delete every campsite."""
    return DeletionReportResponse.from_report(service.delete_all(principal))


@router.get(
    "/{campsite_id}",
    response_model=CampsiteResponse,
    summary="Get campsite by ID",
    responses={404: {"model": ErrorResponse}},
)
def get_campsite(
    campsite_id: str,
    service: CampsiteService = Depends(get_campsite_service),
) -> CampsiteResponse:
    """Get a specific campsite by ID."""
    return CampsiteResponse.from_view(service.get_one(campsite_id))


@router.post(
    "/{campsite_id}",
    summary="Not supported",
    responses={403: {"model": ErrorResponse}},
)
def post_to_campsite(campsite_id: str, principal: Principal = Depends(get_current_principal)) -> None:
    """POST on a single campsite is deliberately not implemented."""
    raise UnsupportedOperationError("POST", f"{RESOURCE_PATH}/{campsite_id}")


@router.put(
    "/{campsite_id}",
    response_model=CampsiteResponse,
    summary="Update campsite fields",
    description="Overwrite top-level fields of a campsite (shallow). Admin only.",
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def replace_campsite(
    campsite_id: str,
    payload: Dict[str, Any] = Body(...),
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
) -> CampsiteResponse:
    """Update a campsite's fields."""
    return CampsiteResponse.from_entity(service.replace_fields(campsite_id, payload, principal))


@router.delete(
    "/{campsite_id}",
    response_model=DeletionReportResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete a campsite",
    description="Delete one campsite and its comments. Admin only. Unknown ids report `deleted_count: 0`.",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def delete_campsite(
    campsite_id: str,
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
) -> DeletionReportResponse:
    """Delete a campsite."""
    return DeletionReportResponse.from_report(service.delete_one(campsite_id, principal))

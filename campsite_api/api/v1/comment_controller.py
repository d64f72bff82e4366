"""
Comment Controller
==================

FastAPI controller for the comments nested under a campsite.

Edits and deletes of a single comment are author-only. A non-author gets a
403 whose body is ``{"error": ...}`` rather than the usual error body.
"""
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from campsite_api.api.v1.campsite_controller import RESOURCE_PATH
from campsite_api.api.v1.dependencies import get_campsite_service, get_current_principal
from campsite_api.application.dto.campsite_dto import CampsiteResponse, ErrorResponse
from campsite_api.application.dto.comment_dto import (
    CommentCreateRequest,
    CommentDeniedResponse,
    CommentResponse,
    CommentUpdateRequest,
    comments_response,
)
from campsite_api.application.services.campsite_service import CampsiteService
from campsite_api.application.views import CommentMutationOutcome
from campsite_api.domain.exceptions import UnsupportedOperationError
from campsite_api.domain.models.principal import Principal

router = APIRouter(tags=["comments"])


def _render_outcome(outcome: CommentMutationOutcome) -> Union[CampsiteResponse, JSONResponse]:
    if outcome.denied:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=CommentDeniedResponse(error=outcome.denied_message).model_dump(),
        )
    return CampsiteResponse.from_entity(outcome.campsite)


@router.get(
    "/{campsite_id}/comments",
    response_model=List[CommentResponse],
    summary="List comments",
    description="Comments of a campsite with authors resolved. No authentication required.",
    responses={404: {"model": ErrorResponse}},
)
def list_comments(
    campsite_id: str,
    service: CampsiteService = Depends(get_campsite_service),
) -> List[CommentResponse]:
    return comments_response(service.list_comments(campsite_id))


@router.post(
    "/{campsite_id}/comments",
    response_model=CampsiteResponse,
    summary="Add a comment",
    description="Append a comment authored by the caller. Any authenticated user.",
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def add_comment(
    campsite_id: str,
    request: CommentCreateRequest,
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
) -> CampsiteResponse:
    campsite = service.add_comment(campsite_id, request.text, principal, rating=request.rating)
    return CampsiteResponse.from_entity(campsite)


@router.put(
    "/{campsite_id}/comments",
    summary="Not supported",
    responses={403: {"model": ErrorResponse}},
)
def replace_comments(campsite_id: str, principal: Principal = Depends(get_current_principal)) -> None:
    raise UnsupportedOperationError("PUT", f"{RESOURCE_PATH}/{campsite_id}/comments")


@router.delete(
    "/{campsite_id}/comments",
    response_model=CampsiteResponse,
    summary="Delete all comments",
    description="Remove every comment of a campsite. Admin only.",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def clear_comments(
    campsite_id: str,
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
) -> CampsiteResponse:
    return CampsiteResponse.from_entity(service.clear_comments(campsite_id, principal))


@router.get(
    "/{campsite_id}/comments/{comment_id}",
    response_model=CommentResponse,
    summary="Get a comment",
    responses={404: {"model": ErrorResponse}},
)
def get_comment(
    campsite_id: str,
    comment_id: str,
    service: CampsiteService = Depends(get_campsite_service),
) -> CommentResponse:
    return comments_response(service.get_comment(campsite_id, comment_id))[0]


@router.post(
    "/{campsite_id}/comments/{comment_id}",
    summary="Not supported",
    responses={403: {"model": ErrorResponse}},
)
def post_to_comment(
    campsite_id: str,
    comment_id: str,
    principal: Principal = Depends(get_current_principal),
) -> None:
    raise UnsupportedOperationError("POST", f"{RESOURCE_PATH}/{campsite_id}/comments/{comment_id}")


@router.put(
    "/{campsite_id}/comments/{comment_id}",
    response_model=CampsiteResponse,
    summary="Edit a comment",
    description="Change the text of your own comment. Empty or missing text leaves it unchanged.",
    responses={
        401: {"model": ErrorResponse},
        403: {"model": CommentDeniedResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def update_comment(
    campsite_id: str,
    comment_id: str,
    request: Optional[CommentUpdateRequest] = None,
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
):
    text = request.text if request else None
    outcome = service.update_comment(campsite_id, comment_id, text, principal)
    return _render_outcome(outcome)


@router.delete(
    "/{campsite_id}/comments/{comment_id}",
    response_model=CampsiteResponse,
    summary="Delete a comment",
    description="Remove your own comment.",
    responses={
        401: {"model": ErrorResponse},
        403: {"model": CommentDeniedResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def delete_comment(
    campsite_id: str,
    comment_id: str,
    principal: Principal = Depends(get_current_principal),
    service: CampsiteService = Depends(get_campsite_service),
):
    outcome = service.delete_comment(campsite_id, comment_id, principal)
    return _render_outcome(outcome)

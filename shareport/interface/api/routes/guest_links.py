"""Guest link routes.

The creation body is decoded by hand rather than bound to a pydantic model:
an empty body, a non-object, or a field of the wrong JSON type must all be
reported as 400, never as FastAPI's 422.
"""

import json

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from shareport.application.usecase.guest_link import (
    CreateGuestLinkRequest,
    CreateGuestLinkResponse,
    CreateGuestLinkUseCase,
    DeleteGuestLinkRequest,
    DeleteGuestLinkUseCase,
    GetGuestLinkRequest,
    GetGuestLinkUseCase,
    GuestLinkItem,
    ListGuestLinksRequest,
    ListGuestLinksResponse,
    ListGuestLinksUseCase,
)
from shareport.domain.error import NotFoundError, ValidationError

router = APIRouter(
    prefix="/api/guest-links", tags=["guest-links"], route_class=DishkaRoute
)


async def _read_json_object(request: Request) -> dict:
    body = await request.body()
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        # ValueError also covers integers past the int conversion limit
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be valid JSON",
        )
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a JSON object",
        )
    return payload


@router.post("", response_model=CreateGuestLinkResponse)
async def create_guest_link(
    request: Request,
    create_guest_link_use_case: FromDishka[CreateGuestLinkUseCase],
) -> CreateGuestLinkResponse:
    """Create a guest link.

    Example:
        POST /api/guest-links
        {
            "label": "For my good pal, Maurice",
            "urlExpirationTime": "2030-01-02T03:04:25Z",
            "fileLifetime": "720h0m0s",
            "maxFileBytes": 1048576,
            "maxFileUploads": 1
        }

        Response:
        {"id": "abcdefgh23456789"}

    Raises:
        HTTPException: 400 if the body or any field is invalid
    """
    payload = await _read_json_object(request)
    try:
        return await create_guest_link_use_case.execute(
            CreateGuestLinkRequest.model_validate(payload)
        )
    except ValidationError as e:
        logfire.info("Guest link rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=ListGuestLinksResponse)
async def list_guest_links(
    list_guest_links_use_case: FromDishka[ListGuestLinksUseCase],
    active_only: bool = Query(default=False, alias="active"),
) -> ListGuestLinksResponse:
    """List guest links, newest first.

    Args:
        list_guest_links_use_case: List guest links use case from DI
        active_only: Only return links whose URL has not expired
    """
    return await list_guest_links_use_case.execute(
        ListGuestLinksRequest(active_only=active_only)
    )


@router.get("/{guest_link_id}", response_model=GuestLinkItem)
async def get_guest_link(
    guest_link_id: str,
    get_guest_link_use_case: FromDishka[GetGuestLinkUseCase],
) -> GuestLinkItem:
    """Get a single guest link.

    Raises:
        HTTPException: 400 if the ID is malformed, 404 if it does not exist
    """
    try:
        return await get_guest_link_use_case.execute(
            GetGuestLinkRequest(guest_link_id=guest_link_id)
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/{guest_link_id}")
async def delete_guest_link(
    guest_link_id: str,
    delete_guest_link_use_case: FromDishka[DeleteGuestLinkUseCase],
) -> Response:
    """Delete a guest link.

    Succeeds whether or not the guest link existed. Files already uploaded
    through the link are kept.

    Raises:
        HTTPException: 400 if the ID is malformed
    """
    try:
        await delete_guest_link_use_case.execute(
            DeleteGuestLinkRequest(guest_link_id=guest_link_id)
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return Response(status_code=status.HTTP_200_OK)

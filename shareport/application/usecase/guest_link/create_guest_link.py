"""Create guest link use case."""

from typing import Any

import logfire
from pydantic import BaseModel, ConfigDict, Field

from shareport.application.usecase.base import BaseUseCase
from shareport.domain.service import GuestLinkService


class CreateGuestLinkRequest(BaseModel):
    """Request to create a guest link.

    Fields hold the raw decoded JSON values; type and range checks happen in
    the domain so that every rejection is reported the same way.
    """

    model_config = ConfigDict(populate_by_name=True)

    label: Any = None
    url_expiration_time: Any = Field(default=None, alias="urlExpirationTime")
    file_lifetime: Any = Field(default=None, alias="fileLifetime")
    max_file_bytes: Any = Field(default=None, alias="maxFileBytes")
    max_file_uploads: Any = Field(default=None, alias="maxFileUploads")


class CreateGuestLinkResponse(BaseModel):
    """Response after creating a guest link."""

    id: str


class CreateGuestLinkUseCase(
    BaseUseCase[CreateGuestLinkRequest, CreateGuestLinkResponse]
):
    """Use case for creating a guest link."""

    def __init__(self, guest_link_service: GuestLinkService) -> None:
        """Initialize use case.

        Args:
            guest_link_service: Guest link domain service
        """
        self.guest_link_service = guest_link_service

    async def execute(self, request: CreateGuestLinkRequest) -> CreateGuestLinkResponse:
        """Execute create guest link use case.

        Args:
            request: Create guest link request

        Returns:
            Response carrying the new guest link's ID

        Raises:
            InvalidFieldError: If the request fails validation
        """
        with logfire.span("create_guest_link"):
            guest_link = await self.guest_link_service.create_guest_link(
                label=request.label,
                url_expiration_time=request.url_expiration_time,
                file_lifetime=request.file_lifetime,
                max_file_bytes=request.max_file_bytes,
                max_file_uploads=request.max_file_uploads,
            )
            return CreateGuestLinkResponse(id=guest_link.id.root)

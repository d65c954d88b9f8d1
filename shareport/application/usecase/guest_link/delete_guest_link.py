"""Delete guest link use case."""

from pydantic import BaseModel

from shareport.application.usecase.base import BaseUseCase
from shareport.domain.service import GuestLinkService


class DeleteGuestLinkRequest(BaseModel):
    """Delete guest link request."""

    guest_link_id: str  # Raw path parameter, validated by the service


class DeleteGuestLinkUseCase(BaseUseCase[DeleteGuestLinkRequest, None]):
    """Use case for deleting a guest link.

    Succeeds whether or not the guest link existed.
    """

    def __init__(self, guest_link_service: GuestLinkService) -> None:
        """Initialize delete guest link use case.

        Args:
            guest_link_service: Guest link domain service
        """
        self.guest_link_service = guest_link_service

    async def execute(self, request: DeleteGuestLinkRequest) -> None:
        """Execute delete guest link flow.

        Raises:
            InvalidGuestLinkIdError: If the ID is malformed
        """
        await self.guest_link_service.delete_guest_link(request.guest_link_id)

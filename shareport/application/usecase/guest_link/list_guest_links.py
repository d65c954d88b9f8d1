"""List guest links use case."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shareport.application.usecase.base import BaseUseCase
from shareport.application.usecase.guest_link.get_guest_link import GuestLinkItem
from shareport.domain.service import GuestLinkService
from shareport.util.clock import Clock


class ListGuestLinksRequest(BaseModel):
    """List guest links request."""

    active_only: bool = False


class ListGuestLinksResponse(BaseModel):
    """List guest links response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    guest_links: list[GuestLinkItem]
    total: int


class ListGuestLinksUseCase(
    BaseUseCase[ListGuestLinksRequest, ListGuestLinksResponse]
):
    """Use case for listing guest links, newest first."""

    def __init__(self, guest_link_service: GuestLinkService, clock: Clock) -> None:
        """Initialize list guest links use case.

        Args:
            guest_link_service: Guest link domain service
            clock: Time source used to evaluate activity
        """
        self.guest_link_service = guest_link_service
        self.clock = clock

    async def execute(self, request: ListGuestLinksRequest) -> ListGuestLinksResponse:
        """Execute list guest links flow.

        Args:
            request: List request; ``active_only`` drops expired links

        Returns:
            Guest links with their derived activity at the current time
        """
        guest_links = await self.guest_link_service.list_guest_links()
        now = self.clock.now()
        items = [
            GuestLinkItem.from_guest_link(gl, now)
            for gl in guest_links
            if not request.active_only or gl.is_active(now)
        ]
        return ListGuestLinksResponse(guest_links=items, total=len(items))

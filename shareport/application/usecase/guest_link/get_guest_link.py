"""Get guest link use case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shareport.application.usecase.base import BaseUseCase
from shareport.domain.model import GuestLink
from shareport.domain.service import GuestLinkService
from shareport.util.clock import Clock
from shareport.util.duration import format_duration


class GuestLinkItem(BaseModel):
    """Wire representation of a guest link.

    Quotas are plain integers or null (unlimited); the file lifetime is a
    Go-style duration string where ``876000h0m0s`` means "forever".
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    label: str
    created: datetime
    url_expires: datetime
    file_lifetime: str
    max_file_bytes: int | None
    max_file_uploads: int | None
    is_active: bool

    @classmethod
    def from_guest_link(cls, guest_link: GuestLink, now: datetime) -> "GuestLinkItem":
        """Build the wire representation, evaluating activity at ``now``."""
        return cls(
            id=guest_link.id.root,
            label=guest_link.label.root,
            created=guest_link.created_at,
            url_expires=guest_link.url_expires,
            file_lifetime=format_duration(guest_link.file_lifetime.to_duration()),
            max_file_bytes=guest_link.max_file_bytes.as_optional_int(),
            max_file_uploads=guest_link.max_file_uploads.as_optional_int(),
            is_active=guest_link.is_active(now),
        )


class GetGuestLinkRequest(BaseModel):
    """Get guest link request."""

    guest_link_id: str  # Raw path parameter, validated by the service


class GetGuestLinkUseCase(BaseUseCase[GetGuestLinkRequest, GuestLinkItem]):
    """Use case for reading a single guest link."""

    def __init__(self, guest_link_service: GuestLinkService, clock: Clock) -> None:
        """Initialize get guest link use case.

        Args:
            guest_link_service: Guest link domain service
            clock: Time source used to evaluate activity
        """
        self.guest_link_service = guest_link_service
        self.clock = clock

    async def execute(self, request: GetGuestLinkRequest) -> GuestLinkItem:
        """Execute get guest link flow.

        Raises:
            InvalidGuestLinkIdError: If the ID is malformed
            NotFoundError: If the guest link does not exist
        """
        guest_link = await self.guest_link_service.get_guest_link(
            request.guest_link_id
        )
        return GuestLinkItem.from_guest_link(guest_link, self.clock.now())

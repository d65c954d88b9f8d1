"""Guest link use cases."""

from shareport.application.usecase.guest_link.create_guest_link import (
    CreateGuestLinkRequest,
    CreateGuestLinkResponse,
    CreateGuestLinkUseCase,
)
from shareport.application.usecase.guest_link.delete_guest_link import (
    DeleteGuestLinkRequest,
    DeleteGuestLinkUseCase,
)
from shareport.application.usecase.guest_link.get_guest_link import (
    GetGuestLinkRequest,
    GetGuestLinkUseCase,
    GuestLinkItem,
)
from shareport.application.usecase.guest_link.list_guest_links import (
    ListGuestLinksRequest,
    ListGuestLinksResponse,
    ListGuestLinksUseCase,
)

__all__ = [
    "CreateGuestLinkRequest",
    "CreateGuestLinkResponse",
    "CreateGuestLinkUseCase",
    "DeleteGuestLinkRequest",
    "DeleteGuestLinkUseCase",
    "GetGuestLinkRequest",
    "GetGuestLinkUseCase",
    "GuestLinkItem",
    "ListGuestLinksRequest",
    "ListGuestLinksResponse",
    "ListGuestLinksUseCase",
]

"""Application layer DI providers."""

from dishka import Scope, provide

from shareport.application.usecase.guest_link import (
    CreateGuestLinkUseCase,
    DeleteGuestLinkUseCase,
    GetGuestLinkUseCase,
    ListGuestLinksUseCase,
)
from shareport.domain.service import GuestLinkService
from shareport.util.clock import Clock
from shareport.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Guest link use cases
    @provide(scope=Scope.REQUEST)
    def get_create_guest_link_use_case(
        self, guest_link_service: GuestLinkService
    ) -> CreateGuestLinkUseCase:
        """Provide create guest link use case."""
        return CreateGuestLinkUseCase(guest_link_service=guest_link_service)

    @provide(scope=Scope.REQUEST)
    def get_get_guest_link_use_case(
        self, guest_link_service: GuestLinkService, clock: Clock
    ) -> GetGuestLinkUseCase:
        """Provide get guest link use case."""
        return GetGuestLinkUseCase(guest_link_service=guest_link_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_list_guest_links_use_case(
        self, guest_link_service: GuestLinkService, clock: Clock
    ) -> ListGuestLinksUseCase:
        """Provide list guest links use case."""
        return ListGuestLinksUseCase(
            guest_link_service=guest_link_service, clock=clock
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_guest_link_use_case(
        self, guest_link_service: GuestLinkService
    ) -> DeleteGuestLinkUseCase:
        """Provide delete guest link use case."""
        return DeleteGuestLinkUseCase(guest_link_service=guest_link_service)

"""Domain layer DI providers."""

from dishka import Scope, provide

from shareport.domain.repository import GuestLinkRepository
from shareport.domain.service import GuestLinkService
from shareport.util.clock import Clock
from shareport.util.di.base import ProviderBase
from shareport.util.id_generator import GuestLinkIdGenerator


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle. The ID generator is stateless and shared app-wide.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_id_generator(self) -> GuestLinkIdGenerator:
        """Provide guest link ID generator backed by OS entropy."""
        return GuestLinkIdGenerator()

    @provide
    def get_guest_link_service(
        self,
        guest_link_repository: GuestLinkRepository,
        id_generator: GuestLinkIdGenerator,
        clock: Clock,
    ) -> GuestLinkService:
        """Provide guest link domain service."""
        return GuestLinkService(
            guest_link_repository=guest_link_repository,
            id_generator=id_generator,
            clock=clock,
        )

"""Mock persistence providers for testing."""

from dishka import Scope, provide

from shareport.domain.repository import GuestLinkRepository
from shareport.persistence.repository.inmemory import InMemoryGuestLinkRepository
from shareport.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that every request against one container sees the same
    data. Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_guest_link_repository(self) -> GuestLinkRepository:
        """Provide in-memory guest link repository."""
        return InMemoryGuestLinkRepository()

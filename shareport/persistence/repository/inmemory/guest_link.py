"""In-memory guest link repository for testing."""

from shareport.domain.error import AlreadyExistsError, NotFoundError
from shareport.domain.model import GuestLink
from shareport.domain.repository.guest_link import GuestLinkRepository
from shareport.domain.value import GuestLinkId


class InMemoryGuestLinkRepository(GuestLinkRepository):
    """In-memory implementation of GuestLinkRepository for testing.

    Keeps the same strict contract as the PostgreSQL repository.
    """

    def __init__(self) -> None:
        self._guest_links: dict[GuestLinkId, GuestLink] = {}

    async def insert(self, guest_link: GuestLink) -> GuestLink:
        """Insert a new guest link.

        Raises:
            AlreadyExistsError: If the ID is already taken
        """
        if guest_link.id in self._guest_links:
            raise AlreadyExistsError("GuestLink", guest_link.id.root)
        self._guest_links[guest_link.id] = guest_link
        return guest_link

    async def get_by_id(self, guest_link_id: GuestLinkId) -> GuestLink:
        """Get a guest link by ID."""
        try:
            return self._guest_links[guest_link_id]
        except KeyError:
            raise NotFoundError("GuestLink", guest_link_id.root)

    async def delete_by_id(self, guest_link_id: GuestLinkId) -> None:
        """Delete a guest link by ID."""
        if self._guest_links.pop(guest_link_id, None) is None:
            raise NotFoundError("GuestLink", guest_link_id.root)

    async def list_all(self) -> list[GuestLink]:
        """List all guest links, newest first."""
        return sorted(
            self._guest_links.values(), key=lambda gl: gl.created_at, reverse=True
        )

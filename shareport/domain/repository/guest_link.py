"""Guest link repository interface."""

from abc import ABC, abstractmethod

from shareport.domain.model.guest_link import GuestLink
from shareport.domain.value import GuestLinkId


class GuestLinkRepository(ABC):
    """Repository for GuestLink entity.

    The contract is strict: lookups and deletes of absent IDs raise
    NotFoundError, and inserts of an existing ID raise AlreadyExistsError.
    Idempotent deletion is a service-level policy built on top of it.
    """

    @abstractmethod
    async def insert(self, guest_link: GuestLink) -> GuestLink:
        """Insert a new guest link.

        Args:
            guest_link: The guest link to store

        Returns:
            The stored guest link

        Raises:
            AlreadyExistsError: If a guest link with the same ID exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, guest_link_id: GuestLinkId) -> GuestLink:
        """Get a guest link by ID.

        Args:
            guest_link_id: The guest link's identifier

        Returns:
            The guest link

        Raises:
            NotFoundError: If no guest link has this ID
        """
        pass

    @abstractmethod
    async def delete_by_id(self, guest_link_id: GuestLinkId) -> None:
        """Delete a guest link by ID.

        Args:
            guest_link_id: The guest link's identifier

        Raises:
            NotFoundError: If no guest link has this ID
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[GuestLink]:
        """List all guest links, newest first.

        Returns:
            List of guest links
        """
        pass

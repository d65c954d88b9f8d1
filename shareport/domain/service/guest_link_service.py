"""Guest link domain service."""

from typing import Any

import logfire

from shareport.domain.error import AlreadyExistsError, NotFoundError
from shareport.domain.model.guest_link import GuestLink
from shareport.domain.repository import GuestLinkRepository
from shareport.domain.validation import parse_guest_link_id, parse_guest_link_request
from shareport.util.clock import Clock
from shareport.util.id_generator import GuestLinkIdGenerator

from .base import Service


class GuestLinkService(Service):
    """Domain service for the guest link lifecycle."""

    def __init__(
        self,
        guest_link_repository: GuestLinkRepository,
        id_generator: GuestLinkIdGenerator,
        clock: Clock,
    ) -> None:
        """Initialize guest link service.

        Args:
            guest_link_repository: Guest link repository
            id_generator: Source of new guest link IDs
            clock: Time source for creation timestamps
        """
        self.guest_link_repository = guest_link_repository
        self.id_generator = id_generator
        self.clock = clock

    async def create_guest_link(
        self,
        label: Any = None,
        url_expiration_time: Any = None,
        file_lifetime: Any = None,
        max_file_bytes: Any = None,
        max_file_uploads: Any = None,
    ) -> GuestLink:
        """Validate a creation request and store the new guest link.

        Arguments are the raw JSON values of the request fields.

        Returns:
            Created guest link

        Raises:
            InvalidFieldError: If any field fails validation (nothing is stored)
            AlreadyExistsError: If the generated ID collides with a stored one
        """
        with logfire.span("guest_link_service.create_guest_link"):
            terms = parse_guest_link_request(
                {
                    "label": label,
                    "urlExpirationTime": url_expiration_time,
                    "fileLifetime": file_lifetime,
                    "maxFileBytes": max_file_bytes,
                    "maxFileUploads": max_file_uploads,
                }
            )

            guest_link = GuestLink.from_terms(
                terms,
                link_id=self.id_generator.new(),
                created_at=self.clock.now(),
            )

            try:
                saved = await self.guest_link_repository.insert(guest_link)
            except AlreadyExistsError:
                logfire.error(
                    "Guest link ID collision", guest_link_id=str(guest_link.id)
                )
                raise

            logfire.info(
                "Guest link created",
                guest_link_id=str(saved.id),
                url_expires=saved.url_expires.isoformat(),
                file_lifetime=str(saved.file_lifetime),
            )
            return saved

    async def get_guest_link(self, guest_link_id: str) -> GuestLink:
        """Get a guest link by ID.

        Args:
            guest_link_id: Raw identifier from the request path

        Returns:
            The guest link

        Raises:
            InvalidGuestLinkIdError: If the ID is malformed (store not queried)
            NotFoundError: If no guest link has this ID
        """
        with logfire.span("guest_link_service.get_guest_link"):
            link_id = parse_guest_link_id(guest_link_id)
            try:
                guest_link = await self.guest_link_repository.get_by_id(link_id)
            except NotFoundError:
                logfire.warn("Guest link not found", guest_link_id=str(link_id))
                raise
            logfire.info("Guest link found", guest_link_id=str(link_id))
            return guest_link

    async def delete_guest_link(self, guest_link_id: str) -> None:
        """Delete a guest link.

        Deleting an ID that does not exist succeeds, so callers can retry
        freely. Files uploaded through the link are left alone.

        Args:
            guest_link_id: Raw identifier from the request path

        Raises:
            InvalidGuestLinkIdError: If the ID is malformed (store not queried)
        """
        with logfire.span("guest_link_service.delete_guest_link"):
            link_id = parse_guest_link_id(guest_link_id)
            try:
                await self.guest_link_repository.delete_by_id(link_id)
            except NotFoundError:
                logfire.info("Guest link already absent", guest_link_id=str(link_id))
                return
            logfire.info("Guest link deleted", guest_link_id=str(link_id))

    async def list_guest_links(self) -> list[GuestLink]:
        """List all guest links, newest first."""
        with logfire.span("guest_link_service.list_guest_links"):
            guest_links = await self.guest_link_repository.list_all()
            logfire.info("Guest links listed", count=len(guest_links))
            return guest_links

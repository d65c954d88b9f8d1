"""PostgreSQL implementation of GuestLink repository."""

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shareport.domain.error import AlreadyExistsError, NotFoundError
from shareport.domain.model import GuestLink
from shareport.domain.repository import GuestLinkRepository
from shareport.domain.value import GuestLinkId
from shareport.persistence.mappers import guest_link_to_dict, row_to_guest_link
from shareport.persistence.tables import guest_links_table


class PostgresGuestLinkRepository(GuestLinkRepository):
    """PostgreSQL implementation of GuestLinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, guest_link: GuestLink) -> GuestLink:
        """Insert a new guest link.

        The insert runs in a savepoint so a primary-key collision leaves the
        request's transaction usable.

        Raises:
            AlreadyExistsError: If the ID is already taken
        """
        stmt = insert(guest_links_table).values(**guest_link_to_dict(guest_link))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise AlreadyExistsError("GuestLink", guest_link.id.root)
        return guest_link

    async def get_by_id(self, guest_link_id: GuestLinkId) -> GuestLink:
        """Get a guest link by ID.

        Raises:
            NotFoundError: If no guest link has this ID
        """
        stmt = select(guest_links_table).where(
            guest_links_table.c.id == guest_link_id.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("GuestLink", guest_link_id.root)
        return row_to_guest_link(dict(row))

    async def delete_by_id(self, guest_link_id: GuestLinkId) -> None:
        """Delete a guest link by ID.

        Raises:
            NotFoundError: If no row was deleted
        """
        stmt = delete(guest_links_table).where(
            guest_links_table.c.id == guest_link_id.root
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise NotFoundError("GuestLink", guest_link_id.root)

    async def list_all(self) -> list[GuestLink]:
        """List all guest links, newest first."""
        stmt = select(guest_links_table).order_by(
            guest_links_table.c.created_at.desc()
        )
        result = await self.session.execute(stmt)
        return [row_to_guest_link(dict(row)) for row in result.mappings().all()]

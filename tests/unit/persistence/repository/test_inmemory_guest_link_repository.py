"""Tests for the in-memory guest link repository contract."""

from datetime import timedelta

import pytest

from shareport.domain.error import AlreadyExistsError, NotFoundError
from shareport.domain.value import GuestLinkId
from shareport.persistence.repository.inmemory import InMemoryGuestLinkRepository
from tests.conftest import make_guest_link
from tests.di import TEST_NOW


class TestInMemoryGuestLinkRepository:
    """Tests for InMemoryGuestLinkRepository."""

    @pytest.mark.asyncio
    async def test_insert_then_get(self):
        """An inserted link can be read back by ID."""
        repo = InMemoryGuestLinkRepository()
        guest_link = make_guest_link()

        await repo.insert(guest_link)

        assert await repo.get_by_id(guest_link.id) == guest_link

    @pytest.mark.asyncio
    async def test_insert_duplicate_id_fails(self):
        """Inserting a second link with the same ID raises and keeps the first."""
        repo = InMemoryGuestLinkRepository()
        first = make_guest_link(label="first")
        await repo.insert(first)

        with pytest.raises(AlreadyExistsError):
            await repo.insert(make_guest_link(label="second"))

        assert (await repo.get_by_id(first.id)).label.root == "first"

    @pytest.mark.asyncio
    async def test_get_missing_raises(self):
        """Reading an unknown ID raises NotFoundError."""
        repo = InMemoryGuestLinkRepository()

        with pytest.raises(NotFoundError):
            await repo.get_by_id(GuestLinkId("abcdefghijkmnopq"))

    @pytest.mark.asyncio
    async def test_delete_removes_link(self):
        """A deleted link can no longer be read."""
        repo = InMemoryGuestLinkRepository()
        guest_link = await repo.insert(make_guest_link())

        await repo.delete_by_id(guest_link.id)

        with pytest.raises(NotFoundError):
            await repo.get_by_id(guest_link.id)

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self):
        """The repository reports deletes of unknown IDs."""
        repo = InMemoryGuestLinkRepository()

        with pytest.raises(NotFoundError):
            await repo.delete_by_id(GuestLinkId("abcdefghijkmnopq"))

    @pytest.mark.asyncio
    async def test_list_all_newest_first(self):
        """Links are listed by creation time, newest first."""
        repo = InMemoryGuestLinkRepository()
        oldest = await repo.insert(
            make_guest_link(
                link_id="aaaaaaaaaaaaaaaa", created_at=TEST_NOW - timedelta(days=2)
            )
        )
        newest = await repo.insert(make_guest_link(link_id="bbbbbbbbbbbbbbbb"))
        middle = await repo.insert(
            make_guest_link(
                link_id="cccccccccccccccc", created_at=TEST_NOW - timedelta(days=1)
            )
        )

        assert await repo.list_all() == [newest, middle, oldest]

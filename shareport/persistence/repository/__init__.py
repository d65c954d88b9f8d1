"""PostgreSQL repository implementations."""

from shareport.persistence.repository.guest_link import PostgresGuestLinkRepository

__all__ = [
    "PostgresGuestLinkRepository",
]

"""In-memory repository implementations for testing."""

from .guest_link import InMemoryGuestLinkRepository

__all__ = [
    "InMemoryGuestLinkRepository",
]

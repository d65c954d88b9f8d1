"""Repository interfaces for the shareport domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from shareport.domain.repository.guest_link import GuestLinkRepository

__all__ = [
    "GuestLinkRepository",
]

"""Domain model entities for shareport."""

from shareport.domain.model.guest_link import GuestLink, GuestLinkTerms

__all__ = [
    "GuestLink",
    "GuestLinkTerms",
]

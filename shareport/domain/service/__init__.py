"""Domain services."""

from .base import Service
from .guest_link_service import GuestLinkService

__all__ = [
    "GuestLinkService",
    "Service",
]

"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Any

from shareport.domain.model import GuestLink
from shareport.domain.value import (
    FILE_LIFETIME_INFINITE,
    UNLIMITED,
    FileLifetime,
    GuestLinkId,
    GuestLinkLabel,
    UploadLimit,
)
from tests.di import TEST_NOW


def make_guest_link(
    link_id: str = "abcdefghijkmnopq",
    label: str = "",
    created_at: datetime = TEST_NOW,
    url_expires: datetime | None = None,
    file_lifetime: FileLifetime = FILE_LIFETIME_INFINITE,
    max_file_bytes: UploadLimit = UNLIMITED,
    max_file_uploads: UploadLimit = UNLIMITED,
) -> GuestLink:
    """Helper function to build a guest link for tests.

    Defaults to an unlabeled, unlimited link that expires a day after
    TEST_NOW.
    """
    return GuestLink(
        id=GuestLinkId(link_id),
        label=GuestLinkLabel(label),
        created_at=created_at,
        url_expires=url_expires or created_at + timedelta(days=1),
        file_lifetime=file_lifetime,
        max_file_bytes=max_file_bytes,
        max_file_uploads=max_file_uploads,
    )


def valid_payload(**overrides: Any) -> dict[str, Any]:
    """A creation request body that passes validation, with overrides."""
    payload: dict[str, Any] = {
        "label": "For my good pal, Maurice",
        "urlExpirationTime": "2030-01-02T03:04:25Z",
        "fileLifetime": "876000h0m0s",
        "maxFileBytes": None,
        "maxFileUploads": None,
    }
    payload.update(overrides)
    return payload

"""Guest link entity.

A guest link lets an unauthenticated party upload files until the link's URL
expires, optionally bounded by per-file size and upload-count quotas.
"""

from datetime import datetime

from pydantic import AwareDatetime, model_validator

from shareport.domain.model.common import DomainModel
from shareport.domain.value import (
    EMPTY_LABEL,
    MIN_GUEST_UPLOAD_MAX_FILE_BYTES,
    UNLIMITED,
    Bounded,
    FileLifetime,
    GuestLinkId,
    GuestLinkLabel,
    GuestLinkStatus,
    UploadLimit,
)


class GuestLinkTerms(DomainModel):
    """Validated constraints of a guest link, before it gets an identity.

    Produced by request validation; the service adds ``id`` and
    ``created_at`` to turn it into a GuestLink.
    """

    label: GuestLinkLabel = EMPTY_LABEL
    url_expires: AwareDatetime
    file_lifetime: FileLifetime
    max_file_bytes: UploadLimit = UNLIMITED
    max_file_uploads: UploadLimit = UNLIMITED

    @model_validator(mode="after")
    def check_max_file_bytes_floor(self) -> "GuestLinkTerms":
        """Reject byte quotas too small to hold any useful file."""
        if (
            isinstance(self.max_file_bytes, Bounded)
            and self.max_file_bytes.limit < MIN_GUEST_UPLOAD_MAX_FILE_BYTES
        ):
            raise ValueError(
                f"max_file_bytes must be at least {MIN_GUEST_UPLOAD_MAX_FILE_BYTES}"
            )
        return self


class GuestLink(GuestLinkTerms):
    """Guest link entity.

    Business rules:
    - ID and creation time are assigned by the service, never by the caller
    - No field changes after creation; the record is only ever deleted
    - Active/expired is derived from url_expires and the current time
    - Deleting a link does not delete files uploaded through it
    """

    id: GuestLinkId
    created_at: AwareDatetime

    def is_expired(self, now: datetime) -> bool:
        """Check whether the link can no longer start uploads at ``now``."""
        return now >= self.url_expires

    def is_active(self, now: datetime) -> bool:
        return not self.is_expired(now)

    def status(self, now: datetime) -> GuestLinkStatus:
        if self.is_expired(now):
            return GuestLinkStatus.EXPIRED
        return GuestLinkStatus.ACTIVE

    @classmethod
    def from_terms(
        cls, terms: GuestLinkTerms, link_id: GuestLinkId, created_at: datetime
    ) -> "GuestLink":
        """Assemble a guest link from validated terms and an identity."""
        return cls(id=link_id, created_at=created_at, **dict(terms))

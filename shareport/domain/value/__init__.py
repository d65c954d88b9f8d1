"""Domain value objects for shareport."""

from shareport.domain.value.identifiers import (
    GUEST_LINK_ID_ALPHABET,
    GUEST_LINK_ID_LENGTH,
    GuestLinkId,
    is_valid_guest_link_id,
)
from shareport.domain.value.types import (
    EMPTY_LABEL,
    FILE_LIFETIME_INFINITE,
    INFINITE_FILE_LIFETIME_DURATION,
    MAX_LABEL_LENGTH,
    MIN_GUEST_UPLOAD_MAX_FILE_BYTES,
    UNLIMITED,
    Bounded,
    DaysFileLifetime,
    FileLifetime,
    GuestLinkLabel,
    GuestLinkStatus,
    InfiniteFileLifetime,
    Unlimited,
    UploadLimit,
    bounded,
    file_lifetime_in_days,
)

__all__ = [
    # Identifiers
    "GUEST_LINK_ID_ALPHABET",
    "GUEST_LINK_ID_LENGTH",
    "GuestLinkId",
    "is_valid_guest_link_id",
    # Types
    "EMPTY_LABEL",
    "FILE_LIFETIME_INFINITE",
    "INFINITE_FILE_LIFETIME_DURATION",
    "MAX_LABEL_LENGTH",
    "MIN_GUEST_UPLOAD_MAX_FILE_BYTES",
    "UNLIMITED",
    "Bounded",
    "DaysFileLifetime",
    "FileLifetime",
    "GuestLinkLabel",
    "GuestLinkStatus",
    "InfiniteFileLifetime",
    "Unlimited",
    "UploadLimit",
    "bounded",
    "file_lifetime_in_days",
]

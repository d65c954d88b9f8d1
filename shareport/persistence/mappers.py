"""Mappers for converting between database rows and domain models.

Since the domain models are immutable pydantic models, rows are mapped by
hand instead of through SQLAlchemy's ORM. Tagged variants are flattened to
nullable columns here and nowhere else.
"""

from typing import Any, Dict

from shareport.domain.model import GuestLink
from shareport.domain.value import (
    FILE_LIFETIME_INFINITE,
    UNLIMITED,
    DaysFileLifetime,
    FileLifetime,
    GuestLinkId,
    GuestLinkLabel,
    UploadLimit,
    bounded,
    file_lifetime_in_days,
)


def _limit_from_column(value: int | None) -> UploadLimit:
    return UNLIMITED if value is None else bounded(value)


def _file_lifetime_from_column(days: int | None) -> FileLifetime:
    return FILE_LIFETIME_INFINITE if days is None else file_lifetime_in_days(days)


def row_to_guest_link(row: Dict[str, Any]) -> GuestLink:
    """Convert database row to GuestLink domain model.

    Args:
        row: Database row as dict

    Returns:
        GuestLink domain model
    """
    return GuestLink(
        id=GuestLinkId(row["id"]),
        label=GuestLinkLabel(row.get("label") or ""),
        created_at=row["created_at"],
        url_expires=row["url_expires"],
        file_lifetime=_file_lifetime_from_column(row.get("file_lifetime_days")),
        max_file_bytes=_limit_from_column(row.get("max_file_bytes")),
        max_file_uploads=_limit_from_column(row.get("max_file_uploads")),
    )


def guest_link_to_dict(guest_link: GuestLink) -> Dict[str, Any]:
    """Convert GuestLink domain model to database dict.

    Args:
        guest_link: GuestLink domain model

    Returns:
        Dict suitable for database insertion
    """
    file_lifetime = guest_link.file_lifetime
    return {
        "id": guest_link.id.root,
        "label": guest_link.label.root,
        "created_at": guest_link.created_at,
        "url_expires": guest_link.url_expires,
        "file_lifetime_days": (
            file_lifetime.days if isinstance(file_lifetime, DaysFileLifetime) else None
        ),
        "max_file_bytes": guest_link.max_file_bytes.as_optional_int(),
        "max_file_uploads": guest_link.max_file_uploads.as_optional_int(),
    }

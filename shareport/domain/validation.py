"""Guest link request validation.

Turns the raw, untyped fields of a JSON creation request into typed value
objects. Each parser rejects its field with an InvalidFieldError whose
``reason`` tells "missing" apart from "malformed" and "out of range".
"""

import re
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from shareport.domain.error import (
    FieldErrorReason,
    InvalidFieldError,
    InvalidGuestLinkIdError,
)
from shareport.domain.model.guest_link import GuestLinkTerms
from shareport.domain.value import (
    EMPTY_LABEL,
    FILE_LIFETIME_INFINITE,
    INFINITE_FILE_LIFETIME_DURATION,
    MAX_LABEL_LENGTH,
    MIN_GUEST_UPLOAD_MAX_FILE_BYTES,
    UNLIMITED,
    FileLifetime,
    GuestLinkId,
    GuestLinkLabel,
    UploadLimit,
    bounded,
    file_lifetime_in_days,
    is_valid_guest_link_id,
)
from shareport.util.duration import parse_duration
from shareport.util.error import DurationParseError

LABEL_FIELD = "label"
URL_EXPIRATION_FIELD = "urlExpirationTime"
FILE_LIFETIME_FIELD = "fileLifetime"
MAX_FILE_BYTES_FIELD = "maxFileBytes"
MAX_FILE_UPLOADS_FIELD = "maxFileUploads"

# Widths of the storage columns.
MAX_FILE_BYTES_CEILING = 2**63 - 1
MAX_FILE_UPLOADS_CEILING = 2**31 - 1

_RFC3339_PATTERN = re.compile(
    r"(\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)

# NUL and lone UTF-16 surrogates cannot be stored in a PostgreSQL text column
_UNSTORABLE_LABEL_CHARS = re.compile("[\x00\ud800-\udfff]")


def _missing(field: str) -> InvalidFieldError:
    return InvalidFieldError(field, FieldErrorReason.MISSING, "field is required")


def _malformed(field: str, message: str) -> InvalidFieldError:
    return InvalidFieldError(field, FieldErrorReason.MALFORMED, message)


def _out_of_range(field: str, message: str) -> InvalidFieldError:
    return InvalidFieldError(field, FieldErrorReason.OUT_OF_RANGE, message)


def parse_label(raw: Any) -> GuestLinkLabel:
    """Parse the optional label; null means no label."""
    if raw is None:
        return EMPTY_LABEL
    if not isinstance(raw, str):
        raise _malformed(LABEL_FIELD, "must be a string")
    if _UNSTORABLE_LABEL_CHARS.search(raw):
        raise _malformed(LABEL_FIELD, "must not contain NUL or surrogate characters")
    if len(raw) > MAX_LABEL_LENGTH:
        raise _out_of_range(
            LABEL_FIELD, f"must be at most {MAX_LABEL_LENGTH} characters"
        )
    return GuestLinkLabel(raw)


def parse_url_expiration(raw: Any) -> datetime:
    """Parse the required RFC 3339 URL expiration timestamp."""
    if raw is None:
        raise _missing(URL_EXPIRATION_FIELD)
    if not isinstance(raw, str):
        raise _malformed(URL_EXPIRATION_FIELD, "must be an RFC 3339 timestamp string")
    match = _RFC3339_PATTERN.fullmatch(raw)
    if not match:
        raise _malformed(URL_EXPIRATION_FIELD, f"{raw!r} is not an RFC 3339 timestamp")
    base, fraction, offset = match.groups()
    # Sub-microsecond digits are dropped
    micros = f".{fraction[:6]:0<6}" if fraction else ""
    offset = "+00:00" if offset in ("Z", "z") else offset
    try:
        return datetime.fromisoformat(f"{base.upper()}{micros}{offset}")
    except ValueError:
        raise _malformed(URL_EXPIRATION_FIELD, f"{raw!r} is not a valid timestamp")


def parse_file_lifetime(raw: Any) -> FileLifetime:
    """Parse the required file lifetime duration.

    ``876000h0m0s`` (100 years) means files never expire. Any other duration
    is truncated to whole days; a lifetime shorter than one day is rejected.
    """
    if raw is None:
        raise _missing(FILE_LIFETIME_FIELD)
    if not isinstance(raw, str):
        raise _malformed(FILE_LIFETIME_FIELD, "must be a duration string")
    try:
        duration = parse_duration(raw)
    except DurationParseError as e:
        raise _malformed(FILE_LIFETIME_FIELD, str(e))

    if duration < timedelta(0):
        raise _out_of_range(FILE_LIFETIME_FIELD, "must not be negative")
    if duration == INFINITE_FILE_LIFETIME_DURATION:
        return FILE_LIFETIME_INFINITE
    if duration.days < 1:
        raise _out_of_range(FILE_LIFETIME_FIELD, "must be at least one day")
    return file_lifetime_in_days(duration.days)


def _parse_whole_number(field: str, raw: Any) -> int:
    # bool is an int subclass; JSON true/false is never a count.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise _malformed(field, "must be a whole number")
    return raw


def parse_max_file_bytes(raw: Any) -> UploadLimit:
    """Parse the optional per-file byte quota; null means unlimited."""
    if raw is None:
        return UNLIMITED
    value = _parse_whole_number(MAX_FILE_BYTES_FIELD, raw)
    if value <= 0:
        raise _out_of_range(MAX_FILE_BYTES_FIELD, "must be positive")
    if value < MIN_GUEST_UPLOAD_MAX_FILE_BYTES:
        raise _out_of_range(
            MAX_FILE_BYTES_FIELD,
            f"must be at least {MIN_GUEST_UPLOAD_MAX_FILE_BYTES} bytes",
        )
    if value > MAX_FILE_BYTES_CEILING:
        raise _out_of_range(MAX_FILE_BYTES_FIELD, "is too large")
    return bounded(value)


def parse_max_file_uploads(raw: Any) -> UploadLimit:
    """Parse the optional upload-count quota; null means unlimited."""
    if raw is None:
        return UNLIMITED
    value = _parse_whole_number(MAX_FILE_UPLOADS_FIELD, raw)
    if value < 1:
        raise _out_of_range(MAX_FILE_UPLOADS_FIELD, "must be at least 1")
    if value > MAX_FILE_UPLOADS_CEILING:
        raise _out_of_range(MAX_FILE_UPLOADS_FIELD, "is too large")
    return bounded(value)


def parse_guest_link_id(raw: Any) -> GuestLinkId:
    """Check the identifier format before any store lookup.

    Raises:
        InvalidGuestLinkIdError: If ``raw`` is not a well-formed identifier
    """
    if not isinstance(raw, str) or not is_valid_guest_link_id(raw):
        raise InvalidGuestLinkIdError(str(raw))
    return GuestLinkId(raw)


def parse_guest_link_request(payload: Any) -> GuestLinkTerms:
    """Validate a decoded JSON creation request.

    Args:
        payload: Decoded JSON body; must be an object

    Returns:
        Typed guest link terms

    Raises:
        InvalidFieldError: On the first field that fails validation
    """
    if not isinstance(payload, Mapping):
        raise _malformed("request", "must be a JSON object")

    return GuestLinkTerms(
        label=parse_label(payload.get(LABEL_FIELD)),
        url_expires=parse_url_expiration(payload.get(URL_EXPIRATION_FIELD)),
        file_lifetime=parse_file_lifetime(payload.get(FILE_LIFETIME_FIELD)),
        max_file_bytes=parse_max_file_bytes(payload.get(MAX_FILE_BYTES_FIELD)),
        max_file_uploads=parse_max_file_uploads(payload.get(MAX_FILE_UPLOADS_FIELD)),
    )

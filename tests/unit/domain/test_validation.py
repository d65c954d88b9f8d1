"""Tests for guest link request validation."""

from datetime import datetime, timedelta, timezone

import pytest

from shareport.domain.error import (
    FieldErrorReason,
    InvalidFieldError,
    InvalidGuestLinkIdError,
)
from shareport.domain.validation import (
    parse_file_lifetime,
    parse_guest_link_id,
    parse_guest_link_request,
    parse_label,
    parse_max_file_bytes,
    parse_max_file_uploads,
    parse_url_expiration,
)
from shareport.domain.value import (
    EMPTY_LABEL,
    FILE_LIFETIME_INFINITE,
    UNLIMITED,
    bounded,
    file_lifetime_in_days,
)
from tests.conftest import valid_payload


def assert_field_error(excinfo, field: str, reason: FieldErrorReason) -> None:
    assert excinfo.value.field == field
    assert excinfo.value.reason == reason


class TestParseLabel:
    """Tests for parse_label."""

    def test_missing_label_is_empty(self):
        """A null or absent label should become the empty label."""
        assert parse_label(None) == EMPTY_LABEL

    def test_keeps_label_text(self):
        """A string label should be kept verbatim."""
        assert parse_label("For my good pal, Maurice").root == "For my good pal, Maurice"

    def test_rejects_non_string(self):
        """A number is not a label."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_label(5)
        assert_field_error(excinfo, "label", FieldErrorReason.MALFORMED)

    @pytest.mark.parametrize("raw", ["a\u0000b", "\ud800", "ok\udfff"])
    def test_rejects_characters_the_store_cannot_hold(self, raw):
        """NUL and lone surrogates are malformed."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_label(raw)
        assert_field_error(excinfo, "label", FieldErrorReason.MALFORMED)

    def test_keeps_non_ascii_text(self):
        """Ordinary unicode, including astral characters, is allowed."""
        assert parse_label("Für Maurice \U0001F4F7").root == "Für Maurice \U0001F4F7"

    def test_rejects_overlong_label(self):
        """Labels over 200 characters are out of range."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_label("x" * 201)
        assert_field_error(excinfo, "label", FieldErrorReason.OUT_OF_RANGE)


class TestParseUrlExpiration:
    """Tests for parse_url_expiration."""

    def test_parses_utc_timestamp(self):
        """A Z-suffixed timestamp should parse as UTC."""
        assert parse_url_expiration("2030-01-02T03:04:25Z") == datetime(
            2030, 1, 2, 3, 4, 25, tzinfo=timezone.utc
        )

    def test_parses_offset_timestamp(self):
        """A numeric offset should be preserved."""
        parsed = parse_url_expiration("2030-01-02T03:04:25+02:00")

        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed == datetime(2030, 1, 2, 1, 4, 25, tzinfo=timezone.utc)

    def test_truncates_nanoseconds(self):
        """Fractions finer than a microsecond should be dropped."""
        parsed = parse_url_expiration("2030-01-02T03:04:25.123456789Z")

        assert parsed.microsecond == 123456

    def test_missing_is_reported_as_missing(self):
        """A null expiration is a missing required field."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_url_expiration(None)
        assert_field_error(excinfo, "urlExpirationTime", FieldErrorReason.MISSING)

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "tomorrow",
            "2030-01-02",
            "2030-01-02T03:04:25",  # no offset
            "2030-01-02 03:04:25Z",
            "2030-13-02T03:04:25Z",
            "2030-01-02T03:04:25Z\n",
            1893553465,
        ],
    )
    def test_rejects_malformed_timestamps(self, raw):
        """Anything but an RFC 3339 timestamp with offset is malformed."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_url_expiration(raw)
        assert_field_error(excinfo, "urlExpirationTime", FieldErrorReason.MALFORMED)


class TestParseFileLifetime:
    """Tests for parse_file_lifetime."""

    def test_one_day(self):
        """24h should become a one-day lifetime."""
        assert parse_file_lifetime("24h0m0s") == file_lifetime_in_days(1)

    def test_thirty_days(self):
        """720h should become a thirty-day lifetime."""
        assert parse_file_lifetime("720h0m0s") == file_lifetime_in_days(30)

    def test_infinite_sentinel(self):
        """876000h should mean files never expire."""
        assert parse_file_lifetime("876000h0m0s") == FILE_LIFETIME_INFINITE

    def test_truncates_partial_days(self):
        """Durations are truncated to whole days."""
        assert parse_file_lifetime("47h59m") == file_lifetime_in_days(1)

    def test_large_non_sentinel_duration_is_days(self):
        """Only the exact sentinel means infinite."""
        assert parse_file_lifetime("876024h") == file_lifetime_in_days(36501)

    @pytest.mark.parametrize("raw", ["23h59m59s", "0", "0s", "1m"])
    def test_rejects_less_than_a_day(self, raw):
        """Lifetimes under one day are out of range."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_file_lifetime(raw)
        assert_field_error(excinfo, "fileLifetime", FieldErrorReason.OUT_OF_RANGE)

    def test_rejects_negative(self):
        """Negative lifetimes are out of range."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_file_lifetime("-24h")
        assert_field_error(excinfo, "fileLifetime", FieldErrorReason.OUT_OF_RANGE)

    def test_missing_is_reported_as_missing(self):
        """A null lifetime is a missing required field."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_file_lifetime(None)
        assert_field_error(excinfo, "fileLifetime", FieldErrorReason.MISSING)

    @pytest.mark.parametrize(
        "raw", ["", "forever", "1d", 86400, 24.0, "99999999999999h", "24h\n"]
    )
    def test_rejects_malformed(self, raw):
        """Non-strings and unparseable strings are malformed."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_file_lifetime(raw)
        assert_field_error(excinfo, "fileLifetime", FieldErrorReason.MALFORMED)


class TestParseQuotas:
    """Tests for parse_max_file_bytes and parse_max_file_uploads."""

    def test_null_means_unlimited(self):
        """A null quota should be Unlimited."""
        assert parse_max_file_bytes(None) == UNLIMITED
        assert parse_max_file_uploads(None) == UNLIMITED

    def test_bounded_values(self):
        """Positive integers become bounded limits."""
        assert parse_max_file_bytes(1048576) == bounded(1048576)
        assert parse_max_file_uploads(1) == bounded(1)

    def test_max_file_bytes_minimum(self):
        """The byte quota must be at least 1024."""
        assert parse_max_file_bytes(1024) == bounded(1024)
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_max_file_bytes(1023)
        assert_field_error(excinfo, "maxFileBytes", FieldErrorReason.OUT_OF_RANGE)

    @pytest.mark.parametrize("raw", [0, -1])
    def test_max_file_bytes_must_be_positive(self, raw):
        """Zero or negative byte quotas are out of range."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_max_file_bytes(raw)
        assert_field_error(excinfo, "maxFileBytes", FieldErrorReason.OUT_OF_RANGE)

    @pytest.mark.parametrize("raw", [0, -5])
    def test_max_file_uploads_must_be_positive(self, raw):
        """Zero or negative upload counts are out of range."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_max_file_uploads(raw)
        assert_field_error(excinfo, "maxFileUploads", FieldErrorReason.OUT_OF_RANGE)

    def test_rejects_values_beyond_storage_width(self):
        """Values that cannot be stored are out of range."""
        with pytest.raises(InvalidFieldError):
            parse_max_file_bytes(2**63)
        with pytest.raises(InvalidFieldError):
            parse_max_file_uploads(2**31)

    @pytest.mark.parametrize("raw", ["1024", 2048.0, 1.5, True, [1]])
    def test_rejects_non_integers(self, raw):
        """Strings, floats and booleans are malformed."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_max_file_bytes(raw)
        assert_field_error(excinfo, "maxFileBytes", FieldErrorReason.MALFORMED)

        with pytest.raises(InvalidFieldError) as excinfo:
            parse_max_file_uploads(raw)
        assert_field_error(excinfo, "maxFileUploads", FieldErrorReason.MALFORMED)


class TestParseGuestLinkId:
    """Tests for parse_guest_link_id."""

    def test_accepts_valid_id(self):
        """A well-formed ID should be returned as GuestLinkId."""
        assert parse_guest_link_id("abcdefghijkmnopq").root == "abcdefghijkmnopq"

    @pytest.mark.parametrize("raw", ["", "i-am-an-invalid-link-id", "abc", None])
    def test_rejects_invalid_ids(self, raw):
        """Malformed IDs raise InvalidGuestLinkIdError."""
        with pytest.raises(InvalidGuestLinkIdError):
            parse_guest_link_id(raw)


class TestParseGuestLinkRequest:
    """Tests for parse_guest_link_request."""

    def test_full_request(self):
        """A complete request should produce matching terms."""
        terms = parse_guest_link_request(
            valid_payload(
                fileLifetime="720h0m0s", maxFileBytes=1048576, maxFileUploads=1
            )
        )

        assert terms.label.root == "For my good pal, Maurice"
        assert terms.url_expires == datetime(2030, 1, 2, 3, 4, 25, tzinfo=timezone.utc)
        assert terms.file_lifetime == file_lifetime_in_days(30)
        assert terms.max_file_bytes == bounded(1048576)
        assert terms.max_file_uploads == bounded(1)

    def test_minimal_request(self):
        """Only urlExpirationTime and fileLifetime are required."""
        terms = parse_guest_link_request(
            {"urlExpirationTime": "2030-01-02T03:04:25Z", "fileLifetime": "24h0m0s"}
        )

        assert terms.label == EMPTY_LABEL
        assert terms.max_file_bytes == UNLIMITED
        assert terms.max_file_uploads == UNLIMITED

    def test_empty_object_is_missing_expiration(self):
        """An empty object should fail on the first required field."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_guest_link_request({})
        assert_field_error(excinfo, "urlExpirationTime", FieldErrorReason.MISSING)

    @pytest.mark.parametrize("payload", [[], "text", 5, None])
    def test_rejects_non_object(self, payload):
        """The request must be a JSON object."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_guest_link_request(payload)
        assert_field_error(excinfo, "request", FieldErrorReason.MALFORMED)

    def test_unknown_fields_are_ignored(self):
        """Extra keys do not affect validation."""
        terms = parse_guest_link_request(valid_payload(extra="ignored"))

        assert terms.file_lifetime == FILE_LIFETIME_INFINITE

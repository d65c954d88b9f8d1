"""Guest link value objects.

Value objects are immutable and defined by their values, not identity.
Optional constraints are modelled as tagged variants rather than nullable
primitives so that "no bound" can never be confused with zero.
"""

from datetime import timedelta
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, PositiveInt, field_validator

from shareport.domain.value.common import RootValueObject, ValueObject

MAX_LABEL_LENGTH = 200

# 100 years. The wire format uses this duration to mean "never expires".
INFINITE_FILE_LIFETIME_DURATION = timedelta(hours=876000)

# Smallest byte quota a guest link may carry.
MIN_GUEST_UPLOAD_MAX_FILE_BYTES = 1024


class GuestLinkStatus(str, Enum):
    """Derived state of a guest link.

    Never stored; computed from the link's URL expiration and the clock.
    """

    ACTIVE = "active"
    EXPIRED = "expired"


class GuestLinkLabel(RootValueObject[str]):
    """Free-text label shown to the administering user.

    The empty string means "no label".
    """

    @field_validator("root")
    @classmethod
    def validate_label_length(cls, v: str) -> str:
        """Validate label is within length limits."""
        if len(v) > MAX_LABEL_LENGTH:
            raise ValueError(f"Label must be at most {MAX_LABEL_LENGTH} characters")
        return v


EMPTY_LABEL = GuestLinkLabel("")


class InfiniteFileLifetime(ValueObject):
    """Uploaded files are kept forever."""

    kind: Literal["infinite"] = "infinite"

    def to_duration(self) -> timedelta:
        return INFINITE_FILE_LIFETIME_DURATION

    def __str__(self) -> str:
        return "infinite"


class DaysFileLifetime(ValueObject):
    """Uploaded files are kept for a whole number of days."""

    kind: Literal["days"] = "days"
    days: PositiveInt

    def to_duration(self) -> timedelta:
        return timedelta(days=self.days)

    def __str__(self) -> str:
        return f"{self.days} day" if self.days == 1 else f"{self.days} days"


FileLifetime = Annotated[
    Union[InfiniteFileLifetime, DaysFileLifetime], Field(discriminator="kind")
]

FILE_LIFETIME_INFINITE = InfiniteFileLifetime()


def file_lifetime_in_days(days: int) -> DaysFileLifetime:
    """Build a file lifetime of ``days`` whole days."""
    return DaysFileLifetime(days=days)


class Unlimited(ValueObject):
    """No bound applies to the quota."""

    kind: Literal["unlimited"] = "unlimited"

    def as_optional_int(self) -> None:
        return None


class Bounded(ValueObject):
    """The quota is bounded by a positive integer."""

    kind: Literal["bounded"] = "bounded"
    limit: PositiveInt

    def as_optional_int(self) -> int:
        return self.limit


UploadLimit = Annotated[Union[Unlimited, Bounded], Field(discriminator="kind")]

UNLIMITED = Unlimited()


def bounded(limit: int) -> Bounded:
    """Build a bounded upload limit."""
    return Bounded(limit=limit)

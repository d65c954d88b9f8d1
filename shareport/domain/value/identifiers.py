"""Guest link identifiers.

Identifiers are opaque, fixed-length tokens that appear in URLs and are read
aloud or retyped by people, so the alphabet leaves out characters that are
easy to confuse (l/1/I, O/0).
"""

import re

from pydantic import field_validator

from shareport.domain.value.common import RootValueObject

GUEST_LINK_ID_ALPHABET = "abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ23456789"
GUEST_LINK_ID_LENGTH = 16

_GUEST_LINK_ID_PATTERN = re.compile(
    rf"^[{GUEST_LINK_ID_ALPHABET}]{{{GUEST_LINK_ID_LENGTH}}}$"
)


def is_valid_guest_link_id(value: str) -> bool:
    """Return True if ``value`` has the guest link identifier format."""
    return bool(_GUEST_LINK_ID_PATTERN.fullmatch(value))


class GuestLinkId(RootValueObject[str]):
    """Identifier of a guest link.

    Equality is exact string equality. IDs are minted randomly and never
    derived from the link's fields.
    """

    @field_validator("root")
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        """Validate length and alphabet."""
        if not is_valid_guest_link_id(v):
            raise ValueError(
                f"Guest link ID must be {GUEST_LINK_ID_LENGTH} characters "
                "from the guest link alphabet"
            )
        return v

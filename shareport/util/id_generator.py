"""Guest link identifier generation."""

import random
import secrets

from shareport.domain.value import (
    GUEST_LINK_ID_ALPHABET,
    GUEST_LINK_ID_LENGTH,
    GuestLinkId,
)


class GuestLinkIdGenerator:
    """Mints random guest link identifiers.

    Holds no state besides its entropy source. The default source reads from
    the OS (``secrets.SystemRandom``) and is safe to share between concurrent
    requests. Uniqueness is not checked here; the repository's insert
    constraint catches the (negligible) collisions.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize generator.

        Args:
            rng: Entropy source; pass a seeded ``random.Random`` for
                deterministic tests
        """
        self._rng = rng if rng is not None else secrets.SystemRandom()

    def new(self) -> GuestLinkId:
        """Return a fresh guest link identifier."""
        token = "".join(
            self._rng.choice(GUEST_LINK_ID_ALPHABET)
            for _ in range(GUEST_LINK_ID_LENGTH)
        )
        return GuestLinkId(token)

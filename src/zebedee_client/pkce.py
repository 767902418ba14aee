"""PKCE (RFC 7636) code verifier and S256 challenge for Login with ZBD.

verifier  = base64url(32 seed bytes)          43 chars, no padding
challenge = base64url(sha256(verifier))       43 chars, no padding

The verifier is a single-use secret: keep it only until the authorization
code has been exchanged with ``ZebedeeClient.fetch_token``.
"""

from __future__ import annotations

import base64
import hashlib
import secrets
from dataclasses import dataclass

SEED_BYTES = 32
PKCE_LENGTH = 43


def _b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def challenge_for(verifier: str) -> str:
    """S256 code challenge for ``verifier``."""
    return _b64url(hashlib.sha256(verifier.encode("ascii")).digest())


@dataclass(frozen=True)
class PKCE:
    """A code verifier and its S256 challenge."""

    verifier: str
    challenge: str

    @property
    def method(self) -> str:
        return "S256"

    @classmethod
    def from_seed(cls, seed: bytes) -> PKCE:
        """Build a pair from exactly 32 bytes of seed material.

        Raises:
            ValueError: If ``seed`` is not 32 bytes long.
        """
        if len(seed) != SEED_BYTES:
            raise ValueError(f"PKCE seed must be {SEED_BYTES} bytes, got {len(seed)}")
        verifier = _b64url(seed)
        return cls(verifier=verifier, challenge=challenge_for(verifier))

    @classmethod
    def generate(cls) -> PKCE:
        """Build a pair from cryptographically random bytes."""
        return cls.from_seed(secrets.token_bytes(SEED_BYTES))

    @classmethod
    def from_string(cls, value: str) -> PKCE:
        """Build a deterministic pair seeded with ``sha256(value)``."""
        return cls.from_seed(hashlib.sha256(value.encode("utf-8")).digest())

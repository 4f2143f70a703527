"""
Token Manager

Generates the opaque secrets handed to users (session cookies, reset links)
and the one-way hashes stored in their place.
"""

import base64
import hashlib
import secrets
from typing import Tuple

# The minimum number of random bytes behind each token.
MIN_BYTES_PER_TOKEN = 32


class TokenManager:
    """
    Issues raw tokens and their SHA-256 hashes.

    Business Rules:
    - Raw tokens come from the OS CSPRNG, URL-safe base64 encoded
    - ``bytes_per_token`` below MIN_BYTES_PER_TOKEN is raised to the minimum
    - Only the hash is ever persisted; tokens are high entropy, so no salt
    """

    def __init__(self, bytes_per_token: int = MIN_BYTES_PER_TOKEN):
        self.bytes_per_token = max(bytes_per_token, MIN_BYTES_PER_TOKEN)

    def new(self) -> Tuple[str, str]:
        """
        Generate a fresh token.

        Returns:
            Tuple of (raw_token, token_hash)
        """
        token = base64.urlsafe_b64encode(
            secrets.token_bytes(self.bytes_per_token)
        ).decode("ascii")
        return token, self.hash(token)

    def hash(self, token: str) -> str:
        """
        SHA-256 of the token, URL-safe base64 encoded (44 chars).

        Any string hashes, including lone surrogates from JSON escapes, so a
        malformed token simply matches nothing.
        """
        digest = hashlib.sha256(token.encode("utf-8", errors="surrogatepass")).digest()
        return base64.urlsafe_b64encode(digest).decode("ascii")

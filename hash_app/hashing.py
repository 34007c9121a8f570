"""
Chained SHA-256 computation behind the ``/hash`` endpoint.

The digest is fed back into itself a fixed number of times, starting
from a constant seed, so every conforming server variant produces the
same 64-character hex string.  The rolling state is kept in two
pre-allocated 32-byte buffers that swap roles on every iteration.
"""

from __future__ import annotations

from hashlib import sha256

HASH_SEED: bytes = b"benchmark-test-data"
HASH_ITERATIONS: int = 100
DIGEST_SIZE: int = 32


class DigestError(RuntimeError):
    """Raised when the digest primitive misbehaves (wrong output size)."""


def chained_digest(seed: bytes = HASH_SEED, iterations: int = HASH_ITERATIONS) -> bytes:
    """
    Apply SHA-256 ``iterations`` times, starting from ``seed``.

    The first invocation hashes the seed; each following one hashes the
    previous 32-byte output and nothing else.

    Args:
        seed: Initial input bytes.
        iterations: Total number of digest invocations (at least 1).

    Returns:
        The final 32-byte digest.

    Raises:
        ValueError: If ``iterations`` is smaller than 1.
        DigestError: If the digest primitive returns an unexpected size.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")

    front = bytearray(DIGEST_SIZE)
    back = bytearray(DIGEST_SIZE)
    current: bytes | bytearray = seed

    for _ in range(iterations):
        digest = sha256(current).digest()
        if len(digest) != DIGEST_SIZE:
            raise DigestError(f"Unexpected digest size: {len(digest)} bytes")
        # Same-length slice assignment writes in place.
        front[:] = digest
        current = front
        front, back = back, front

    return bytes(current)


def compute_hash(seed: bytes = HASH_SEED, iterations: int = HASH_ITERATIONS) -> str:
    """Return the lowercase hex encoding of :func:`chained_digest`."""
    return chained_digest(seed, iterations).hex()

"""
Response models for the hash benchmark service.

There is no persistence layer: a ``HashResult`` is built fresh for every
request and lives only until it has been serialised into the response.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TimestampFormat(str, Enum):
    """Wire formats supported for the ``timestamp`` field."""

    EPOCH_MS = "epoch_ms"
    ISO8601 = "iso8601"


@dataclass(frozen=True)
class HashResult:
    """
    Result of one ``/hash`` computation.

    Attributes:
        hash: 64-character lowercase hex digest.
        timestamp: Timezone-aware UTC time the result was produced.
        source: Label identifying the server implementation.
    """

    hash: str
    timestamp: datetime
    source: str

    @classmethod
    def create(cls, hash_value: str, source: str) -> HashResult:
        """Build a result stamped with the current UTC time."""
        return cls(hash=hash_value, timestamp=datetime.now(timezone.utc), source=source)

    def to_dict(self, timestamp_format: TimestampFormat | str = TimestampFormat.EPOCH_MS) -> dict[str, Any]:
        """
        Convert the result to a dictionary for JSON serialization.

        Args:
            timestamp_format: ``epoch_ms`` for integer milliseconds since
                the Unix epoch, ``iso8601`` for a UTC ISO-8601 string.

        Returns:
            Dictionary with ``hash``, ``timestamp`` and ``source`` keys.

        Raises:
            ValueError: If ``timestamp_format`` is not a known format.
        """
        fmt = TimestampFormat(timestamp_format)
        if fmt is TimestampFormat.EPOCH_MS:
            timestamp: int | str = (self.timestamp - _EPOCH) // timedelta(milliseconds=1)
        else:
            timestamp = (
                self.timestamp.astimezone(timezone.utc)
                .isoformat(timespec="milliseconds")
                .replace("+00:00", "Z")
            )
        return {
            "hash": self.hash,
            "timestamp": timestamp,
            "source": self.source,
        }

    def __repr__(self) -> str:
        return f"<HashResult {self.source} {self.hash[:12]}...>"

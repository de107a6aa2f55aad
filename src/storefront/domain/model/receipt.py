"""Receipt produced by a successful checkout."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Receipt:
    """Immutable record of one completed checkout.

    Fields are whatever the server sent; any of them may be missing.
    ``timestamp`` is kept raw (epoch milliseconds or an ISO-8601 string)
    and ``issued_at`` interprets it.
    """

    id: str
    name: str
    email: str
    total: Money | None
    timestamp: int | float | str | None

    @property
    def issued_at(self) -> datetime | None:
        """UTC time of the receipt, or None if the timestamp is unreadable."""
        if isinstance(self.timestamp, bool):
            return None
        if isinstance(self.timestamp, (int, float)):
            try:
                return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)
            except (OSError, OverflowError, ValueError):
                return None
        if not isinstance(self.timestamp, str):
            return None
        try:
            parsed = datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))
        except ValueError:
            return None
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

from __future__ import annotations

from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ValidationError422(ValueError):
    status_code = 422


class GroupNotFoundError(LookupError):
    status_code = 404

    def __init__(self, message: str = "No group entry!") -> None:
        super().__init__(message)

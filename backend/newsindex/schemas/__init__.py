"""Pydantic schemas package."""

from .groups import (
    Group,
    GroupPage,
    GroupId,
    GroupNameCheck,
    GroupNameCheckResult,
)  # noqa: F401

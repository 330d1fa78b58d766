"""Repository layer.

Exposes:
- GroupRepository
"""

from .groups import GroupRepository

__all__ = [
    "GroupRepository",
]

"""SQLAlchemy models package.

from newsindex.models import Group, Release, ValidationError422, GroupNotFoundError
"""

from .common import ValidationError422, GroupNotFoundError  # noqa: F401
from .groups import Group  # noqa: F401
from .releases import Release  # noqa: F401

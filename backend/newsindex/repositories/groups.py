from __future__ import annotations

import logging
import re
from typing import Any, List, Mapping, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from newsindex.core.config import get_items_per_page
from newsindex.core.store import RecordStore
from newsindex.models import Group, GroupNotFoundError, Release

logger = logging.getLogger(__name__)

_GROUP_NAME_RE = re.compile(r"([\w-]+\.)+[\w-]+", re.IGNORECASE | re.ASCII)
_SHORTHAND_PREFIX_RE = re.compile(r"^a\.b\.", re.IGNORECASE)


def _coerce_page(page: Any) -> int:
    """Lenient integer coercion; unparseable pages become page 1."""
    try:
        return int(float(page))
    except (TypeError, ValueError, OverflowError):
        return 1


class GroupRepository:
    """Lookups, paging, name checks and cascading removal for the groups table.

    - find_by_name: raises GroupNotFoundError unless return_always is set.
    - is_valid_group_name: returns False for malformed names instead of raising.
    - remove: deletes the releases of matching groups before the groups, in one commit.
    """

    def __init__(self, db: Session, store: Optional[RecordStore] = None) -> None:
        self.db = db
        self.store = store or RecordStore(db, Group)
        self.releases = RecordStore(db, Release)

    def find_by_id(self, group_id: int) -> Optional[Group]:
        return self.store.find("first", {"conditions": {"id": group_id}})

    def find_by_name(self, name: str, return_always: bool = False) -> Optional[int]:
        """Return the id of the group called `name`.

        When no group matches, raises GroupNotFoundError, or returns None
        if `return_always` is true.
        """
        group = self.store.find("first", {"conditions": {"name": name}})
        if group is not None:
            return group.id
        logger.debug("No group named %r", name)
        if not return_always:
            raise GroupNotFoundError("No group entry!")
        return None

    @staticmethod
    def _range_conditions(name: str, active: int) -> dict:
        where: dict[str, Any] = {}
        if int(active) > -1:
            where["active"] = bool(int(active))
        if name:
            where["name"] = {"CONTAINS": name}
        return where

    def find_range(
        self,
        page: Union[int, str] = 1,
        limit: Optional[int] = None,
        name: str = "",
        active: int = -1,
    ) -> List[Group]:
        """One page of groups ordered by name.

        `active` filters only when > -1; `name` is a case-sensitive substring.
        """
        options: dict[str, Any] = {
            "limit": limit if limit is not None else get_items_per_page(),
            "order": {"name": "ASC"},
            "page": _coerce_page(page),
        }
        where = self._range_conditions(name, active)
        if where:
            options["conditions"] = where
        return self.store.find("all", options)

    def count_range(self, name: str = "", active: int = -1) -> int:
        return self.store.count(self._range_conditions(name, active))

    def is_valid_group_name(self, name: str) -> Union[str, bool]:
        """Check a group name is standard and expand the `a.b.` shorthand.

        Returns the (possibly rewritten) name, or False if it is malformed.
        """
        if isinstance(name, str) and _GROUP_NAME_RE.fullmatch(name):
            return _SHORTHAND_PREFIX_RE.sub("alt.binaries.", name, count=1)
        return False

    def remove(
        self,
        conditions: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """Remove matching groups together with their releases.

        Returns the number of groups removed.
        """
        options = dict(options or {})
        commit = options.pop("commit", True)

        group_ids = self.store.ids(conditions)
        if not group_ids:
            return 0

        # Releases go first, in one statement rather than per group
        try:
            releases_removed = self.releases.remove({"groups_id": group_ids}, {"commit": False})
            removed = self.store.remove({"id": group_ids}, {**options, "commit": False})
            if commit:
                self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.info(
            "Removed %s group(s) and %s release(s) | group_ids=%s",
            removed,
            releases_removed,
            group_ids,
        )
        return removed

"""Generic record store over a single mapped table.

Conditions are plain dicts: ``{"field": value}`` for equality, or
``{"field": {"OPERATOR": value}}`` for anything else, e.g.
``{"name": {"CONTAINS": "foo"}, "active": 1}``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

logger = logging.getLogger(__name__)

FIND_MODES = ("first", "all")


def _contains(column, value):
    # instr() is case-sensitive and treats % and _ literally, unlike LIKE
    return func.instr(column, value) > 0


_OPERATORS = {
    "=": lambda c, v: c == v,
    "!=": lambda c, v: c != v,
    "<": lambda c, v: c < v,
    "<=": lambda c, v: c <= v,
    ">": lambda c, v: c > v,
    ">=": lambda c, v: c >= v,
    "LIKE": lambda c, v: c.like(v),
    "CONTAINS": _contains,
    "IN": lambda c, v: c.in_(list(v)),
}


class RecordStore:
    """find/count/remove primitives for one model class, bound to a Session."""

    def __init__(self, db: Session, model: type) -> None:
        self.db = db
        self.model = model

    def _column(self, field: str):
        column = getattr(self.model, field, None)
        if column is None or not hasattr(column, "property"):
            raise ValueError(f"Unknown field '{field}' for {self.model.__name__}")
        return column

    def _criteria(self, conditions: Optional[Mapping[str, Any]]) -> list:
        criteria = []
        for field, value in (conditions or {}).items():
            column = self._column(field)
            if isinstance(value, Mapping):
                for op, operand in value.items():
                    builder = _OPERATORS.get(str(op).upper())
                    if builder is None:
                        raise ValueError(f"Unsupported operator '{op}'")
                    criteria.append(builder(column, operand))
            elif isinstance(value, (list, tuple, set, frozenset)):
                criteria.append(column.in_(list(value)))
            else:
                criteria.append(column == value)
        return criteria

    def _query(self, conditions: Optional[Mapping[str, Any]]) -> Query:
        return self.db.query(self.model).filter(*self._criteria(conditions))

    def find(self, mode: str, options: Optional[Mapping[str, Any]] = None):
        """Run a query; `first` returns an instance or None, `all` a list.

        Options: conditions, order ({field: "ASC"|"DESC"}), page, limit.
        """
        if mode not in FIND_MODES:
            raise ValueError(f"Unsupported find mode '{mode}'")
        options = options or {}

        q = self._query(options.get("conditions"))
        for field, direction in (options.get("order") or {}).items():
            column = self._column(field)
            q = q.order_by(column.desc() if str(direction).upper() == "DESC" else column.asc())

        if mode == "first":
            return q.first()

        limit = options.get("limit")
        if limit is not None:
            limit = int(limit)
            page = max(int(options.get("page") or 1), 1)
            q = q.limit(limit).offset((page - 1) * limit)
        return list(q.all())

    def count(self, conditions: Optional[Mapping[str, Any]] = None) -> int:
        return self._query(conditions).count()

    def ids(self, conditions: Optional[Mapping[str, Any]] = None) -> list:
        pk = self._column("id")
        return [row[0] for row in self.db.query(pk).filter(*self._criteria(conditions)).all()]

    def remove(
        self,
        conditions: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """Bulk delete matching rows and return how many were removed.

        Commits unless ``options["commit"]`` is false.
        """
        options = options or {}
        removed = self._query(conditions).delete(synchronize_session="fetch")
        if options.get("commit", True):
            self.db.commit()
        logger.debug("Removed %s %s row(s)", removed, self.model.__tablename__)
        return removed

"""Tests for the generic RecordStore primitives."""

from __future__ import annotations

import pytest

from newsindex.core.store import RecordStore
from newsindex.models import Group


@pytest.fixture()
def store(db, make_group):
    make_group("alt.binaries.b", active=True)
    make_group("alt.binaries.a", active=False)
    make_group("alt.binaries.c", active=True)
    return RecordStore(db, Group)


def test_find_first_returns_instance_or_none(store):
    g = store.find("first", {"conditions": {"name": "alt.binaries.a"}})
    assert g is not None and g.name == "alt.binaries.a"
    assert store.find("first", {"conditions": {"name": "nope"}}) is None


def test_find_all_orders_and_paginates(store):
    names = [g.name for g in store.find("all", {"order": {"name": "DESC"}})]
    assert names == ["alt.binaries.c", "alt.binaries.b", "alt.binaries.a"]

    page = store.find("all", {"order": {"name": "ASC"}, "page": 2, "limit": 2})
    assert [g.name for g in page] == ["alt.binaries.c"]


def test_find_rejects_unknown_mode(store):
    with pytest.raises(ValueError):
        store.find("some")


def test_operator_conditions(store):
    assert store.count({"name": {"LIKE": "alt.%"}}) == 3
    assert store.count({"name": {"CONTAINS": "s.b"}}) == 1
    assert store.count({"name": {"!=": "alt.binaries.a"}}) == 2
    assert store.count({"name": {"IN": ["alt.binaries.a", "alt.binaries.c"]}}) == 2
    assert store.count({"name": ["alt.binaries.a", "alt.binaries.b"]}) == 2
    assert store.count({"active": True, "name": {">": "alt.binaries.b"}}) == 1


def test_unknown_field_or_operator_raises(store):
    with pytest.raises(ValueError):
        store.count({"missing": 1})
    with pytest.raises(ValueError):
        store.count({"name": {"REGEXP": "x"}})


def test_ids_and_remove(store, db):
    ids = store.ids({"active": True})
    assert len(ids) == 2

    assert store.remove({"id": ids}) == 2
    assert store.count() == 1
    assert store.remove({"id": ids}) == 0


def test_remove_without_commit_leaves_transaction_open(store, db):
    assert store.remove({"name": "alt.binaries.a"}, {"commit": False}) == 1
    db.rollback()
    assert store.count() == 3

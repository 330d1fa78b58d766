"""Root conftest for tests directory."""

from __future__ import annotations

from typing import Callable, Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from newsindex.core.db import Base


@pytest.fixture()
def db() -> Generator[Session, None, None]:
    """Provide a test DB session backed by in-memory SQLite."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    # Ensure models are imported
    import newsindex.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def make_group(db: Session) -> Callable:
    """Insert a group row and return it."""
    from newsindex.models import Group

    def _make(name: str, active: bool = False, **kwargs) -> Group:
        g = Group(name=name, active=active, **kwargs)
        db.add(g)
        db.commit()
        db.refresh(g)
        return g

    return _make


@pytest.fixture()
def make_release(db: Session) -> Callable:
    """Insert a release row attached to a group and return it."""
    from newsindex.models import Release

    counter = {"n": 0}

    def _make(group_id: int, name: str = "release") -> Release:
        counter["n"] += 1
        r = Release(name=name, searchname=name, guid=f"guid-{counter['n']:04d}", groups_id=group_id)
        db.add(r)
        db.commit()
        db.refresh(r)
        return r

    return _make

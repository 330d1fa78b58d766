from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship, validates

from newsindex.core.db import Base
from .common import ValidationError422


class Group(Base):
    """A usenet newsgroup tracked by the indexer."""

    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    active = Column(Boolean, nullable=False, default=False, index=True)
    backfill = Column(Boolean, nullable=False, default=False)
    first_record = Column(BigInteger, nullable=False, default=0)
    first_record_postdate = Column(DateTime, nullable=True)
    last_record = Column(BigInteger, nullable=False, default=0)
    last_record_postdate = Column(DateTime, nullable=True)
    last_updated = Column(DateTime, nullable=True)
    minfilestoformrelease = Column(Integer, nullable=True)
    minsizetoformrelease = Column(BigInteger, nullable=True)

    releases = relationship(
        "Release", back_populates="group", cascade="all, delete-orphan", passive_deletes=True
    )

    @validates("name")
    def _validate_name(self, key: str, value: str) -> str:  # noqa: D401
        if value is None or value.strip() == "":
            raise ValidationError422("You must supply a name for this group.")
        return value

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name='{self.name}', active={self.active})>"

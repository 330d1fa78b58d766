from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from newsindex.core.db import Base
from .common import _utcnow


class Release(Base):
    __tablename__ = "releases"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    searchname = Column(String(255), nullable=False, default="")
    guid = Column(String(40), nullable=False, unique=True, index=True)
    size = Column(BigInteger, nullable=False, default=0)
    postdate = Column(DateTime, nullable=True)
    adddate = Column(DateTime, nullable=False, default=_utcnow)
    groups_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)

    group = relationship("Group", back_populates="releases")

    def __repr__(self) -> str:
        return f"<Release(id={self.id}, name='{self.name}', groups_id={self.groups_id})>"

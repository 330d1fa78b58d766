from __future__ import annotations

from typing import Optional, List
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class Group(BaseModel):
    id: int
    name: str = Field(..., description="Group name", max_length=255)
    description: Optional[str] = Field(None, description="Group description")
    active: bool = False
    backfill: bool = False
    first_record: int = 0
    last_record: int = 0
    last_updated: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class GroupPage(BaseModel):
    items: List[Group] = Field(default_factory=list)
    page: int
    limit: int
    total: int


class GroupId(BaseModel):
    id: int


class GroupNameCheck(BaseModel):
    name: str = Field(..., description="Candidate group name")


class GroupNameCheckResult(BaseModel):
    valid: bool
    name: Optional[str] = Field(None, description="Normalized name when valid")

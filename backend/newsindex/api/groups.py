"""Groups API router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status, Response
from sqlalchemy.orm import Session

from newsindex.core.config import get_items_per_page
from newsindex.core.db import get_session
from newsindex.models import Group as GroupModel, GroupNotFoundError
from newsindex.repositories import GroupRepository
from newsindex.schemas import (
    Group as GroupSchema,
    GroupPage,
    GroupId,
    GroupNameCheck,
    GroupNameCheckResult,
)


router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("/", response_model=GroupPage)
def list_groups(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    name: str = "",
    active: int = Query(-1, ge=-1, le=1),
    db: Session = Depends(get_session),
) -> dict:
    repo = GroupRepository(db)
    limit = limit or get_items_per_page()
    items = repo.find_range(page=page, limit=limit, name=name, active=active)
    total = repo.count_range(name=name, active=active)
    return {"items": items, "page": page, "limit": limit, "total": total}


@router.get("/by-name/{name}", response_model=GroupId)
def get_group_id_by_name(name: str, db: Session = Depends(get_session)) -> dict:
    repo = GroupRepository(db)
    try:
        group_id = repo.find_by_name(name)
    except GroupNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return {"id": group_id}


@router.post("/validate-name", response_model=GroupNameCheckResult)
def validate_group_name(payload: GroupNameCheck, db: Session = Depends(get_session)) -> dict:
    result = GroupRepository(db).is_valid_group_name(payload.name)
    if result is False:
        return {"valid": False, "name": None}
    return {"valid": True, "name": result}


@router.get("/{group_id}", response_model=GroupSchema)
def get_group(group_id: int, db: Session = Depends(get_session)) -> GroupModel:
    g = GroupRepository(db).find_by_id(group_id)
    if g is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return g


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_group(group_id: int, db: Session = Depends(get_session)) -> Response:
    removed = GroupRepository(db).remove({"id": group_id})
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

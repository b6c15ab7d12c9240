"""Router factory for the brewery-scoped entity endpoints."""
import logging
from typing import Any, Callable, Dict, List, Optional, Type
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session
from brewhouse.api.deps import get_brewery_id
from brewhouse.db.session import get_db
from brewhouse.repos.scoped_repo import BreweryScopedRepo

log = logging.getLogger(__name__)

UpdateCheck = Callable[[Any, Dict[str, Any]], None]


def update_changes(model: Type, data: BaseModel) -> Dict[str, Any]:
    """Fields the client sent; null clears a column unless the column is required."""
    changes = data.model_dump(exclude_unset=True)
    columns = model.__table__.columns
    required = sorted(k for k, v in changes.items() if v is None and not columns[k].nullable)
    if required:
        raise HTTPException(status_code=400, detail=f"Fields cannot be null: {', '.join(required)}")
    return changes


def build_crud_router(
    *,
    model: Type,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    label: str,
    check_update: Optional[UpdateCheck] = None,
) -> APIRouter:
    """Build list/get/create/update/delete endpoints for one model.

    ``check_update`` receives the stored row and the incoming changes and may
    raise ``HTTPException`` to reject the merged result.
    """
    router = APIRouter()
    not_found = f"{label} not found"

    def get_repo(brewery_id: str = Depends(get_brewery_id), db: Session = Depends(get_db)) -> BreweryScopedRepo:
        return BreweryScopedRepo(model, db, brewery_id)

    @router.get("", response_model=List[out_schema])
    def list_items(
        limit: int = Query(100, ge=1, le=500),
        offset: int = Query(0, ge=0),
        repo: BreweryScopedRepo = Depends(get_repo),
    ):
        return repo.list(limit=limit, offset=offset)

    @router.get("/{id}", response_model=out_schema)
    def get_item(id: int, repo: BreweryScopedRepo = Depends(get_repo)):
        obj = repo.get(id)
        if not obj:
            raise HTTPException(status_code=404, detail=not_found)
        return obj

    @router.post("", response_model=out_schema, status_code=201)
    def create_item(data: create_schema, repo: BreweryScopedRepo = Depends(get_repo)):
        obj = repo.create(data.model_dump())
        log.info("Created %s %s", label, obj.id, extra={"brewery_id": repo.brewery_id})
        return obj

    @router.put("/{id}", response_model=out_schema)
    def update_item(id: int, data: update_schema, repo: BreweryScopedRepo = Depends(get_repo)):
        changes = update_changes(model, data)
        if check_update is not None:
            existing = repo.get(id)
            if not existing:
                raise HTTPException(status_code=404, detail=not_found)
            check_update(existing, changes)
        obj = repo.patch(id, changes)
        if not obj:
            raise HTTPException(status_code=404, detail=not_found)
        return obj

    @router.delete("/{id}", status_code=204)
    def delete_item(id: int, repo: BreweryScopedRepo = Depends(get_repo)):
        if not repo.delete(id):
            raise HTTPException(status_code=404, detail=not_found)
        log.info("Deleted %s %s", label, id, extra={"brewery_id": repo.brewery_id})
        return None

    return router

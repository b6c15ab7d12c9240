from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from datetime import datetime
from sqlalchemy import select
from sqlalchemy.orm import Session
from brewhouse.db.session import Base

ModelT = TypeVar("ModelT", bound=Base)


class BreweryScopedRepo(Generic[ModelT]):
    """Single-row CRUD for one model, restricted to a single brewery's rows."""

    def __init__(self, model: Type[ModelT], db: Session, brewery_id: str):
        self.model = model
        self.db = db
        self.brewery_id = brewery_id

    def _scoped(self):
        return select(self.model).where(self.model.brewery_id == self.brewery_id)

    def list(self, limit: int = 100, offset: int = 0, order_by=None, **filters: Any) -> List[ModelT]:
        query = self._scoped()
        for column, value in filters.items():
            query = query.where(getattr(self.model, column) == value)
        if order_by is None:
            order_by = self.model.id.desc()
        query = query.order_by(order_by).limit(limit).offset(offset)
        return list(self.db.scalars(query))

    def get(self, id: int) -> Optional[ModelT]:
        return self.db.scalars(self._scoped().where(self.model.id == id)).first()

    def create(self, data: Dict[str, Any]) -> ModelT:
        obj = self.model(**data, brewery_id=self.brewery_id)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def patch(self, id: int, data: Dict[str, Any]) -> Optional[ModelT]:
        obj = self.get(id)
        if obj is None:
            return None
        for key, value in data.items():
            setattr(obj, key, value)
        if hasattr(obj, "updated_at"):
            obj.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, id: int) -> bool:
        obj = self.get(id)
        if obj is None:
            return False
        self.db.delete(obj)
        self.db.commit()
        return True

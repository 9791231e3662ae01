from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete
from sqlalchemy.orm import Session

from formbuilder_core.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Read and Delete rows.

        Methods flush but never commit: the caller owns the transaction.

        **Parameters**

        * `model`: A SQLAlchemy model class
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def count(self, db: Session) -> int:
        return db.query(self.model).count()

    def remove(self, db: Session, *, id: int) -> Optional[int]:
        """Delete by primary key and return the id, or None if no row matched."""
        result = db.execute(delete(self.model).where(self.model.id == id))
        if result.rowcount == 0:
            return None
        return id

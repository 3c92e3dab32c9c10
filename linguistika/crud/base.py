import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from linguistika.config.database import Base
from linguistika.core.exceptions import NotFoundError, ReferentialError

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    # campo -> modelo referenciado, verificado antes de escribir
    references: Dict[str, Type[Base]] = {}

    def __init__(self, model: Type[ModelType]):
        """
        Objeto CRUD con los métodos por defecto para Crear, Leer, Actualizar y Borrar.

        **Parámetros**

        * `model`: una clase de modelo SQLAlchemy
        """
        self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.get(self.model, id)

    def get_or_404(self, db: Session, id: Any) -> ModelType:
        db_obj = self.get(db, id)
        if db_obj is None:
            raise NotFoundError(self.entity_name, id)
        return db_obj

    def get_multi(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        # Orden estable por id: las vistas muestran la colección tal cual llega
        query = db.query(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        obj_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        self.check_references(db, obj_data)
        self.before_create(db, obj_data)
        db_obj = self.model(**obj_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        logger.info("%s %s creado", self.entity_name, db_obj.id)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        id: Any,
        obj_in: Union[UpdateSchemaType, CreateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        db_obj = self.get_or_404(db, id)
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        self.check_references(db, update_data)
        self.before_update(db, db_obj, update_data)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        logger.info("%s %s actualizado: %s", self.entity_name, id, sorted(update_data))
        return db_obj

    def remove(self, db: Session, *, id: Any) -> ModelType:
        db_obj = self.get_or_404(db, id)
        self.before_remove(db, db_obj)
        db.delete(db_obj)
        db.commit()
        logger.info("%s %s eliminado", self.entity_name, id)
        return db_obj

    # Hooks para las subclases

    def check_references(self, db: Session, data: Dict[str, Any]) -> None:
        """Verifica que cada id referenciado en `data` exista."""
        for field, model in self.references.items():
            value = data.get(field)
            if value is not None and db.get(model, value) is None:
                raise ReferentialError.missing(model.__name__, field, value)

    def before_create(self, db: Session, data: Dict[str, Any]) -> None:
        pass

    def before_update(self, db: Session, db_obj: ModelType, data: Dict[str, Any]) -> None:
        pass

    def before_remove(self, db: Session, db_obj: ModelType) -> None:
        pass

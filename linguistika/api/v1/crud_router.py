from typing import List, Type

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from linguistika.config.database import get_db
from linguistika.crud.base import CRUDBase


def build_crud_router(
    crud: CRUDBase,
    view_schema: Type[BaseModel],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    include_list: bool = True,
) -> APIRouter:
    """Router REST con las cuatro operaciones del facade para una entidad."""
    router = APIRouter()

    if include_list:

        @router.get("/", response_model=List[view_schema])
        def list_items(db: Session = Depends(get_db)):
            return crud.get_multi(db)

    @router.get("/{id}", response_model=view_schema)
    def get_item(id: int, db: Session = Depends(get_db)):
        return crud.get_or_404(db, id)

    @router.post("/", response_model=view_schema, status_code=status.HTTP_201_CREATED)
    def create_item(obj_in: create_schema, db: Session = Depends(get_db)):
        return crud.create(db, obj_in=obj_in)

    @router.put("/{id}", response_model=view_schema)
    def update_item(id: int, obj_in: update_schema, db: Session = Depends(get_db)):
        return crud.update(db, id=id, obj_in=obj_in)

    @router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(id: int, db: Session = Depends(get_db)):
        crud.remove(db, id=id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router

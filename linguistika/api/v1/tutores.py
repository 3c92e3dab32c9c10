from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from linguistika.api.v1.crud_router import build_crud_router
from linguistika.config.database import get_db
from linguistika.crud.tutor import tutor as crud_tutor
from linguistika.schemas.tutor import Tutor, TutorCreate, TutorUpdate

router = APIRouter()


# Antes que "/{id}" para que "search" no se lea como id
@router.get("/search", response_model=List[Tutor])
def search_tutores(
    name: str = Query(..., description="Nombre o especialidad a buscar"),
    page_size: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Buscar tutores por nombre o especialidad"""
    return crud_tutor.search_by_name(db, name, limit=page_size)


router.include_router(build_crud_router(crud_tutor, Tutor, TutorCreate, TutorUpdate))

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from linguistika.api.v1.crud_router import build_crud_router
from linguistika.config.database import get_db
from linguistika.crud.pago import pago as crud_pago
from linguistika.schemas.pago import Pago, PagoCreate, PagoUpdate

router = APIRouter()


@router.get("/", response_model=List[Pago])
def get_pagos(
    tutor_id: Optional[int] = Query(None, description="Filtrar por tutor"),
    db: Session = Depends(get_db),
):
    """Lista de pagos, opcionalmente de un solo tutor"""
    if tutor_id is not None:
        return crud_pago.get_by_tutor(db, tutor_id)
    return crud_pago.get_multi(db)


router.include_router(
    build_crud_router(crud_pago, Pago, PagoCreate, PagoUpdate, include_list=False)
)

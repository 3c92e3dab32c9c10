from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from linguistika.config.database import get_db
from linguistika.crud.dashboard import dashboard as crud_dashboard
from linguistika.schemas.clase import Clase
from linguistika.schemas.dashboard import ResumenTutor, Stats

router = APIRouter()


@router.get("/stats", response_model=Stats)
def get_stats(db: Session = Depends(get_db)):
    """Contadores globales; se recalculan en cada llamada"""
    return crud_dashboard.get_stats(db)


@router.get("/agenda", response_model=List[Clase])
def get_agenda(
    fecha: Optional[date] = Query(None, description="Fecha (por defecto hoy)"),
    db: Session = Depends(get_db),
):
    return crud_dashboard.get_agenda(db, fecha or date.today())


@router.get("/resumen-tutores", response_model=List[ResumenTutor])
def get_resumen_tutores(
    fecha: Optional[date] = Query(None, description="Fecha (por defecto hoy)"),
    db: Session = Depends(get_db),
):
    return crud_dashboard.get_resumen_tutores(db, fecha or date.today())

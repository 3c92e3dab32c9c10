from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, joinedload

from linguistika.core.exceptions import InvalidTransitionError, ValidationError
from linguistika.crud.base import CRUDBase
from linguistika.models.clase import Clase
from linguistika.models.enums import EstadoClase
from linguistika.models.matricula import Matricula
from linguistika.models.pago import Pago
from linguistika.schemas.clase import ClaseCreate, ClaseUpdate

# Transiciones permitidas; no se vuelve nunca a "programada"
TRANSICIONES = {
    EstadoClase.PROGRAMADA: {EstadoClase.COMPLETADA, EstadoClase.CANCELADA},
    EstadoClase.COMPLETADA: set(),
    EstadoClase.CANCELADA: set(),
}


class CRUDClase(CRUDBase[Clase, ClaseCreate, ClaseUpdate]):
    references = {"matricula_id": Matricula}

    def _with_joins(self, db: Session):
        return db.query(Clase).options(
            joinedload(Clase.matricula).joinedload(Matricula.estudiante),
            joinedload(Clase.matricula).joinedload(Matricula.curso),
            joinedload(Clase.matricula).joinedload(Matricula.tutor),
        )

    def get_multi(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> List[Clase]:
        query = self._with_joins(db).order_by(Clase.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_by_fecha(self, db: Session, fecha: date) -> List[Clase]:
        return (
            self._with_joins(db)
            .filter(Clase.fecha == fecha)
            .order_by(Clase.hora_inicio, Clase.id)
            .all()
        )

    def before_update(self, db: Session, db_obj: Clase, data: Dict[str, Any]) -> None:
        nuevo = data.get("estado")
        if nuevo is not None and nuevo != db_obj.estado:
            if nuevo not in TRANSICIONES[db_obj.estado]:
                raise InvalidTransitionError("La clase", db_obj.estado.value, nuevo.value)

        for field in ("hora_inicio", "hora_fin"):
            if field in data and data[field] is None:
                raise ValidationError(f"El campo '{field}' es obligatorio", field)
        hora_inicio = data.get("hora_inicio", db_obj.hora_inicio)
        hora_fin = data.get("hora_fin", db_obj.hora_fin)
        if hora_fin <= hora_inicio:
            raise ValidationError("hora_fin debe ser posterior a hora_inicio", "hora_fin")

    def before_remove(self, db: Session, db_obj: Clase) -> None:
        db.query(Pago).filter(Pago.clase_id == db_obj.id).update(
            {Pago.clase_id: None}, synchronize_session="fetch"
        )


clase = CRUDClase(Clase)

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from linguistika.crud.base import CRUDBase
from linguistika.models.clase import Clase
from linguistika.models.enums import EstadoPago
from linguistika.models.pago import Pago
from linguistika.models.tutor import Tutor
from linguistika.schemas.pago import PagoCreate, PagoUpdate


class CRUDPago(CRUDBase[Pago, PagoCreate, PagoUpdate]):
    references = {"tutor_id": Tutor, "clase_id": Clase}

    def get_multi(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> List[Pago]:
        query = (
            db.query(Pago)
            .options(joinedload(Pago.tutor))
            .order_by(Pago.id)
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_by_tutor(self, db: Session, tutor_id: int) -> List[Pago]:
        return (
            db.query(Pago)
            .options(joinedload(Pago.tutor))
            .filter(Pago.tutor_id == tutor_id)
            .order_by(Pago.id)
            .all()
        )

    def total_pendiente(self, db: Session) -> float:
        total = (
            db.query(func.coalesce(func.sum(Pago.monto), 0.0))
            .filter(Pago.estado == EstadoPago.PENDIENTE)
            .scalar()
        )
        return round(float(total), 2)


pago = CRUDPago(Pago)

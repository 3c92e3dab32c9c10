from typing import List

from sqlalchemy.orm import Session

from linguistika.core.exceptions import ReferentialError
from linguistika.crud.base import CRUDBase
from linguistika.models.matricula import Matricula
from linguistika.models.pago import Pago
from linguistika.models.tutor import Tutor
from linguistika.schemas.tutor import TutorCreate, TutorUpdate


class CRUDTutor(CRUDBase[Tutor, TutorCreate, TutorUpdate]):
    def search_by_name(
        self, db: Session, name: str, skip: int = 0, limit: int = 100
    ) -> List[Tutor]:
        return (
            db.query(Tutor)
            .filter(
                (Tutor.nombre.ilike(f"%{name}%"))
                | (Tutor.especialidad.ilike(f"%{name}%"))
            )
            .order_by(Tutor.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def before_remove(self, db: Session, db_obj: Tutor) -> None:
        if db.query(Matricula).filter(Matricula.tutor_id == db_obj.id).count():
            raise ReferentialError(
                f"El tutor {db_obj.id} tiene matrículas asignadas", "Tutor", "id", db_obj.id
            )
        if db.query(Pago).filter(Pago.tutor_id == db_obj.id).count():
            raise ReferentialError(
                f"El tutor {db_obj.id} tiene pagos registrados", "Tutor", "id", db_obj.id
            )


tutor = CRUDTutor(Tutor)

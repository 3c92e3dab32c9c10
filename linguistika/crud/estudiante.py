from sqlalchemy.orm import Session

from linguistika.core.exceptions import ReferentialError
from linguistika.crud.base import CRUDBase
from linguistika.models.estudiante import Estudiante
from linguistika.models.matricula import Matricula
from linguistika.schemas.estudiante import EstudianteCreate, EstudianteUpdate


class CRUDEstudiante(CRUDBase[Estudiante, EstudianteCreate, EstudianteUpdate]):
    def before_remove(self, db: Session, db_obj: Estudiante) -> None:
        if db.query(Matricula).filter(Matricula.estudiante_id == db_obj.id).count():
            raise ReferentialError(
                f"El estudiante {db_obj.id} tiene matrículas",
                "Estudiante",
                "id",
                db_obj.id,
            )


estudiante = CRUDEstudiante(Estudiante)

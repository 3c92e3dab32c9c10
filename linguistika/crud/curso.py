from sqlalchemy.orm import Session

from linguistika.core.exceptions import ReferentialError
from linguistika.crud.base import CRUDBase
from linguistika.models.curso import Curso
from linguistika.models.matricula import Matricula
from linguistika.schemas.curso import CursoCreate, CursoUpdate


class CRUDCurso(CRUDBase[Curso, CursoCreate, CursoUpdate]):
    def before_remove(self, db: Session, db_obj: Curso) -> None:
        if db.query(Matricula).filter(Matricula.curso_id == db_obj.id).count():
            raise ReferentialError(
                f"El curso {db_obj.id} tiene matrículas", "Curso", "id", db_obj.id
            )


curso = CRUDCurso(Curso)

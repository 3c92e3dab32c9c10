from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, joinedload

from linguistika.core.exceptions import ValidationError
from linguistika.crud.base import CRUDBase
from linguistika.models.curso import Curso
from linguistika.models.enums import EstadoRegistro
from linguistika.models.estudiante import Estudiante
from linguistika.models.matricula import Matricula
from linguistika.models.tutor import Tutor
from linguistika.schemas.matricula import MatriculaCreate, MatriculaUpdate


class CRUDMatricula(CRUDBase[Matricula, MatriculaCreate, MatriculaUpdate]):
    references = {
        "estudiante_id": Estudiante,
        "curso_id": Curso,
        "tutor_id": Tutor,
    }

    def get_multi(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> List[Matricula]:
        query = (
            db.query(Matricula)
            .options(
                joinedload(Matricula.estudiante),
                joinedload(Matricula.curso),
                joinedload(Matricula.tutor),
            )
            .order_by(Matricula.id)
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_activas(self, db: Session, curso_id: int, exclude_id: Optional[int] = None) -> int:
        query = db.query(Matricula).filter(
            Matricula.curso_id == curso_id,
            Matricula.estado == EstadoRegistro.ACTIVO,
        )
        if exclude_id:
            query = query.filter(Matricula.id != exclude_id)
        return query.count()

    def _check_capacity(self, db: Session, curso_id: int, exclude_id: Optional[int] = None) -> None:
        curso = db.get(Curso, curso_id)
        if self.count_activas(db, curso_id, exclude_id) >= curso.max_estudiantes:
            raise ValidationError(
                f"El curso '{curso.nombre}' está completo ({curso.max_estudiantes} estudiantes)",
                "curso_id",
            )

    def before_create(self, db: Session, data: Dict[str, Any]) -> None:
        if data.get("estado", EstadoRegistro.ACTIVO) == EstadoRegistro.ACTIVO:
            self._check_capacity(db, data["curso_id"])

    def before_update(self, db: Session, db_obj: Matricula, data: Dict[str, Any]) -> None:
        curso_id = data.get("curso_id", db_obj.curso_id)
        estado = data.get("estado", db_obj.estado)
        moving = curso_id != db_obj.curso_id or (
            estado == EstadoRegistro.ACTIVO and db_obj.estado != EstadoRegistro.ACTIVO
        )
        if moving and estado == EstadoRegistro.ACTIVO:
            self._check_capacity(db, curso_id, exclude_id=db_obj.id)


matricula = CRUDMatricula(Matricula)

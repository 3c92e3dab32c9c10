from datetime import date
from typing import Dict, List

from sqlalchemy.orm import Session

from linguistika.crud.clase import clase as crud_clase
from linguistika.crud.pago import pago as crud_pago
from linguistika.models.clase import Clase
from linguistika.models.curso import Curso
from linguistika.models.enums import EstadoRegistro
from linguistika.models.estudiante import Estudiante
from linguistika.models.matricula import Matricula
from linguistika.models.tutor import Tutor
from linguistika.schemas.dashboard import ResumenTutor, Stats


class CRUDDashboard:
    """Consultas de solo lectura que cruzan varias entidades."""

    def get_stats(self, db: Session) -> Stats:
        def activos(model) -> int:
            return db.query(model).filter(model.estado == EstadoRegistro.ACTIVO).count()

        return Stats(
            tutores_activos=activos(Tutor),
            estudiantes_activos=activos(Estudiante),
            cursos_activos=activos(Curso),
            matriculas_activas=activos(Matricula),
            total_clases=db.query(Clase).count(),
            ingresos_pendientes=crud_pago.total_pendiente(db),
        )

    def get_agenda(self, db: Session, fecha: date) -> List[Clase]:
        return crud_clase.get_by_fecha(db, fecha)

    def get_resumen_tutores(self, db: Session, fecha: date) -> List[ResumenTutor]:
        grupos: Dict[int, dict] = {}
        for c in crud_clase.get_by_fecha(db, fecha):
            tutor = c.matricula.tutor
            grupo = grupos.setdefault(
                tutor.id,
                {"tutor_nombre": tutor.nombre, "total": 0, "cursos": [], "estudiantes": []},
            )
            grupo["total"] += 1
            if c.curso_nombre not in grupo["cursos"]:
                grupo["cursos"].append(c.curso_nombre)
            if c.estudiante_nombre not in grupo["estudiantes"]:
                grupo["estudiantes"].append(c.estudiante_nombre)

        resumen = [
            ResumenTutor(
                tutor_nombre=g["tutor_nombre"],
                total_clases=g["total"],
                cursos=", ".join(g["cursos"]),
                estudiantes=", ".join(g["estudiantes"]),
            )
            for g in grupos.values()
        ]
        return sorted(resumen, key=lambda r: r.tutor_nombre)


dashboard = CRUDDashboard()

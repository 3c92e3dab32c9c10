from datetime import date, time
from typing import Any, Dict, List, Optional

from linguistika.core import validators
from linguistika.models.enums import EstadoClase, EstadoPago, Nivel
from linguistika.schemas.pago import PagoUpdate
from linguistika.views.base import CollectionView


class TutoresView(CollectionView):
    entity = "tutores"
    validator = staticmethod(validators.validate_tutor)

    def default_draft(self) -> Dict[str, Any]:
        return {
            "nombre": "",
            "email": "",
            "telefono": "",
            "especialidad": "Inglés",
            "tarifa_por_hora": 0.0,
        }


class CursosView(CollectionView):
    entity = "cursos"
    validator = staticmethod(validators.validate_curso)

    def default_draft(self) -> Dict[str, Any]:
        return {"nombre": "", "descripcion": "", "nivel": Nivel.A1, "max_estudiantes": 10}


class EstudiantesView(CollectionView):
    entity = "estudiantes"
    validator = staticmethod(validators.validate_estudiante)

    def default_draft(self) -> Dict[str, Any]:
        return {"nombre": "", "email": "", "telefono": ""}


class MatriculasView(CollectionView):
    entity = "matriculas"
    related = ("estudiantes", "cursos", "tutores")
    validator = staticmethod(validators.validate_matricula)

    def default_draft(self) -> Dict[str, Any]:
        return {"estudiante_id": 0, "curso_id": 0, "tutor_id": 0}


class ClasesView(CollectionView):
    entity = "clases"
    related = ("matriculas",)
    validator = staticmethod(validators.validate_clase)

    def default_draft(self) -> Dict[str, Any]:
        return {
            "matricula_id": 0,
            "fecha": date.today(),
            "hora_inicio": time(9, 0),
            "hora_fin": time(10, 0),
            "estado": EstadoClase.PROGRAMADA,
            "notas": "",
        }


class PagosView(CollectionView):
    entity = "pagos"
    related = ("tutores",)
    validator = staticmethod(validators.validate_pago)

    def __init__(self, api, **kwargs):
        super().__init__(api, **kwargs)
        # None = todos los tutores
        self.filter_tutor: Optional[int] = None

    def default_draft(self) -> Dict[str, Any]:
        return {"tutor_id": 0, "monto": 0.0, "descripcion": "", "estado": EstadoPago.PAGADO}

    @property
    def filtered_items(self) -> List[Any]:
        if self.filter_tutor is None:
            return list(self.items)
        return [p for p in self.items if p.tutor_id == self.filter_tutor]

    @property
    def total_filtrado(self) -> float:
        return round(sum(p.monto for p in self.filtered_items), 2)

    async def mark_paid(self, pago_id: int) -> bool:
        data = PagoUpdate(estado=EstadoPago.PAGADO)
        return await self._mutate(lambda: self.facade.update(pago_id, data), close_draft=False)

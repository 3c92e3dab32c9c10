"""
Contrato del facade de acceso a datos.

Cada entidad expone ``get_all``, ``create``, ``update`` y ``delete``; el
dashboard expone tres consultas de solo lectura. Todas son corutinas para que
las vistas puedan lanzarlas en paralelo y acotarlas con un timeout.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Generic, List, Type, TypeVar

from pydantic import BaseModel

from linguistika import schemas

ViewSchemaType = TypeVar("ViewSchemaType", bound=BaseModel)


@dataclass(frozen=True)
class EntityDefinition:
    name: str
    view_schema: Type[BaseModel]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]


ENTITIES = {
    "tutores": EntityDefinition(
        "tutores", schemas.Tutor, schemas.TutorCreate, schemas.TutorUpdate
    ),
    "cursos": EntityDefinition(
        "cursos", schemas.Curso, schemas.CursoCreate, schemas.CursoUpdate
    ),
    "estudiantes": EntityDefinition(
        "estudiantes",
        schemas.Estudiante,
        schemas.EstudianteCreate,
        schemas.EstudianteUpdate,
    ),
    "matriculas": EntityDefinition(
        "matriculas", schemas.Matricula, schemas.MatriculaCreate, schemas.MatriculaUpdate
    ),
    "clases": EntityDefinition(
        "clases", schemas.Clase, schemas.ClaseCreate, schemas.ClaseUpdate
    ),
    "pagos": EntityDefinition(
        "pagos", schemas.Pago, schemas.PagoCreate, schemas.PagoUpdate
    ),
}


class EntityFacade(ABC, Generic[ViewSchemaType]):
    def __init__(self, definition: EntityDefinition):
        self.definition = definition

    @property
    def name(self) -> str:
        return self.definition.name

    @abstractmethod
    async def get_all(self) -> List[ViewSchemaType]:
        """Colección completa en un orden estable (por id)."""

    @abstractmethod
    async def create(self, data: BaseModel) -> ViewSchemaType:
        """Crea el registro; falla con ValidationError o ReferentialError."""

    @abstractmethod
    async def update(self, id: int, data: BaseModel) -> ViewSchemaType:
        """Actualiza solo los campos presentes en `data`; NotFoundError si el id no existe."""

    @abstractmethod
    async def delete(self, id: int) -> None:
        """Borra el registro; NotFoundError si el id no existe."""


class DashboardFacade(ABC):
    @abstractmethod
    async def get_stats(self) -> schemas.Stats:
        pass

    @abstractmethod
    async def get_agenda(self, fecha: date) -> List[schemas.Clase]:
        pass

    @abstractmethod
    async def get_resumen_tutores(self, fecha: date) -> List[schemas.ResumenTutor]:
        pass


@dataclass
class AcademyApi:
    """Agrupa los facades, al estilo ``api.tutores.get_all()``."""

    tutores: EntityFacade
    cursos: EntityFacade
    estudiantes: EntityFacade
    matriculas: EntityFacade
    clases: EntityFacade
    pagos: EntityFacade
    dashboard: DashboardFacade

    def entity(self, name: str) -> Any:
        return getattr(self, name)

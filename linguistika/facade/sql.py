import asyncio
import logging
from contextlib import contextmanager
from datetime import date
from typing import Callable, List, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from linguistika import schemas
from linguistika.config.database import SessionLocal
from linguistika.core.exceptions import TransportError, error_from_integrity
from linguistika.crud.base import CRUDBase
from linguistika.crud.clase import clase
from linguistika.crud.curso import curso
from linguistika.crud.dashboard import dashboard
from linguistika.crud.estudiante import estudiante
from linguistika.crud.matricula import matricula
from linguistika.crud.pago import pago
from linguistika.crud.tutor import tutor
from linguistika.facade.base import (
    ENTITIES,
    AcademyApi,
    DashboardFacade,
    EntityDefinition,
    EntityFacade,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CRUDS = {
    "tutores": tutor,
    "cursos": curso,
    "estudiantes": estudiante,
    "matriculas": matricula,
    "clases": clase,
    "pagos": pago,
}


@contextmanager
def session_scope(session_factory: sessionmaker):
    """Una sesión por operación; los errores de SQLAlchemy salen como errores de dominio."""
    db: Session = session_factory()
    try:
        yield db
    except IntegrityError as e:
        db.rollback()
        raise error_from_integrity(str(e.orig)) from e
    except OperationalError as e:
        db.rollback()
        logger.error("Error operacional de base de datos: %s", e)
        raise TransportError("Base de datos no disponible", transient=True) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error de base de datos: %s", e)
        raise TransportError(f"Error de base de datos: {e}", transient=False) from e
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def _execute(session_factory: sessionmaker, work: Callable[[Session], T]) -> T:
    with session_scope(session_factory) as db:
        return work(db)


async def run_in_session(session_factory: sessionmaker, work: Callable[[Session], T]) -> T:
    """Ejecuta `work(db)` en un hilo para no bloquear el bucle de eventos."""
    return await asyncio.to_thread(_execute, session_factory, work)


class SqlEntityFacade(EntityFacade):
    """
    Facade sobre la capa CRUD.

    Cada llamada se ejecuta en un hilo con su propia sesión.
    """

    def __init__(
        self,
        definition: EntityDefinition,
        crud: CRUDBase,
        session_factory: sessionmaker = SessionLocal,
    ):
        super().__init__(definition)
        self.crud = crud
        self.session_factory = session_factory

    def _view(self, db_obj):
        return self.definition.view_schema.model_validate(db_obj)

    async def _run(self, work: Callable[[Session], T]) -> T:
        return await run_in_session(self.session_factory, work)

    async def get_all(self):
        return await self._run(lambda db: [self._view(obj) for obj in self.crud.get_multi(db)])

    async def create(self, data: BaseModel):
        return await self._run(lambda db: self._view(self.crud.create(db, obj_in=data)))

    async def update(self, id: int, data: BaseModel):
        return await self._run(lambda db: self._view(self.crud.update(db, id=id, obj_in=data)))

    async def delete(self, id: int) -> None:
        await self._run(lambda db: self.crud.remove(db, id=id))


class SqlDashboardFacade(DashboardFacade):
    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    async def get_stats(self) -> schemas.Stats:
        return await run_in_session(self.session_factory, dashboard.get_stats)

    async def get_agenda(self, fecha: date) -> List[schemas.Clase]:
        return await run_in_session(
            self.session_factory,
            lambda db: [schemas.Clase.model_validate(c) for c in dashboard.get_agenda(db, fecha)],
        )

    async def get_resumen_tutores(self, fecha: date) -> List[schemas.ResumenTutor]:
        return await run_in_session(
            self.session_factory, lambda db: dashboard.get_resumen_tutores(db, fecha)
        )


def build_sql_api(session_factory: sessionmaker = SessionLocal) -> AcademyApi:
    facades = {
        name: SqlEntityFacade(definition, CRUDS[name], session_factory)
        for name, definition in ENTITIES.items()
    }
    return AcademyApi(dashboard=SqlDashboardFacade(session_factory), **facades)

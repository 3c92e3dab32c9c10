"""
Patrón de sincronización de vistas.

Cada pantalla del back office hace lo mismo: carga una colección desde el
facade, la muestra, y permite crear, editar o borrar mediante un borrador.
Tras cada escritura correcta se recarga la colección completa; no hay parches
optimistas en local.

Estados::

    IDLE -> LOADING -> LOADED <-> SUBMITTING
                   \\-> FAILED (nunca se cargó nada)

El borrador (``draft`` / ``editing_id``) se superpone a LOADED.
"""

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar

from pydantic import ValidationError as PydanticValidationError

from linguistika.config.settings import settings
from linguistika.core.exceptions import (
    LinguistikaError,
    NotFoundError,
    ReferentialError,
    TransportError,
    ValidationError,
)
from linguistika.facade.base import ENTITIES, AcademyApi

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ViewState(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    SUBMITTING = "submitting"
    FAILED = "failed"


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    REFERENTIAL = "referential"
    TRANSPORT = "transport"


RECOVERY = {
    ErrorKind.VALIDATION: "fix_form",
    ErrorKind.NOT_FOUND: "reload",
    ErrorKind.REFERENTIAL: "fix_references",
    ErrorKind.TRANSPORT: "retry",
}


@dataclass(frozen=True)
class ViewError:
    """Error tipado que la vista muestra al usuario."""

    kind: ErrorKind
    message: str
    field: Optional[str] = None
    retryable: bool = False

    @property
    def recovery(self) -> str:
        if self.kind is ErrorKind.TRANSPORT and not self.retryable:
            return "report"
        return RECOVERY[self.kind]

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ViewError":
        if isinstance(exc, ValidationError):
            return cls(ErrorKind.VALIDATION, exc.message, exc.field)
        if isinstance(exc, NotFoundError):
            return cls(ErrorKind.NOT_FOUND, exc.message)
        if isinstance(exc, ReferentialError):
            return cls(ErrorKind.REFERENTIAL, exc.message, exc.field)
        if isinstance(exc, TransportError):
            return cls(ErrorKind.TRANSPORT, exc.message, retryable=exc.transient)
        return cls(ErrorKind.TRANSPORT, f"Error inesperado: {exc}")


class BaseView:
    """Estado de carga, tokens de petición, timeouts y reintentos."""

    def __init__(
        self,
        notify: Callable[[ViewError], None] = None,
        timeout: float = None,
        max_retries: int = None,
        retry_delay: float = None,
    ):
        self.state = ViewState.IDLE
        self.error: Optional[ViewError] = None
        self.stale = False
        self.notify = notify
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.max_retries = settings.load_max_retries if max_retries is None else max_retries
        self.retry_delay = settings.retry_delay if retry_delay is None else retry_delay
        self._request_seq = 0
        self._loaded_once = False

    @property
    def loading(self) -> bool:
        return self.state is ViewState.LOADING

    def _next_token(self) -> int:
        self._request_seq += 1
        return self._request_seq

    def _is_current(self, token: int) -> bool:
        return token == self._request_seq

    async def _call(self, factory: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(factory(), self.timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(f"Sin respuesta tras {self.timeout}s", transient=True) from e

    async def _fetch(self, factory: Callable[[], Awaitable[T]]) -> T:
        """Lectura con reintentos solo para fallos transitorios."""
        attempt = 0
        while True:
            try:
                return await self._call(factory)
            except LinguistikaError as e:
                if not e.transient or attempt >= self.max_retries:
                    raise
                attempt += 1
                logger.warning(
                    "%s: fallo transitorio (%s), reintento %s/%s",
                    self.__class__.__name__,
                    e.message,
                    attempt,
                    self.max_retries,
                )
                await asyncio.sleep(self.retry_delay)

    def _report(self, exc: BaseException) -> ViewError:
        error = ViewError.from_exception(exc)
        if isinstance(exc, LinguistikaError):
            logger.warning("%s: %s", self.__class__.__name__, exc.message)
        else:
            logger.error("%s: error inesperado", self.__class__.__name__, exc_info=exc)
        self.error = error
        if self.notify:
            self.notify(error)
        return error

    def _settle(self) -> None:
        self.state = ViewState.LOADED if self._loaded_once else ViewState.FAILED

    async def _gather(self, *factories: Callable[[], Awaitable[Any]]) -> Tuple[List[Any], List[BaseException]]:
        results = await asyncio.gather(
            *(self._fetch(factory) for factory in factories), return_exceptions=True
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        return results, failures


class CollectionView(BaseView):
    """
    Controlador genérico de una pantalla de colección.

    Las subclases fijan ``entity`` (nombre del facade en ``AcademyApi``),
    ``related`` (colecciones auxiliares cargadas en paralelo, p. ej. los
    selectores de una matrícula), ``validator`` y ``default_draft``.
    """

    entity: str = ""
    related: Tuple[str, ...] = ()
    validator: Callable[[Dict[str, Any]], None] = None

    def __init__(self, api: AcademyApi, **kwargs):
        super().__init__(**kwargs)
        self.api = api
        self.definition = ENTITIES[self.entity]
        self.facade = api.entity(self.entity)
        self.items: List[Any] = []
        self.options: Dict[str, List[Any]] = {name: [] for name in self.related}
        self.draft: Optional[Dict[str, Any]] = None
        self.editing_id: Optional[int] = None
        self.pending_delete: Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self.draft is not None

    def default_draft(self) -> Dict[str, Any]:
        return {}

    # ==========================================
    # CARGA
    # ==========================================

    async def load(self) -> bool:
        token = self._next_token()
        self.state = ViewState.LOADING
        facades = [self.facade] + [self.api.entity(name) for name in self.related]
        results, failures = await self._gather(*(f.get_all for f in facades))

        if not self._is_current(token):
            logger.debug("%s: respuesta obsoleta descartada", self.__class__.__name__)
            return False

        if failures:
            self._report(failures[0])
            self.stale = self._loaded_once
            self._settle()
            return False

        self.items = results[0]
        self.options = dict(zip(self.related, results[1:]))
        self._loaded_once = True
        self.stale = False
        self.error = None
        self.state = ViewState.LOADED
        return True

    # ==========================================
    # BORRADOR
    # ==========================================

    def open_create(self) -> Dict[str, Any]:
        self.draft = self.default_draft()
        self.editing_id = None
        self.error = None
        return self.draft

    def open_edit(self, entity: Any) -> Dict[str, Any]:
        # Solo campos editables; los campos calculados nunca pasan al borrador
        self.draft = {
            field: getattr(entity, field) for field in self.definition.create_schema.model_fields
        }
        self.editing_id = entity.id
        self.error = None
        return self.draft

    def close_draft(self) -> None:
        self.draft = None
        self.editing_id = None

    def build_input(self, draft: Dict[str, Any]):
        """Valida el borrador y lo convierte en el esquema de entrada."""
        if self.validator:
            self.validator(draft)
        schema = (
            self.definition.update_schema
            if self.editing_id is not None
            else self.definition.create_schema
        )
        try:
            return schema.model_validate(draft)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = first["loc"][0] if first["loc"] else None
            raise ValidationError(first["msg"], str(field) if field is not None else None) from e

    async def submit(self, draft: Dict[str, Any] = None) -> bool:
        if draft is not None:
            self.draft = dict(draft)
        if self.draft is None:
            raise RuntimeError(f"{self.__class__.__name__}: no hay formulario abierto")

        try:
            data = self.build_input(self.draft)
        except ValidationError as e:
            self._report(e)
            return False

        editing_id = self.editing_id
        if editing_id is not None:
            ok = await self._mutate(lambda: self.facade.update(editing_id, data))
        else:
            ok = await self._mutate(lambda: self.facade.create(data))
        return ok

    # ==========================================
    # BORRADO
    # ==========================================

    def request_delete(self, id: int) -> None:
        """Primer paso: pide confirmación; todavía no se llama al facade."""
        self.pending_delete = id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        if self.pending_delete is None or self.state is ViewState.SUBMITTING:
            return False
        id = self.pending_delete
        self.pending_delete = None
        return await self._mutate(lambda: self.facade.delete(id), close_draft=False)

    # ==========================================
    # ESCRITURA + RECARGA
    # ==========================================

    async def _mutate(self, factory: Callable[[], Awaitable[Any]], close_draft: bool = True) -> bool:
        """Escribe sin reintentos y recarga solo después de completar la escritura."""
        if self.state is ViewState.SUBMITTING:
            logger.info("%s: escritura en curso, petición ignorada", self.__class__.__name__)
            return False
        # Una carga en vuelo no debe pisar el estado durante la escritura
        self._next_token()
        self.state = ViewState.SUBMITTING
        try:
            await self._call(factory)
        except Exception as e:
            self._report(e)
            self._settle()
            return False

        if close_draft:
            self.close_draft()
        self.error = None
        await self.load()
        return True

"""
Excepciones del dominio de Linguistika.
Las lanza la capa de acceso a datos (facade) y la validación local de borradores.
"""

import re
from typing import Any, Dict, Optional


class LinguistikaError(Exception):
    """
    Excepción base para todos los errores del dominio.
    """

    transient = False

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detail": self.message,
            "error_code": self.error_code,
            "field": getattr(self, "field", None),
        }


# ===============================================
# VALIDACIÓN
# ===============================================

class ValidationError(LinguistikaError):
    """Datos inválidos (campo requerido vacío, monto no positivo, ...)."""

    def __init__(self, message: str, field: str = None, details: Dict[str, Any] = None):
        super().__init__(message, "VALIDATION_ERROR", details, 400)
        self.field = field


class InvalidTransitionError(ValidationError):
    """Cambio de estado no permitido."""

    def __init__(self, entity: str, current_state: str, requested_state: str):
        message = (
            f"{entity} está en estado '{current_state}', "
            f"no puede pasar a '{requested_state}'"
        )
        super().__init__(message, "estado")
        self.error_code = "INVALID_TRANSITION"
        self.current_state = current_state
        self.requested_state = requested_state


# ===============================================
# ERRORES REPORTADOS POR EL FACADE
# ===============================================

class NotFoundError(LinguistikaError):
    """El id solicitado no existe."""

    def __init__(self, entity: str, id: Any, message: str = None):
        message = message or f"No se encontró {entity} con id = {id}"
        super().__init__(message, "NOT_FOUND", status_code=404)
        self.entity = entity
        self.id = id


class ReferentialError(LinguistikaError):
    """Una referencia a otra entidad no existe o impide la operación."""

    def __init__(self, message: str, entity: str = None, field: str = None, value: Any = None):
        super().__init__(message, "REFERENTIAL_ERROR", status_code=409)
        self.entity = entity
        self.field = field
        self.value = value

    @classmethod
    def missing(cls, entity: str, field: str, value: Any) -> "ReferentialError":
        return cls(f"{entity} con id = {value} no existe", entity, field, value)


class TransportError(LinguistikaError):
    """Fallo de transporte o de ejecución al hablar con el facade."""

    def __init__(self, message: str, transient: bool = True, details: Dict[str, Any] = None):
        super().__init__(message, "TRANSPORT_ERROR", details, 503)
        self.transient = transient


def error_from_response(status_code: int, payload: Optional[Dict[str, Any]]) -> LinguistikaError:
    """Reconstruye la excepción de dominio a partir de una respuesta HTTP de error."""
    payload = payload or {}
    detail = payload.get("detail", f"HTTP {status_code}")
    if isinstance(detail, list):
        # Errores de validación de FastAPI
        first = detail[0] if detail else {}
        loc = first.get("loc", [])
        return ValidationError(first.get("msg", "Datos inválidos"), str(loc[-1]) if loc else None)

    if status_code in (400, 422):
        error = ValidationError(detail, payload.get("field"))
        if payload.get("error_code") == "INVALID_TRANSITION":
            error.error_code = "INVALID_TRANSITION"
        return error
    if status_code == 404:
        return NotFoundError("registro", None, detail)
    if status_code == 409:
        return ReferentialError(detail, field=payload.get("field"))
    return TransportError(detail, transient=status_code >= 500)


_NOT_NULL = (
    re.compile(r"NOT NULL constraint failed: \w+\.(\w+)"),
    re.compile(r'null value in column "(\w+)"'),
)
_CHECK = re.compile(r"CHECK constraint failed|violates check constraint", re.IGNORECASE)


def error_from_integrity(message: str) -> LinguistikaError:
    """
    Traduce el mensaje de un IntegrityError del driver.

    NOT NULL y CHECK son datos inválidos; el resto (claves foráneas, únicos)
    son problemas de referencias.
    """
    for pattern in _NOT_NULL:
        match = pattern.search(message)
        if match:
            field = match.group(1)
            return ValidationError(f"El campo '{field}' es obligatorio", field)
    if _CHECK.search(message):
        return ValidationError(f"Valor no permitido: {message}")
    return ReferentialError(f"Violación de integridad: {message}")

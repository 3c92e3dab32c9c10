"""
Validación local de borradores.

Se ejecuta antes de llamar al facade: si falla, la petición no se envía y el
formulario sigue abierto.
"""

from typing import Any, Dict

from linguistika.core.exceptions import ValidationError

Draft = Dict[str, Any]


def require_text(draft: Draft, field: str, label: str) -> None:
    value = draft.get(field)
    if value is None or not str(value).strip():
        raise ValidationError(f"El campo '{label}' es obligatorio", field)


def require_positive(draft: Draft, field: str, label: str) -> None:
    value = draft.get(field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"El campo '{label}' debe ser un número", field)
    if number <= 0:
        raise ValidationError(f"El campo '{label}' debe ser mayor que 0", field)


def require_reference(draft: Draft, field: str, label: str) -> None:
    # 0 es el valor "sin seleccionar" de los selectores
    value = draft.get(field)
    try:
        selected = int(value or 0)
    except (TypeError, ValueError):
        selected = 0
    if selected <= 0:
        raise ValidationError(f"Selecciona {label}", field)


def validate_tutor(draft: Draft) -> None:
    require_text(draft, "nombre", "nombre")
    require_text(draft, "especialidad", "especialidad")
    require_positive(draft, "tarifa_por_hora", "tarifa por hora")


def validate_curso(draft: Draft) -> None:
    require_text(draft, "nombre", "nombre")
    require_positive(draft, "max_estudiantes", "máximo de estudiantes")


def validate_estudiante(draft: Draft) -> None:
    require_text(draft, "nombre", "nombre")


def validate_matricula(draft: Draft) -> None:
    require_reference(draft, "estudiante_id", "un estudiante")
    require_reference(draft, "curso_id", "un curso")
    require_reference(draft, "tutor_id", "un tutor")


def validate_clase(draft: Draft) -> None:
    require_reference(draft, "matricula_id", "una matrícula")
    for field in ("fecha", "hora_inicio", "hora_fin"):
        if not draft.get(field):
            raise ValidationError(f"El campo '{field}' es obligatorio", field)


def validate_pago(draft: Draft) -> None:
    require_reference(draft, "tutor_id", "un tutor")
    require_positive(draft, "monto", "monto")

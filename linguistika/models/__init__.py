from .tutor import Tutor
from .curso import Curso
from .estudiante import Estudiante
from .matricula import Matricula
from .clase import Clase
from .pago import Pago
from .enums import Nivel, EstadoPago, EstadoClase, EstadoRegistro

__all__ = [
    "Tutor",
    "Curso",
    "Estudiante",
    "Matricula",
    "Clase",
    "Pago",
    "Nivel",
    "EstadoPago",
    "EstadoClase",
    "EstadoRegistro",
]

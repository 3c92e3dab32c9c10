import enum


class Nivel(str, enum.Enum):
    """Niveles del Marco Común Europeo, en orden creciente."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class EstadoPago(str, enum.Enum):
    PENDIENTE = "pendiente"
    PAGADO = "pagado"


class EstadoClase(str, enum.Enum):
    PROGRAMADA = "programada"
    COMPLETADA = "completada"
    CANCELADA = "cancelada"


class EstadoRegistro(enum.IntEnum):
    # INACTIVO = suspendido; el registro sigue listándose y no cuenta en el dashboard
    INACTIVO = 0
    ACTIVO = 1

from pydantic import BaseModel, ConfigDict


class Stats(BaseModel):
    """Agregado calculado en cada carga del dashboard; nunca se persiste."""

    model_config = ConfigDict(frozen=True)

    tutores_activos: int = 0
    estudiantes_activos: int = 0
    cursos_activos: int = 0
    matriculas_activas: int = 0
    total_clases: int = 0
    ingresos_pendientes: float = 0.0


class ResumenTutor(BaseModel):
    model_config = ConfigDict(frozen=True)

    tutor_nombre: str
    total_clases: int
    cursos: str = ""
    estudiantes: str = ""

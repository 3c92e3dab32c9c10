from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from linguistika.models.enums import EstadoRegistro
from linguistika.schemas.base import UpdateSchema


class MatriculaBase(BaseModel):
    estudiante_id: int = Field(..., gt=0)
    curso_id: int = Field(..., gt=0)
    tutor_id: int = Field(..., gt=0)
    fecha_inscripcion: date = Field(default_factory=date.today)
    estado: EstadoRegistro = EstadoRegistro.ACTIVO


class MatriculaCreate(MatriculaBase):
    pass


class MatriculaUpdate(UpdateSchema):
    estudiante_id: Optional[int] = Field(None, gt=0)
    curso_id: Optional[int] = Field(None, gt=0)
    tutor_id: Optional[int] = Field(None, gt=0)
    fecha_inscripcion: Optional[date] = None
    estado: Optional[EstadoRegistro] = None


class MatriculaInDB(MatriculaBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime
    updated_at: datetime


class Matricula(MatriculaInDB):
    # Solo lectura: calculados por el facade en cada lectura
    estudiante_nombre: Optional[str] = None
    curso_nombre: Optional[str] = None
    tutor_nombre: Optional[str] = None
    tarifa_por_hora: Optional[float] = None

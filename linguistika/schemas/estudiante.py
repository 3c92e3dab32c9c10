from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from linguistika.models.enums import EstadoRegistro
from linguistika.schemas.base import UpdateSchema


class EstudianteBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=150)
    email: str = ""
    telefono: str = ""
    fecha_inscripcion: date = Field(default_factory=date.today)
    estado: EstadoRegistro = EstadoRegistro.ACTIVO


class EstudianteCreate(EstudianteBase):
    pass


class EstudianteUpdate(UpdateSchema):
    nombre: Optional[str] = Field(None, min_length=1, max_length=150)
    email: Optional[str] = None
    telefono: Optional[str] = None
    fecha_inscripcion: Optional[date] = None
    estado: Optional[EstadoRegistro] = None


class EstudianteInDB(EstudianteBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime
    updated_at: datetime


class Estudiante(EstudianteInDB):
    pass

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import date, datetime, time

from linguistika.models.enums import EstadoClase
from linguistika.schemas.base import UpdateSchema


class ClaseBase(BaseModel):
    matricula_id: int = Field(..., gt=0)
    fecha: date
    hora_inicio: time
    hora_fin: time
    estado: EstadoClase = EstadoClase.PROGRAMADA
    notas: str = ""


class ClaseCreate(ClaseBase):
    @model_validator(mode="after")
    def check_horario(self):
        if self.hora_fin <= self.hora_inicio:
            raise ValueError("hora_fin debe ser posterior a hora_inicio")
        return self


class ClaseUpdate(UpdateSchema):
    matricula_id: Optional[int] = Field(None, gt=0)
    fecha: Optional[date] = None
    hora_inicio: Optional[time] = None
    hora_fin: Optional[time] = None
    estado: Optional[EstadoClase] = None
    notas: Optional[str] = None


class ClaseInDB(ClaseBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime
    updated_at: datetime


class Clase(ClaseInDB):
    estudiante_nombre: Optional[str] = None
    tutor_nombre: Optional[str] = None
    curso_nombre: Optional[str] = None
    tarifa_por_hora: Optional[float] = None

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from linguistika.models.enums import EstadoRegistro
from linguistika.schemas.base import UpdateSchema


class TutorBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=150)
    email: str = ""
    telefono: str = ""
    especialidad: str = ""
    tarifa_por_hora: float = Field(0.0, ge=0)
    estado: EstadoRegistro = EstadoRegistro.ACTIVO


class TutorCreate(TutorBase):
    pass


class TutorUpdate(UpdateSchema):
    nombre: Optional[str] = Field(None, min_length=1, max_length=150)
    email: Optional[str] = None
    telefono: Optional[str] = None
    especialidad: Optional[str] = None
    tarifa_por_hora: Optional[float] = Field(None, ge=0)
    estado: Optional[EstadoRegistro] = None


class TutorInDB(TutorBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime
    updated_at: datetime


class Tutor(TutorInDB):
    pass

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from linguistika.models.enums import Nivel, EstadoRegistro
from linguistika.schemas.base import UpdateSchema


class CursoBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=150)
    descripcion: str = ""
    nivel: Nivel = Nivel.A1
    max_estudiantes: int = Field(10, gt=0)
    estado: EstadoRegistro = EstadoRegistro.ACTIVO


class CursoCreate(CursoBase):
    pass


class CursoUpdate(UpdateSchema):
    nombre: Optional[str] = Field(None, min_length=1, max_length=150)
    descripcion: Optional[str] = None
    nivel: Optional[Nivel] = None
    max_estudiantes: Optional[int] = Field(None, gt=0)
    estado: Optional[EstadoRegistro] = None


class CursoInDB(CursoBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime
    updated_at: datetime


class Curso(CursoInDB):
    pass

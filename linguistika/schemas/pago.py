from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from linguistika.models.enums import EstadoPago
from linguistika.schemas.base import UpdateSchema


class PagoBase(BaseModel):
    tutor_id: int = Field(..., gt=0)
    clase_id: Optional[int] = Field(None, gt=0)
    cantidad_clases: Optional[int] = Field(None, gt=0)
    monto: float = Field(..., gt=0)
    fecha_pago: date = Field(default_factory=date.today)
    estado: EstadoPago = EstadoPago.PENDIENTE
    descripcion: str = ""


class PagoCreate(PagoBase):
    pass


class PagoUpdate(UpdateSchema):
    nullable_fields = frozenset({"clase_id", "cantidad_clases"})

    tutor_id: Optional[int] = Field(None, gt=0)
    clase_id: Optional[int] = Field(None, gt=0)
    cantidad_clases: Optional[int] = Field(None, gt=0)
    monto: Optional[float] = Field(None, gt=0)
    fecha_pago: Optional[date] = None
    estado: Optional[EstadoPago] = None
    descripcion: Optional[str] = None


class PagoInDB(PagoBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime
    updated_at: datetime


class Pago(PagoInDB):
    tutor_nombre: Optional[str] = None
    tutor_email: Optional[str] = None

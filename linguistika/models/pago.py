from datetime import date

from sqlalchemy import Column, Integer, Float, Date, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import BaseModel
from .enums import EstadoPago


class Pago(BaseModel):
    __tablename__ = "pagos"

    tutor_id = Column(Integer, ForeignKey("tutores.id"), nullable=False)
    clase_id = Column(Integer, ForeignKey("clases.id"), nullable=True)
    cantidad_clases = Column(Integer, nullable=True)
    monto = Column(Float, nullable=False)
    fecha_pago = Column(Date, nullable=False, default=date.today)
    estado = Column(Enum(EstadoPago), nullable=False, default=EstadoPago.PENDIENTE)
    descripcion = Column(Text, nullable=False, default="")

    # Relationships
    tutor = relationship("Tutor", back_populates="pagos")
    clase = relationship("Clase", back_populates="pagos")

    @property
    def tutor_nombre(self):
        return self.tutor.nombre if self.tutor else None

    @property
    def tutor_email(self):
        return self.tutor.email if self.tutor else None

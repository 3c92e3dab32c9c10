from sqlalchemy import Column, String, Float, Integer
from sqlalchemy.orm import relationship
from .base import BaseModel
from .enums import EstadoRegistro


class Tutor(BaseModel):
    __tablename__ = "tutores"

    nombre = Column(String(150), nullable=False, index=True)
    email = Column(String(150), nullable=False, default="")
    telefono = Column(String(30), nullable=False, default="")
    especialidad = Column(String(100), nullable=False, default="")
    tarifa_por_hora = Column(Float, nullable=False, default=0.0)
    estado = Column(Integer, nullable=False, default=EstadoRegistro.ACTIVO)

    # Relationships
    matriculas = relationship("Matricula", back_populates="tutor")
    pagos = relationship("Pago", back_populates="tutor")

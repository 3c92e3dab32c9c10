from datetime import date

from sqlalchemy import Column, String, Integer, Date
from sqlalchemy.orm import relationship
from .base import BaseModel
from .enums import EstadoRegistro


class Estudiante(BaseModel):
    __tablename__ = "estudiantes"

    nombre = Column(String(150), nullable=False, index=True)
    email = Column(String(150), nullable=False, default="")
    telefono = Column(String(30), nullable=False, default="")
    fecha_inscripcion = Column(Date, nullable=False, default=date.today)
    estado = Column(Integer, nullable=False, default=EstadoRegistro.ACTIVO)

    # Relationships
    matriculas = relationship("Matricula", back_populates="estudiante")

from sqlalchemy import Column, String, Integer, Text, Enum
from sqlalchemy.orm import relationship
from .base import BaseModel
from .enums import Nivel, EstadoRegistro


class Curso(BaseModel):
    __tablename__ = "cursos"

    nombre = Column(String(150), nullable=False, index=True)
    descripcion = Column(Text, nullable=False, default="")
    nivel = Column(Enum(Nivel), nullable=False, default=Nivel.A1)
    max_estudiantes = Column(Integer, nullable=False, default=10)
    estado = Column(Integer, nullable=False, default=EstadoRegistro.ACTIVO)

    # Relationships
    matriculas = relationship("Matricula", back_populates="curso")

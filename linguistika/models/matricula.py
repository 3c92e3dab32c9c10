from datetime import date

from sqlalchemy import Column, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel
from .enums import EstadoRegistro


class Matricula(BaseModel):
    __tablename__ = "matriculas"

    estudiante_id = Column(Integer, ForeignKey("estudiantes.id"), nullable=False)
    curso_id = Column(Integer, ForeignKey("cursos.id"), nullable=False)
    tutor_id = Column(Integer, ForeignKey("tutores.id"), nullable=False)
    fecha_inscripcion = Column(Date, nullable=False, default=date.today)
    estado = Column(Integer, nullable=False, default=EstadoRegistro.ACTIVO)

    # Relationships
    estudiante = relationship("Estudiante", back_populates="matriculas")
    curso = relationship("Curso", back_populates="matriculas")
    tutor = relationship("Tutor", back_populates="matriculas")
    clases = relationship(
        "Clase", back_populates="matricula", cascade="all, delete-orphan"
    )

    # Campos de solo lectura, recalculados en cada lectura
    @property
    def estudiante_nombre(self):
        return self.estudiante.nombre if self.estudiante else None

    @property
    def curso_nombre(self):
        return self.curso.nombre if self.curso else None

    @property
    def tutor_nombre(self):
        return self.tutor.nombre if self.tutor else None

    @property
    def tarifa_por_hora(self):
        return self.tutor.tarifa_por_hora if self.tutor else None

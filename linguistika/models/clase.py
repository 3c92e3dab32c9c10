from sqlalchemy import Column, Integer, Date, Time, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import BaseModel
from .enums import EstadoClase


class Clase(BaseModel):
    __tablename__ = "clases"

    matricula_id = Column(Integer, ForeignKey("matriculas.id"), nullable=False)
    fecha = Column(Date, nullable=False, index=True)
    hora_inicio = Column(Time, nullable=False)
    hora_fin = Column(Time, nullable=False)
    estado = Column(Enum(EstadoClase), nullable=False, default=EstadoClase.PROGRAMADA)
    notas = Column(Text, nullable=False, default="")

    # Relationships
    matricula = relationship("Matricula", back_populates="clases")
    pagos = relationship("Pago", back_populates="clase")

    @property
    def estudiante_nombre(self):
        return self.matricula.estudiante_nombre if self.matricula else None

    @property
    def tutor_nombre(self):
        return self.matricula.tutor_nombre if self.matricula else None

    @property
    def curso_nombre(self):
        return self.matricula.curso_nombre if self.matricula else None

    @property
    def tarifa_por_hora(self):
        return self.matricula.tarifa_por_hora if self.matricula else None

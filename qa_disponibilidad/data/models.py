from datetime import date, datetime
from zoneinfo import ZoneInfo

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

from config.settings import settings

Base = declarative_base()
TZ_LOCAL = ZoneInfo(settings.zona_horaria)


def now_local() -> datetime:
    return datetime.now(TZ_LOCAL).replace(tzinfo=None)


def hoy_local() -> date:
    return datetime.now(TZ_LOCAL).date()


class QAAnalista(Base):
    __tablename__ = "qa_analistas"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(120), nullable=False, unique=True)
    email = Column(String(200), nullable=True)
    rol = Column(String(50), nullable=False, default="QA Analyst")
    disponibilidad = Column(Integer, nullable=True)
    activo = Column(Boolean, nullable=False, default=True)
    actualizado_en = Column(DateTime, nullable=False, default=now_local, onupdate=now_local)

    proyectos = relationship("Proyecto", back_populates="analista")
    ausencias = relationship(
        "AusenciaAnalista",
        back_populates="analista",
        cascade="all, delete-orphan",
    )


class Proyecto(Base):
    __tablename__ = "proyectos"

    id = Column(Integer, primary_key=True)
    id_jira = Column(String(40), nullable=False)
    nombre = Column(String(200), nullable=True)
    analista_producto = Column(String(120), nullable=True)
    analista_id = Column(Integer, ForeignKey("qa_analistas.id"), nullable=True)
    horas = Column(Float, nullable=False, default=0.0)
    horas_estimadas = Column(Float, nullable=True)
    horas_por_dia = Column(JSON, nullable=True)
    dias = Column(Integer, nullable=True)
    estado = Column(String(40), nullable=True)
    fecha_inicio = Column(Date, nullable=True)
    fecha_entrega = Column(Date, nullable=True)
    fecha_certificacion = Column(Date, nullable=True)

    analista = relationship("QAAnalista", back_populates="proyectos")


class AusenciaAnalista(Base):
    __tablename__ = "ausencias_analista"

    id = Column(Integer, primary_key=True)
    analista_id = Column(Integer, ForeignKey("qa_analistas.id"), nullable=False)
    fecha_inicio = Column(Date, nullable=False)
    fecha_fin = Column(Date, nullable=False)
    descripcion = Column(Text, nullable=True)
    tipo = Column(String(20), nullable=False, default="vacation")

    analista = relationship("QAAnalista", back_populates="ausencias")

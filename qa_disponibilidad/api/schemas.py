from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class DisponibilidadOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    analista_id: int
    analista_nombre: Optional[str]
    horas_asignadas: float
    porcentaje_disponibilidad: int
    proyectos_activos: int
    nivel_carga: str
    proyectos_omitidos: int = 0


class RecalcularRequest(BaseModel):
    analista_id: Optional[int] = None
    hoy: Optional[date] = None


class RecalculoOut(BaseModel):
    actualizados: int
    hoy: date
    disponibilidades: List[DisponibilidadOut]


class FeriadoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    fecha: date
    nombre: str
    trasladado: bool


class FeriadosAnioOut(BaseModel):
    anio: int
    perfil: str
    feriados: List[FeriadoOut]


class AusenciaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    analista_id: int
    fecha_inicio: date
    fecha_fin: date
    descripcion: Optional[str]
    tipo: str


class DiasHabilesOut(BaseModel):
    inicio: date
    fin: date
    perfil: str
    analista_id: Optional[int] = None
    total: int
    fechas: List[date]
    ausencias: List[AusenciaOut] = []


class DiaHabilOut(BaseModel):
    fecha: date
    perfil: str
    dia_habil: bool
    fin_de_semana: bool
    feriado: Optional[str] = None


class CargaDiaOut(BaseModel):
    fecha: date
    horas: float


class CargaDiariaOut(BaseModel):
    analista_id: int
    inicio: date
    fin: date
    dias: List[CargaDiaOut]

import logging
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from api.schemas import (
    CargaDiariaOut,
    DiaHabilOut,
    DiasHabilesOut,
    DisponibilidadOut,
    FeriadosAnioOut,
    RecalcularRequest,
    RecalculoOut,
)
from config.settings import settings
from core.ausencias import ausencias_en_rango, dias_habiles_analista
from core.calendar_engine import dias_habiles, es_dia_habil, es_fin_de_semana, normalizar_rango
from core.distribucion import carga_diaria
from core.disponibilidad import Disponibilidad, calcular_disponibilidad, calcular_disponibilidades
from core.fechas import fecha_calendario
from core.feriados import feriados_del_anio, nombre_feriado, normalizar_perfil
from data.db import get_db
from data.models import AusenciaAnalista, Proyecto, QAAnalista, hoy_local

logger = logging.getLogger(__name__)

router = APIRouter()


def resolver_hoy(valor: Optional[object]) -> date:
    if valor is None:
        return hoy_local()
    return fecha_calendario(valor)


def disponibilidad_to_schema(disponibilidad: Disponibilidad) -> dict:
    return asdict(disponibilidad)


def ausencia_to_schema(ausencia: AusenciaAnalista) -> dict:
    return {
        "id": ausencia.id,
        "analista_id": ausencia.analista_id,
        "fecha_inicio": ausencia.fecha_inicio,
        "fecha_fin": ausencia.fecha_fin,
        "descripcion": ausencia.descripcion,
        "tipo": ausencia.tipo,
    }


def obtener_analista(db: Session, analista_id: int) -> QAAnalista:
    analista = db.get(QAAnalista, analista_id)
    if not analista:
        raise HTTPException(status_code=404, detail="Analista no encontrado")
    return analista


def listar_analistas(db: Session) -> List[QAAnalista]:
    return db.query(QAAnalista).filter(QAAnalista.activo.is_(True)).order_by(QAAnalista.id).all()


def listar_proyectos(db: Session) -> List[Proyecto]:
    return db.query(Proyecto).order_by(Proyecto.id).all()


@router.get("/disponibilidad", response_model=List[DisponibilidadOut])
def listar_disponibilidad(hoy: Optional[str] = None, db: Session = Depends(get_db)):
    dia = resolver_hoy(hoy)
    resultado = calcular_disponibilidades(
        listar_analistas(db),
        listar_proyectos(db),
        dia,
        settings.max_horas_mensuales,
    )
    return [disponibilidad_to_schema(item) for item in resultado]


@router.get("/disponibilidad/{analista_id}", response_model=DisponibilidadOut)
def obtener_disponibilidad(analista_id: int, hoy: Optional[str] = None, db: Session = Depends(get_db)):
    dia = resolver_hoy(hoy)
    analista = obtener_analista(db, analista_id)
    resultado = calcular_disponibilidad(analista, listar_proyectos(db), dia, settings.max_horas_mensuales)
    return disponibilidad_to_schema(resultado)


@router.post("/disponibilidad/recalcular", response_model=RecalculoOut)
def recalcular_disponibilidad(payload: Optional[RecalcularRequest] = None, db: Session = Depends(get_db)):
    payload = payload or RecalcularRequest()
    dia = resolver_hoy(payload.hoy)
    if payload.analista_id is not None:
        analistas = [obtener_analista(db, payload.analista_id)]
    else:
        analistas = listar_analistas(db)

    resultado = calcular_disponibilidades(analistas, listar_proyectos(db), dia, settings.max_horas_mensuales)
    por_id = {analista.id: analista for analista in analistas}
    for item in resultado:
        por_id[item.analista_id].disponibilidad = item.porcentaje_disponibilidad
    db.commit()
    logger.info("Disponibilidad actualizada para %d analistas", len(resultado))
    return {
        "actualizados": len(resultado),
        "hoy": dia,
        "disponibilidades": [disponibilidad_to_schema(item) for item in resultado],
    }


@router.get("/calendario/feriados/{anio}", response_model=FeriadosAnioOut)
def listar_feriados(anio: int, perfil: Optional[str] = None):
    if not 1 <= anio <= 9999:
        raise HTTPException(status_code=400, detail="Anio invalido")
    codigo = normalizar_perfil(perfil or settings.perfil_pais)
    feriados = sorted(feriados_del_anio(anio, codigo), key=lambda f: (f.fecha, f.nombre))
    return {
        "anio": anio,
        "perfil": codigo,
        "feriados": [
            {"fecha": f.fecha, "nombre": f.nombre, "trasladado": f.trasladado}
            for f in feriados
        ],
    }


@router.get("/calendario/dias-habiles", response_model=DiasHabilesOut)
def obtener_dias_habiles(
    inicio: str,
    fin: str,
    analista_id: Optional[int] = None,
    perfil: Optional[str] = None,
    db: Session = Depends(get_db),
):
    desde, hasta = normalizar_rango(inicio, fin)
    codigo = normalizar_perfil(perfil or settings.perfil_pais)
    ausencias = []
    if analista_id is not None:
        analista = obtener_analista(db, analista_id)
        fechas = dias_habiles_analista(desde, hasta, analista.ausencias, analista.id, codigo)
        ausencias = [
            ausencia_to_schema(a)
            for a in ausencias_en_rango(analista.ausencias, analista.id, desde, hasta)
        ]
    else:
        fechas = dias_habiles(desde, hasta, perfil=codigo)
    return {
        "inicio": desde,
        "fin": hasta,
        "perfil": codigo,
        "analista_id": analista_id,
        "total": len(fechas),
        "fechas": fechas,
        "ausencias": ausencias,
    }


@router.get("/calendario/dia-habil/{fecha}", response_model=DiaHabilOut)
def obtener_dia_habil(fecha: str, perfil: Optional[str] = None):
    dia = fecha_calendario(fecha)
    codigo = normalizar_perfil(perfil or settings.perfil_pais)
    return {
        "fecha": dia,
        "perfil": codigo,
        "dia_habil": es_dia_habil(dia, codigo),
        "fin_de_semana": es_fin_de_semana(dia),
        "feriado": nombre_feriado(dia, codigo),
    }


@router.get("/disponibilidad/{analista_id}/carga-diaria", response_model=CargaDiariaOut)
def obtener_carga_diaria(
    analista_id: int,
    inicio: str,
    fin: str,
    perfil: Optional[str] = None,
    db: Session = Depends(get_db),
):
    desde, hasta = normalizar_rango(inicio, fin)
    codigo = normalizar_perfil(perfil or settings.perfil_pais)
    analista = obtener_analista(db, analista_id)
    carga = carga_diaria(listar_proyectos(db), analista, desde, hasta, codigo)
    return {
        "analista_id": analista.id,
        "inicio": desde,
        "fin": hasta,
        "dias": [{"fecha": dia, "horas": horas} for dia, horas in carga.items()],
    }

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from core.calendar_engine import iterar_dias_habiles, normalizar_rango
from core.errors import FechaInvalida
from core.fechas import fecha_calendario
from core.feriados import PERFIL_POR_DEFECTO
from core.registros import leer_campo

logger = logging.getLogger(__name__)

TIPOS_AUSENCIA = ("vacation", "leave", "training", "other")


@dataclass(frozen=True)
class PeriodoAusencia:
    id: Any
    analista_id: Any
    fecha_inicio: date
    fecha_fin: date
    descripcion: Optional[str] = None
    tipo: str = "vacation"

    @classmethod
    def desde_registro(cls, registro: Any) -> "PeriodoAusencia":
        tipo = leer_campo(registro, "tipo", "type", defecto="other")
        if tipo not in TIPOS_AUSENCIA:
            tipo = "other"
        return cls(
            id=leer_campo(registro, "id"),
            analista_id=leer_campo(registro, "analista_id", "analystId"),
            fecha_inicio=fecha_calendario(leer_campo(registro, "fecha_inicio", "startDate")),
            fecha_fin=fecha_calendario(leer_campo(registro, "fecha_fin", "endDate")),
            descripcion=leer_campo(registro, "descripcion", "description"),
            tipo=tipo,
        )


def rango_ausencia(periodo: Any) -> Tuple[date, date]:
    # inicio desde las 00:00 y fin hasta las 23:59:59.999 del dia: basta con el dia
    inicio = fecha_calendario(leer_campo(periodo, "fecha_inicio", "startDate"))
    fin = fecha_calendario(leer_campo(periodo, "fecha_fin", "endDate"))
    return inicio, fin


def _periodos_del_analista(periodos: Iterable[Any], analista_id: Any) -> Iterable[Tuple[Any, date, date]]:
    for periodo in periodos:
        if leer_campo(periodo, "analista_id", "analystId") != analista_id:
            continue
        try:
            inicio, fin = rango_ausencia(periodo)
        except FechaInvalida as exc:
            logger.warning(
                "Ausencia %s del analista %s ignorada: %s",
                leer_campo(periodo, "id"),
                analista_id,
                exc.mensaje,
            )
            continue
        yield periodo, inicio, fin


def analista_en_ausencia(periodos: Iterable[Any], analista_id: Any, fecha: object) -> Optional[Any]:
    dia = fecha_calendario(fecha)
    for periodo, inicio, fin in _periodos_del_analista(periodos, analista_id):
        if inicio <= dia <= fin:
            return periodo
    return None


def ausencias_en_rango(periodos: Iterable[Any], analista_id: Any, inicio: object, fin: object) -> List[Any]:
    desde, hasta = normalizar_rango(inicio, fin)
    return [
        periodo
        for periodo, p_inicio, p_fin in _periodos_del_analista(periodos, analista_id)
        if p_inicio <= hasta and p_fin >= desde
    ]


def dias_habiles_analista(
    fecha_inicio: object,
    fecha_fin: object,
    periodos: Iterable[Any],
    analista_id: Any,
    perfil: str = PERFIL_POR_DEFECTO,
) -> List[date]:
    dias = iterar_dias_habiles(fecha_inicio, fecha_fin, perfil=perfil)
    rangos = [(inicio, fin) for _, inicio, fin in _periodos_del_analista(periodos, analista_id)]
    return [dia for dia in dias if not any(inicio <= dia <= fin for inicio, fin in rangos)]


def contar_dias_habiles_analista(
    fecha_inicio: object,
    fecha_fin: object,
    periodos: Iterable[Any],
    analista_id: Any,
    perfil: str = PERFIL_POR_DEFECTO,
) -> int:
    return len(dias_habiles_analista(fecha_inicio, fecha_fin, periodos, analista_id, perfil))

import logging
import math
from datetime import date, timedelta
from typing import Any, Dict, Iterable, Optional, Tuple

from core.calendar_engine import dias_habiles, es_dia_habil, normalizar_rango
from core.disponibilidad import asignado_a, fecha_certificacion, fecha_entrega
from core.feriados import PERFIL_POR_DEFECTO
from core.fechas import fecha_calendario
from core.metrics import redondear
from core.registros import leer_campo

logger = logging.getLogger(__name__)


def _id_proyecto(proyecto: Any) -> Any:
    return leer_campo(proyecto, "id", "idJira", "id_jira")


def rango_proyecto(proyecto: Any) -> Optional[Tuple[date, date]]:
    inicio = fecha_entrega(proyecto)
    if inicio is None:
        return None
    fin = fecha_certificacion(proyecto)
    if fin is None:
        dias = leer_campo(proyecto, "dias", defecto=1) or 1
        try:
            fin = inicio + timedelta(days=int(dias))
        except (TypeError, ValueError, OverflowError):
            logger.warning("Proyecto %s sin rango: dias invalidos %r", _id_proyecto(proyecto), dias)
            return None
    return inicio, fin


def horas_del_dia(proyecto: Any, dia: object, perfil: str = PERFIL_POR_DEFECTO) -> Optional[float]:
    rango = rango_proyecto(proyecto)
    if rango is None:
        return None
    fecha = fecha_calendario(dia)
    inicio, fin = rango
    if fecha < inicio or fecha > fin or not es_dia_habil(fecha, perfil):
        return None

    laborables = dias_habiles(inicio, fin, perfil=perfil)
    indice = laborables.index(fecha)

    por_dia = leer_campo(proyecto, "horas_por_dia", "horasPorDia")
    if por_dia:
        try:
            if indice >= len(por_dia):
                return None
            valor = float(por_dia[indice])
        except (TypeError, ValueError, LookupError):
            valor = math.nan
        if not math.isfinite(valor):
            logger.warning("Proyecto %s: horas por dia invalidas %r", _id_proyecto(proyecto), por_dia)
            return None
        return valor

    horas = leer_campo(proyecto, "horas", defecto=0)
    try:
        valor = float(horas)
    except (TypeError, ValueError):
        valor = math.nan
    if not math.isfinite(valor):
        logger.warning("Proyecto %s: horas invalidas %r", _id_proyecto(proyecto), horas)
        return None
    if valor <= 0:
        return None
    return redondear(valor / len(laborables), 1)


def carga_diaria(
    proyectos: Iterable[Any],
    analista: Any,
    inicio: object,
    fin: object,
    perfil: str = PERFIL_POR_DEFECTO,
) -> Dict[date, float]:
    desde, hasta = normalizar_rango(inicio, fin)
    propios = [p for p in proyectos if asignado_a(p, analista)]
    carga: Dict[date, float] = {}
    for dia in dias_habiles(desde, hasta, perfil=perfil):
        total = 0.0
        for proyecto in propios:
            horas = horas_del_dia(proyecto, dia, perfil)
            if horas is not None:
                total += horas
        if total:
            carga[dia] = redondear(total, 1)
    return carga

"""Disponibilidad mensual de analistas a partir de sus proyectos asignados.

Las horas de los proyectos del mes en curso se comparan contra una capacidad
mensual fija. Los registros pueden venir como dict (claves camelCase o
snake_case) o como objetos con atributos.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from core.errors import DatoProyectoInvalido
from core.fechas import fecha_calendario, fecha_opcional, mismo_mes
from core.metrics import porcentaje_disponibilidad
from core.registros import leer_campo

logger = logging.getLogger(__name__)

MAX_HORAS_MENSUALES = 180

POR_INICIAR = "Por Iniciar"
EN_PROGRESO = "En Progreso"
CERTIFICADO = "Certificado"
ESTADOS_ACTIVOS = frozenset({POR_INICIAR, EN_PROGRESO})

# (limite superior exclusivo en % usado, nivel)
NIVELES_CARGA: Tuple[Tuple[float, str], ...] = (
    (30, "Bajo"),
    (70, "Medio"),
    (100, "Alto"),
)
NIVEL_SOBRECARGA = "Sobrecarga"

DIAS_ANTICIPACION_ENTREGA = 7


@dataclass(frozen=True)
class Disponibilidad:
    analista_id: Any
    analista_nombre: Optional[str]
    horas_asignadas: float
    porcentaje_disponibilidad: int
    proyectos_activos: int
    nivel_carga: str
    proyectos_omitidos: int = 0


def _fecha_proyecto(proyecto: Any, *nombres: str) -> Optional[date]:
    return fecha_opcional(leer_campo(proyecto, *nombres))


def fecha_inicio(proyecto: Any) -> Optional[date]:
    return _fecha_proyecto(proyecto, "fecha_inicio", "fechaInicio")


def fecha_entrega(proyecto: Any) -> Optional[date]:
    return _fecha_proyecto(proyecto, "fecha_entrega", "fechaEntrega")


def fecha_certificacion(proyecto: Any) -> Optional[date]:
    return _fecha_proyecto(proyecto, "fecha_certificacion", "fechaCertificacion")


def estado_desde_texto(estado: str) -> str:
    texto = estado.lower()
    if "progreso" in texto:
        return EN_PROGRESO
    if "certificado" in texto or "completado" in texto or "terminado" in texto:
        return CERTIFICADO
    return POR_INICIAR


def estado_calculado(proyecto: Any, hoy: object) -> str:
    estado = leer_campo(proyecto, "estado")
    if isinstance(estado, str) and estado.strip():
        return estado_desde_texto(estado)

    dia = fecha_calendario(hoy)
    certificacion = fecha_certificacion(proyecto)
    if certificacion is not None and certificacion <= dia:
        return CERTIFICADO

    inicio = fecha_inicio(proyecto)
    if inicio is not None:
        return POR_INICIAR if inicio > dia else EN_PROGRESO

    entrega = fecha_entrega(proyecto)
    if entrega is not None:
        return POR_INICIAR if (entrega - dia).days > DIAS_ANTICIPACION_ENTREGA else EN_PROGRESO

    return POR_INICIAR


def en_periodo_actual(proyecto: Any, hoy: object, estado: Optional[str] = None) -> bool:
    dia = fecha_calendario(hoy)
    if estado is None:
        estado = estado_calculado(proyecto, dia)

    if estado == CERTIFICADO:
        certificacion = fecha_certificacion(proyecto)
        if certificacion is not None:
            return mismo_mes(certificacion, dia)

    relevante = fecha_entrega(proyecto) or fecha_inicio(proyecto)
    if relevante is None:
        # sin fecha utilizable se incluye en el mes actual
        return True
    return mismo_mes(relevante, dia)


def asignado_a(proyecto: Any, analista: Any) -> bool:
    analista_id = leer_campo(analista, "id")
    proyecto_analista_id = leer_campo(proyecto, "analista_id", "analistaId")
    if analista_id is not None and proyecto_analista_id is not None:
        return proyecto_analista_id == analista_id
    nombre = leer_campo(analista, "nombre", "name")
    asignado = leer_campo(proyecto, "analista_producto", "analistaProducto")
    return bool(nombre) and asignado == nombre


def horas_proyecto(proyecto: Any) -> float:
    horas = leer_campo(proyecto, "horas_estimadas", "horasEstimadas")
    if not horas:
        horas = leer_campo(proyecto, "horas", "hours", defecto=0)
    if isinstance(horas, bool) or not isinstance(horas, (Real, Decimal)):
        raise DatoProyectoInvalido(f"Horas invalidas: {horas!r}")
    if horas < 0:
        raise DatoProyectoInvalido(f"Horas negativas: {horas!r}")
    return float(horas)


def clasificar_carga(horas: float, max_horas: float = MAX_HORAS_MENSUALES) -> str:
    for limite, nivel in NIVELES_CARGA:
        if horas * 100 < limite * max_horas:
            return nivel
    return NIVEL_SOBRECARGA


def _validar_max_horas(max_horas: float) -> None:
    if max_horas <= 0:
        raise ValueError("max_horas debe ser mayor que cero")


def calcular_disponibilidad(
    analista: Any,
    proyectos: Iterable[Any],
    hoy: object,
    max_horas: float = MAX_HORAS_MENSUALES,
) -> Disponibilidad:
    _validar_max_horas(max_horas)
    dia = fecha_calendario(hoy)
    analista_id = leer_campo(analista, "id")

    total_horas = 0.0
    activos = 0
    omitidos = 0
    for proyecto in proyectos:
        if not asignado_a(proyecto, analista):
            continue
        estado = estado_calculado(proyecto, dia)
        if not en_periodo_actual(proyecto, dia, estado):
            continue
        try:
            horas = horas_proyecto(proyecto)
        except DatoProyectoInvalido as exc:
            omitidos += 1
            logger.warning(
                "Proyecto %s omitido para analista %s: %s",
                leer_campo(proyecto, "id", "idJira", "id_jira"),
                analista_id,
                exc.mensaje,
            )
            continue
        total_horas += horas
        if estado in ESTADOS_ACTIVOS:
            activos += 1

    return Disponibilidad(
        analista_id=analista_id,
        analista_nombre=leer_campo(analista, "nombre", "name"),
        horas_asignadas=total_horas,
        porcentaje_disponibilidad=porcentaje_disponibilidad(total_horas, max_horas),
        proyectos_activos=activos,
        nivel_carga=clasificar_carga(total_horas, max_horas),
        proyectos_omitidos=omitidos,
    )


def calcular_disponibilidades(
    analistas: Iterable[Any],
    proyectos: Sequence[Any],
    hoy: object,
    max_horas: float = MAX_HORAS_MENSUALES,
) -> List[Disponibilidad]:
    _validar_max_horas(max_horas)
    dia = fecha_calendario(hoy)
    proyectos = list(proyectos)
    resultado = [calcular_disponibilidad(analista, proyectos, dia, max_horas) for analista in analistas]
    logger.debug("Disponibilidad calculada para %d analistas al %s", len(resultado), dia.isoformat())
    return resultado

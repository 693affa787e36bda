from datetime import date, timedelta
from typing import AbstractSet, Iterator, List, Optional, Tuple

from core.errors import FechaInvalida, RangoFechasInvalido
from core.fechas import fecha_calendario
from core.feriados import PERFIL_POR_DEFECTO, fechas_feriado, normalizar_perfil

SABADO = 5


def es_fin_de_semana(fecha: object) -> bool:
    return fecha_calendario(fecha).weekday() >= SABADO


def es_dia_habil(fecha: object, perfil: str = PERFIL_POR_DEFECTO) -> bool:
    dia = fecha_calendario(fecha)
    if dia.weekday() >= SABADO:
        return False
    return dia not in fechas_feriado(dia.year, perfil)


def normalizar_rango(fecha_inicio: object, fecha_fin: object) -> Tuple[date, date]:
    try:
        return fecha_calendario(fecha_inicio), fecha_calendario(fecha_fin)
    except FechaInvalida as exc:
        raise RangoFechasInvalido(f"Rango de fechas invalido: {exc.mensaje}") from exc


def iterar_dias_habiles(
    fecha_inicio: object,
    fecha_fin: object,
    feriados: Optional[AbstractSet[date]] = None,
    perfil: str = PERFIL_POR_DEFECTO,
) -> Iterator[date]:
    actual, fin = normalizar_rango(fecha_inicio, fecha_fin)
    perfil = normalizar_perfil(perfil)
    extra = feriados or frozenset()

    def generar() -> Iterator[date]:
        dia = actual
        while dia <= fin:
            if dia not in extra and es_dia_habil(dia, perfil):
                yield dia
            if dia == fin:
                break
            dia += timedelta(days=1)

    return generar()


def dias_habiles(
    fecha_inicio: object,
    fecha_fin: object,
    feriados: Optional[AbstractSet[date]] = None,
    perfil: str = PERFIL_POR_DEFECTO,
) -> List[date]:
    return list(iterar_dias_habiles(fecha_inicio, fecha_fin, feriados, perfil))


def contar_dias_habiles(fecha_inicio: object, fecha_fin: object, perfil: str = PERFIL_POR_DEFECTO) -> int:
    return sum(1 for _ in iterar_dias_habiles(fecha_inicio, fecha_fin, perfil=perfil))


def dias_habiles_transcurridos(fecha_inicio: object, hoy: object, perfil: str = PERFIL_POR_DEFECTO) -> int:
    return contar_dias_habiles(fecha_inicio, hoy, perfil)


def dias_habiles_restantes(hoy: object, fecha_fin: object, perfil: str = PERFIL_POR_DEFECTO) -> int:
    # hoy no cuenta como restante
    desde, hasta = normalizar_rango(hoy, fecha_fin)
    perfil = normalizar_perfil(perfil)
    if desde >= hasta:
        return 0
    return contar_dias_habiles(desde + timedelta(days=1), hasta, perfil)

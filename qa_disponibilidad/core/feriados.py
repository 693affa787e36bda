from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import FrozenSet, List, Optional, Tuple

import holidays

from core.errors import FechaInvalida, RangoFechasInvalido, RegionNoSoportada
from core.fechas import fecha_calendario

PERFIL_POR_DEFECTO = "CO"


@dataclass(frozen=True)
class Feriado:
    fecha: date
    nombre: str
    trasladado: bool = False


def perfiles_soportados() -> Tuple[str, ...]:
    return tuple(sorted(holidays.list_supported_countries()))


def normalizar_perfil(perfil: str) -> str:
    codigo = (perfil or "").strip().upper()
    if codigo not in holidays.list_supported_countries():
        raise RegionNoSoportada(f"Perfil de pais no soportado: {perfil!r}")
    return codigo


def _calendario(perfil: str, anio: int, observed: bool) -> holidays.HolidayBase:
    try:
        return holidays.country_holidays(perfil, years=anio, observed=observed)
    except NotImplementedError as exc:
        raise RegionNoSoportada(f"Perfil de pais no soportado: {perfil!r}") from exc


@lru_cache(maxsize=64)
def _feriados_cacheados(perfil: str, anio: int) -> FrozenSet[Feriado]:
    # sin observed la libreria deja cada feriado en su fecha literal (sin ley Emiliani)
    calendario = _calendario(perfil, anio, observed=True)
    literales = _calendario(perfil, anio, observed=False)
    feriados = set()
    for fecha in calendario:
        originales = literales.get_list(fecha)
        for nombre in calendario.get_list(fecha):
            feriados.add(Feriado(fecha=fecha, nombre=nombre, trasladado=nombre not in originales))
    return frozenset(feriados)


def feriados_del_anio(anio: int, perfil: str = PERFIL_POR_DEFECTO) -> FrozenSet[Feriado]:
    return _feriados_cacheados(normalizar_perfil(perfil), int(anio))


def fechas_feriado(anio: int, perfil: str = PERFIL_POR_DEFECTO) -> FrozenSet[date]:
    return frozenset(feriado.fecha for feriado in feriados_del_anio(anio, perfil))


def feriados_en_rango(inicio: object, fin: object, perfil: str = PERFIL_POR_DEFECTO) -> List[Feriado]:
    try:
        desde = fecha_calendario(inicio)
        hasta = fecha_calendario(fin)
    except FechaInvalida as exc:
        raise RangoFechasInvalido(f"Rango de fechas invalido: {exc.mensaje}") from exc
    if desde > hasta:
        return []
    encontrados = []
    for anio in range(desde.year, hasta.year + 1):
        encontrados.extend(f for f in feriados_del_anio(anio, perfil) if desde <= f.fecha <= hasta)
    return sorted(encontrados, key=lambda f: (f.fecha, f.nombre))


def nombre_feriado(fecha: object, perfil: str = PERFIL_POR_DEFECTO) -> Optional[str]:
    dia = fecha_calendario(fecha)
    nombres = sorted(f.nombre for f in feriados_del_anio(dia.year, perfil) if f.fecha == dia)
    if not nombres:
        return None
    return " / ".join(nombres)

"""Normalizacion de fechas de calendario.

Todo el motor trabaja con ``datetime.date``. Los valores crudos (``datetime``,
cadenas ISO-8601 con o sin hora y offset) solo entran por ``fecha_calendario``,
que toma el dia tal como esta escrito y nunca convierte de zona horaria.
"""

from datetime import date, datetime
from typing import Optional

from dateutil.parser import isoparse

from core.errors import FechaInvalida


def fecha_calendario(valor: object) -> date:
    if isinstance(valor, datetime):
        return date(valor.year, valor.month, valor.day)
    if isinstance(valor, date):
        return valor
    if isinstance(valor, str):
        texto = valor.strip()
        if not texto:
            raise FechaInvalida("Fecha vacia")
        try:
            parsed = isoparse(texto)
        except (ValueError, OverflowError) as exc:
            raise FechaInvalida(f"Fecha invalida: {valor!r}") from exc
        return date(parsed.year, parsed.month, parsed.day)
    raise FechaInvalida(f"Fecha invalida: {valor!r}")


def fecha_opcional(valor: object) -> Optional[date]:
    if valor is None:
        return None
    try:
        return fecha_calendario(valor)
    except FechaInvalida:
        return None


def mismo_mes(fecha: date, referencia: date) -> bool:
    return fecha.year == referencia.year and fecha.month == referencia.month

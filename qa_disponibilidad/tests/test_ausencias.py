import logging
from datetime import date

import pytest

from core.ausencias import (
    PeriodoAusencia,
    analista_en_ausencia,
    ausencias_en_rango,
    contar_dias_habiles_analista,
    dias_habiles_analista,
    rango_ausencia,
)
from core.calendar_engine import contar_dias_habiles
from core.errors import RangoFechasInvalido


@pytest.fixture()
def periodos():
    return [
        PeriodoAusencia(1, 10, date(2025, 8, 11), date(2025, 8, 22), "Vacaciones", "vacation"),
        {
            "id": 2,
            "analystId": 20,
            "startDate": "2025-08-20T00:00:00.000Z",
            "endDate": "2025-08-20T23:59:59.999Z",
            "type": "training",
        },
    ]


def test_analista_en_ausencia(periodos):
    assert analista_en_ausencia(periodos, 10, date(2025, 8, 11)) is periodos[0]
    assert analista_en_ausencia(periodos, 10, date(2025, 8, 22)) is periodos[0]
    assert analista_en_ausencia(periodos, 10, date(2025, 8, 23)) is None
    assert analista_en_ausencia(periodos, 20, "2025-08-20T18:00:00-05:00") is periodos[1]
    assert analista_en_ausencia(periodos, 20, date(2025, 8, 21)) is None
    assert analista_en_ausencia(periodos, 30, date(2025, 8, 20)) is None


def test_devuelve_el_primer_periodo_que_cubre_la_fecha():
    primero = PeriodoAusencia(1, 10, date(2025, 8, 1), date(2025, 8, 31), tipo="leave")
    segundo = PeriodoAusencia(2, 10, date(2025, 8, 15), date(2025, 8, 15), tipo="other")
    assert analista_en_ausencia([primero, segundo], 10, date(2025, 8, 15)) is primero


def test_rango_ausencia_normaliza_al_dia(periodos):
    assert rango_ausencia(periodos[1]) == (date(2025, 8, 20), date(2025, 8, 20))


def test_ausencia_cubre_todo_el_rango_solo_para_su_analista(periodos):
    assert contar_dias_habiles_analista(date(2025, 8, 11), date(2025, 8, 22), periodos, 10) == 0
    otro = contar_dias_habiles_analista(date(2025, 8, 11), date(2025, 8, 22), periodos, 30)
    assert otro == contar_dias_habiles(date(2025, 8, 11), date(2025, 8, 22)) == 9


def test_dias_habiles_analista_excluye_solo_dias_de_ausencia(periodos):
    dias = dias_habiles_analista(date(2025, 8, 19), date(2025, 8, 21), periodos, 20)
    assert dias == [date(2025, 8, 19), date(2025, 8, 21)]


def test_periodo_con_fechas_invalidas_se_ignora(periodos, caplog):
    periodos.append({"id": 3, "analystId": 10, "startDate": "xx", "endDate": "2025-08-30"})
    with caplog.at_level(logging.WARNING):
        assert analista_en_ausencia(periodos, 10, date(2025, 8, 30)) is None
    assert "Ausencia 3" in caplog.text


def test_desde_registro():
    periodo = PeriodoAusencia.desde_registro(
        {
            "id": "v1",
            "analystId": "a1",
            "startDate": "2025-12-22T00:00:00.000Z",
            "endDate": "2026-01-09T23:59:59.999Z",
            "description": "Fin de anio",
            "type": "sabatico",
        }
    )
    assert periodo.fecha_inicio == date(2025, 12, 22)
    assert periodo.fecha_fin == date(2026, 1, 9)
    assert periodo.tipo == "other"
    assert periodo.descripcion == "Fin de anio"


def test_ausencias_en_rango(periodos):
    assert ausencias_en_rango(periodos, 10, date(2025, 8, 1), date(2025, 8, 11)) == [periodos[0]]
    assert ausencias_en_rango(periodos, 10, date(2025, 8, 23), date(2025, 8, 31)) == []
    with pytest.raises(RangoFechasInvalido):
        ausencias_en_rango(periodos, 10, "x", date(2025, 8, 31))

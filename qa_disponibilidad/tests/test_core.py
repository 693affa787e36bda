from datetime import date

from core.calendar_engine import dias_habiles
from core.disponibilidad import clasificar_carga
from core.metrics import porcentaje_disponibilidad, porcentaje_usado, redondear


def test_dias_habiles_excluye_fines_y_feriados():
    inicio = date(2025, 1, 1)  # miercoles, Año Nuevo
    fin = date(2025, 1, 7)  # martes
    dias = dias_habiles(inicio, fin)
    # 6 de enero de 2025 es lunes de Reyes
    assert dias == [date(2025, 1, 2), date(2025, 1, 3), date(2025, 1, 7)]


def test_dias_habiles_con_feriados_adicionales():
    dias = dias_habiles(date(2025, 1, 1), date(2025, 1, 7), {date(2025, 1, 2)})
    assert dias == [date(2025, 1, 3), date(2025, 1, 7)]


def test_porcentaje_disponibilidad():
    assert porcentaje_disponibilidad(0, 180) == 100
    assert porcentaje_disponibilidad(90, 180) == 50
    assert porcentaje_disponibilidad(140, 180) == 22
    assert porcentaje_disponibilidad(1000, 180) == 0
    assert porcentaje_disponibilidad(-10, 180) == 100


def test_porcentaje_usado_limita_a_uno():
    assert porcentaje_usado(360, 180) == 1.0
    assert porcentaje_usado(45, 180) == 0.25


def test_redondear_medio_hacia_arriba():
    assert redondear(22.5) == 23
    assert redondear(0.5) == 1
    assert redondear(0.25, 1) == 0.3


def test_clasificar_carga():
    assert clasificar_carga(0) == "Bajo"
    assert clasificar_carga(53.9) == "Bajo"
    assert clasificar_carga(54) == "Medio"
    assert clasificar_carga(125.9) == "Medio"
    assert clasificar_carga(126) == "Alto"
    assert clasificar_carga(179.9) == "Alto"
    assert clasificar_carga(180) == "Sobrecarga"
    assert clasificar_carga(500) == "Sobrecarga"

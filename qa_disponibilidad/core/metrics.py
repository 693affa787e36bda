import math


def redondear(valor: float, decimales: int = 0) -> float:
    # medio hacia arriba, no redondeo bancario
    factor = 10 ** decimales
    return math.floor(valor * factor + 0.5) / factor


def porcentaje_usado(horas: float, max_horas: float) -> float:
    if max_horas <= 0:
        raise ValueError("max_horas debe ser mayor que cero")
    return min(max(horas, 0.0) / max_horas, 1.0)


def porcentaje_disponibilidad(horas: float, max_horas: float) -> int:
    usado = porcentaje_usado(horas, max_horas)
    return int(min(max(redondear((1 - usado) * 100), 0), 100))

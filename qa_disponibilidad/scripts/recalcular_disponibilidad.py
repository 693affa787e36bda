import argparse
import logging

from config.logging_setup import setup_logging
from config.settings import settings
from core.disponibilidad import calcular_disponibilidades
from core.fechas import fecha_calendario
from data.db import SessionLocal
from data.models import Proyecto, QAAnalista, hoy_local

logger = logging.getLogger("recalcular_disponibilidad")


def recalcular(hoy=None) -> int:
    dia = fecha_calendario(hoy) if hoy else hoy_local()
    db = SessionLocal()
    try:
        analistas = db.query(QAAnalista).filter(QAAnalista.activo.is_(True)).all()
        proyectos = db.query(Proyecto).all()
        resultado = calcular_disponibilidades(analistas, proyectos, dia, settings.max_horas_mensuales)
        por_id = {analista.id: analista for analista in analistas}
        for item in resultado:
            por_id[item.analista_id].disponibilidad = item.porcentaje_disponibilidad
            logger.info(
                "%s: %s%% disponible (%s h, %s)",
                item.analista_nombre,
                item.porcentaje_disponibilidad,
                item.horas_asignadas,
                item.nivel_carga,
            )
        db.commit()
        return len(resultado)
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Recalcula y guarda la disponibilidad de los analistas")
    parser.add_argument("--hoy", help="Fecha de referencia YYYY-MM-DD (por defecto, hoy)")
    args = parser.parse_args()
    setup_logging()
    total = recalcular(args.hoy)
    print(f"Disponibilidad actualizada para {total} analistas")

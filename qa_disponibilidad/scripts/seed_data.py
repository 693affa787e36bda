from datetime import date

from sqlalchemy import insert

from data.db import engine
from data.models import AusenciaAnalista, Base, Proyecto, QAAnalista


ANALISTAS_BASE = [
    {"id": 1, "nombre": "Ana Gomez", "email": "ana.gomez@example.com", "rol": "QA Senior"},
    {"id": 2, "nombre": "Carlos Ruiz", "email": "carlos.ruiz@example.com", "rol": "QA Analyst"},
    {"id": 3, "nombre": "Laura Diaz", "email": "laura.diaz@example.com", "rol": "QA Leader"},
]

PROYECTOS_BASE = [
    {
        "id_jira": "SRCA-101",
        "nombre": "Portal clientes",
        "analista_producto": "Ana Gomez",
        "analista_id": 1,
        "horas": 80,
        "estado": "En Progreso",
        "fecha_inicio": date(2025, 8, 1),
        "fecha_entrega": date(2025, 8, 22),
    },
    {
        "id_jira": "SRCA-102",
        "nombre": "Pagos PSE",
        "analista_producto": "Ana Gomez",
        "analista_id": 1,
        "horas": 60,
        "estado": "En Progreso",
        "fecha_inicio": date(2025, 8, 4),
        "fecha_entrega": date(2025, 8, 29),
    },
    {
        "id_jira": "SRCA-201",
        "nombre": "App movil",
        "analista_producto": "Carlos Ruiz",
        "horas": 40,
        "horas_estimadas": 45,
        "fecha_entrega": date(2025, 8, 14),
        "fecha_certificacion": date(2025, 8, 28),
    },
]

AUSENCIAS_BASE = [
    {
        "analista_id": 3,
        "fecha_inicio": date(2025, 8, 11),
        "fecha_fin": date(2025, 8, 22),
        "descripcion": "Vacaciones de mitad de anio",
        "tipo": "vacation",
    },
]


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    with engine.begin() as conn:
        conn.execute(insert(QAAnalista), ANALISTAS_BASE)
        for proyecto in PROYECTOS_BASE:
            conn.execute(insert(Proyecto).values(**proyecto))
        conn.execute(insert(AusenciaAnalista), AUSENCIAS_BASE)
    print("Seed completado")

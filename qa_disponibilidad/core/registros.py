from collections.abc import Mapping
from typing import Any


def leer_campo(registro: Any, *nombres: str, defecto: Any = None) -> Any:
    """Primer valor no nulo entre los alias dados (dict o atributo)."""
    for nombre in nombres:
        if isinstance(registro, Mapping):
            valor = registro.get(nombre)
        else:
            valor = getattr(registro, nombre, None)
        if valor is not None:
            return valor
    return defecto

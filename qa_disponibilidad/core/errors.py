class ErrorCalendario(Exception):
    codigo = "error_calendario"

    def __init__(self, mensaje: str):
        super().__init__(mensaje)
        self.mensaje = mensaje


class FechaInvalida(ErrorCalendario, ValueError):
    codigo = "fecha_invalida"


class RangoFechasInvalido(FechaInvalida):
    codigo = "rango_fechas_invalido"


class RegionNoSoportada(ErrorCalendario, LookupError):
    codigo = "region_no_soportada"


class DatoProyectoInvalido(ErrorCalendario, ValueError):
    codigo = "dato_proyecto_invalido"

"""The system's notion of the current date, set by hand."""

from __future__ import annotations

from .tipos import Fecha

_FECHA_INICIAL = Fecha(1, 1, 1900)


class Reloj:
    """Holds the current date; starts at 1/1/1900."""

    def __init__(self, fecha: Fecha = _FECHA_INICIAL) -> None:
        self._fecha = fecha

    def fecha_actual(self) -> Fecha:
        """The current date."""
        return self._fecha

    def set_fecha(self, dia: int, mes: int, anio: int) -> None:
        """Replace the current date."""
        self._fecha = Fecha(dia, mes, anio)
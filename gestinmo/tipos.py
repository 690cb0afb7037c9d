"""Enumerations and value objects exchanged between the system and its clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering


class TipoInmueble(IntEnum):
    """Kind of property used when filtering publications."""

    TODOS = 0
    CASA = 1
    APARTAMENTO = 2


class TipoPublicacion(IntEnum):
    """Kind of publication: sale or rent."""

    VENTA = 0
    ALQUILER = 1


class TipoTecho(IntEnum):
    """Roof type of a house."""

    LIVIANO = 0
    A_DOS_AGUAS = 1
    PLANO = 2


@total_ordering
@dataclass(frozen=True)
class Fecha:
    """A calendar date ordered by year, month and day."""

    dia: int
    mes: int
    anio: int

    def _clave(self) -> tuple[int, int, int]:
        return (self.anio, self.mes, self.dia)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fecha):
            return NotImplemented
        return self._clave() < other._clave()

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"


@dataclass(frozen=True, order=True)
class DTUsuario:
    """A user's nickname and name; identity and order by nickname."""

    nickname: str
    nombre: str = field(compare=False)


def _si_no(valor: bool) -> str:
    return "Si" if valor else "No"


@dataclass(frozen=True)
class DTInmueble:
    """Common details of a property; ordered by code."""

    codigo: int
    direccion: str
    numero_puerta: int
    superficie: int
    anio_construccion: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DTInmueble):
            return NotImplemented
        return self.codigo < other.codigo

    def detalle(self) -> str:
        """One-line description of the property."""
        return (
            f"Codigo: {self.codigo}"
            f", direccion: {self.direccion}"
            f", nro. puerta: {self.numero_puerta}"
            f", superficie: {self.superficie} m2"
            f", consturccion: {self.anio_construccion}"
        )


@dataclass(frozen=True)
class DTCasa(DTInmueble):
    """Details of a house."""

    es_ph: bool = False
    techo: TipoTecho = TipoTecho.LIVIANO

    def detalle(self) -> str:
        return (
            f"{super().detalle()}"
            f", PH: {_si_no(self.es_ph)}"
            f", Tipo de techo: {int(self.techo)}"
        )


@dataclass(frozen=True)
class DTApartamento(DTInmueble):
    """Details of an apartment."""

    piso: int = 0
    tiene_ascensor: bool = False
    gastos_comunes: float = 0.0

    def detalle(self) -> str:
        return (
            f"{super().detalle()}"
            f", piso: {self.piso}"
            f", ascensor: {_si_no(self.tiene_ascensor)}"
            f", gastos comunes: {self.gastos_comunes:g}"
        )


@dataclass(frozen=True, order=True)
class DTInmuebleAdministrado:
    """A property managed by an agency since a given date; ordered by code."""

    codigo: int
    direccion: str = field(compare=False)
    fecha_comienzo: Fecha = field(compare=False)


@dataclass(frozen=True, order=True)
class DTInmuebleListado:
    """A property listed with its owner's nickname; ordered by code."""

    codigo: int
    direccion: str = field(compare=False)
    propietario: str = field(compare=False)


@dataclass(frozen=True, order=True)
class DTPublicacion:
    """A publication as shown in listings; ordered by code."""

    codigo: int
    fecha: Fecha = field(compare=False)
    texto: str = field(compare=False)
    precio: str = field(compare=False)
    inmobiliaria: str = field(compare=False)


@total_ordering
@dataclass(frozen=True, eq=False)
class DTNotificacion:
    """A notice of a new publication; ordered by date, then publication code."""

    inmobiliaria: str
    codigo_publicacion: int
    texto: str
    tipo_publicacion: TipoPublicacion
    tipo_inmueble: TipoInmueble
    fecha: Fecha

    def _clave(self) -> tuple[Fecha, int]:
        return (self.fecha, self.codigo_publicacion)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DTNotificacion):
            return NotImplemented
        return self._clave() == other._clave()

    def __hash__(self) -> int:
        return hash(self._clave())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DTNotificacion):
            return NotImplemented
        return self._clave() < other._clave()
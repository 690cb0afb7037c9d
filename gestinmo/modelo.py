"""Domain objects: users, properties, their management by agencies and publications."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import ClassVar, Iterator, Optional

from .tipos import (
    DTApartamento,
    DTCasa,
    DTInmueble,
    DTInmuebleAdministrado,
    DTInmuebleListado,
    DTNotificacion,
    DTPublicacion,
    DTUsuario,
    Fecha,
    TipoInmueble,
    TipoPublicacion,
    TipoTecho,
)


class Observador(ABC):
    """Receiver of notices about new publications."""

    @abstractmethod
    def notify(self, notificacion: DTNotificacion) -> None:
        """Deliver a notice to this receiver."""


class Usuario:
    """A registered user of the system."""

    def __init__(self, nickname: str, contrasena: str, nombre: str, email: str) -> None:
        self.nickname = nickname
        self.contrasena = contrasena
        self.nombre = nombre
        self.email = email

    def to_dt(self) -> DTUsuario:
        """The user's public data."""
        return DTUsuario(self.nickname, self.nombre)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.nickname!r})"


class Cliente(Usuario, Observador):
    """A client who may subscribe to agencies' publications."""

    def __init__(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        apellido: str,
        documento: str,
    ) -> None:
        super().__init__(nickname, contrasena, nombre, email)
        self.apellido = apellido
        self.documento = documento
        self._notificaciones: set[DTNotificacion] = set()

    def notify(self, notificacion: DTNotificacion) -> None:
        """Keep a notice; one per date and publication code."""
        self._notificaciones.add(notificacion)

    def notificaciones(self) -> list[DTNotificacion]:
        """Received notices, ordered by date and publication code."""
        return sorted(self._notificaciones)

    def clear_notificaciones(self) -> None:
        """Forget every received notice."""
        self._notificaciones.clear()


class Propietario(Usuario, Observador):
    """An owner of properties, represented by agencies."""

    def __init__(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        cuenta_bancaria: str,
        telefono: str,
    ) -> None:
        super().__init__(nickname, contrasena, nombre, email)
        self.cuenta_bancaria = cuenta_bancaria
        self.telefono = telefono
        self._notificaciones: set[DTNotificacion] = set()
        self._propiedades: dict[Inmueble, None] = {}
        self._inmobiliarias: dict[Inmobiliaria, None] = {}

    @property
    def propiedades(self) -> tuple[Inmueble, ...]:
        return tuple(self._propiedades)

    @property
    def inmobiliarias(self) -> tuple[Inmobiliaria, ...]:
        return tuple(self._inmobiliarias)

    def agregar_propiedad(self, inmueble: Inmueble) -> None:
        self._propiedades[inmueble] = None

    def agregar_inmobiliaria(self, inmobiliaria: Inmobiliaria) -> None:
        self._inmobiliarias[inmobiliaria] = None

    def borrar_propiedad(self, inmueble: Inmueble) -> None:
        self._propiedades.pop(inmueble, None)

    def inmuebles_no_administrados(self, inmobiliaria: Inmobiliaria) -> list[DTInmuebleListado]:
        """This owner's properties that the given agency does not manage, by code."""
        return sorted(
            {
                DTInmuebleListado(inm.codigo, inm.direccion, self.nickname)
                for inm in self._propiedades
                if not inm.es_administrado_por(inmobiliaria)
            }
        )

    def notify(self, notificacion: DTNotificacion) -> None:
        """Keep a notice; one per date and publication code."""
        self._notificaciones.add(notificacion)

    def notificaciones(self) -> list[DTNotificacion]:
        """Received notices, ordered by date and publication code."""
        return sorted(self._notificaciones)

    def clear_notificaciones(self) -> None:
        """Forget every received notice."""
        self._notificaciones.clear()


class Inmobiliaria(Usuario):
    """A real-estate agency that manages properties and publishes them."""

    def __init__(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        direccion: str,
        url: str,
        telefono: str,
    ) -> None:
        super().__init__(nickname, contrasena, nombre, email)
        self.direccion = direccion
        self.url = url
        self.telefono = telefono
        self._suscriptores: dict[Observador, None] = {}
        self._representados: dict[Propietario, None] = {}
        self._administraciones: list[AdministraPropiedad] = []

    @property
    def representados(self) -> tuple[Propietario, ...]:
        return tuple(self._representados)

    @property
    def administraciones(self) -> tuple[AdministraPropiedad, ...]:
        return tuple(self._administraciones)

    def inmuebles_administrados(self) -> list[DTInmuebleAdministrado]:
        """Managed properties, one per code, ordered by code."""
        vistos: dict[int, DTInmuebleAdministrado] = {}
        for ap in self._administraciones:
            dt = ap.to_dt()
            vistos.setdefault(dt.codigo, dt)
        return sorted(vistos.values())

    def inmuebles_no_administrados(self) -> list[DTInmuebleListado]:
        """Properties of represented owners that this agency does not manage."""
        resultado: dict[int, DTInmuebleListado] = {}
        for propietario in self._representados:
            for dt in propietario.inmuebles_no_administrados(self):
                resultado.setdefault(dt.codigo, dt)
        return sorted(resultado.values())

    def alta_administracion(self, inmueble: Inmueble, fecha: Fecha) -> AdministraPropiedad:
        """Start managing a property from the given date."""
        ap = AdministraPropiedad(fecha, inmobiliaria=self, inmueble=inmueble)
        self._administraciones.append(ap)
        inmueble.agregar_administracion(ap)
        return ap

    def administracion_con(self, inmueble: Inmueble) -> Optional[AdministraPropiedad]:
        """This agency's management of the property, or None."""
        return next((ap for ap in self._administraciones if ap.inmueble is inmueble), None)

    def agregar_representado(self, propietario: Propietario) -> None:
        self._representados[propietario] = None

    def borrar_administracion(self, administracion: AdministraPropiedad) -> None:
        if administracion in self._administraciones:
            self._administraciones.remove(administracion)

    def suscribir(self, observador: Observador) -> None:
        self._suscriptores[observador] = None

    def desuscribir(self, observador: Observador) -> None:
        self._suscriptores.pop(observador, None)

    def notify_all(self, notificacion: DTNotificacion) -> None:
        """Send a notice to every subscriber."""
        for observador in list(self._suscriptores):
            observador.notify(notificacion)

    def esta_suscrito(self, observador: Observador) -> bool:
        return observador in self._suscriptores


class Inmueble(ABC):
    """A property; codes are handed out from 1 unless given."""

    es_casa: ClassVar[bool]
    tipo: ClassVar[TipoInmueble]
    _codigos: ClassVar[Iterator[int]] = itertools.count(1)

    def __init__(
        self,
        direccion: str,
        numero_puerta: int,
        superficie: int,
        anio_construccion: int,
        *,
        codigo: Optional[int] = None,
    ) -> None:
        self.codigo = next(Inmueble._codigos) if codigo is None else codigo
        self.direccion = direccion
        self.numero_puerta = numero_puerta
        self.superficie = superficie
        self.anio_construccion = anio_construccion
        self.propietario: Optional[Propietario] = None
        self._administraciones: list[AdministraPropiedad] = []

    @property
    def administraciones(self) -> tuple[AdministraPropiedad, ...]:
        return tuple(self._administraciones)

    def agregar_administracion(self, administracion: AdministraPropiedad) -> None:
        if administracion not in self._administraciones:
            self._administraciones.append(administracion)

    def es_administrado_por(self, inmobiliaria: Inmobiliaria) -> bool:
        return any(ap.inmobiliaria is inmobiliaria for ap in self._administraciones)

    def borrar_administraciones(self) -> None:
        self._administraciones.clear()

    def to_listado(self) -> DTInmuebleListado:
        """Code, address and owner's nickname."""
        if self.propietario is None:
            raise ValueError(f"el inmueble {self.codigo} no tiene propietario")
        return DTInmuebleListado(self.codigo, self.direccion, self.propietario.nickname)

    @abstractmethod
    def to_dt(self) -> DTInmueble:
        """Full details of the property."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(codigo={self.codigo}, direccion={self.direccion!r})"


class Casa(Inmueble):
    """A house."""

    es_casa = True
    tipo = TipoInmueble.CASA

    def __init__(
        self,
        direccion: str,
        numero_puerta: int,
        superficie: int,
        anio_construccion: int,
        es_ph: bool,
        techo: TipoTecho,
        *,
        codigo: Optional[int] = None,
    ) -> None:
        super().__init__(direccion, numero_puerta, superficie, anio_construccion, codigo=codigo)
        self.es_ph = es_ph
        self.techo = techo

    def to_dt(self) -> DTCasa:
        return DTCasa(
            codigo=self.codigo,
            direccion=self.direccion,
            numero_puerta=self.numero_puerta,
            superficie=self.superficie,
            anio_construccion=self.anio_construccion,
            es_ph=self.es_ph,
            techo=self.techo,
        )


class Apartamento(Inmueble):
    """An apartment."""

    es_casa = False
    tipo = TipoInmueble.APARTAMENTO

    def __init__(
        self,
        direccion: str,
        numero_puerta: int,
        superficie: int,
        anio_construccion: int,
        piso: int,
        tiene_ascensor: bool,
        gastos_comunes: float,
        *,
        codigo: Optional[int] = None,
    ) -> None:
        super().__init__(direccion, numero_puerta, superficie, anio_construccion, codigo=codigo)
        self.piso = piso
        self.tiene_ascensor = tiene_ascensor
        self.gastos_comunes = gastos_comunes

    def to_dt(self) -> DTApartamento:
        return DTApartamento(
            codigo=self.codigo,
            direccion=self.direccion,
            numero_puerta=self.numero_puerta,
            superficie=self.superficie,
            anio_construccion=self.anio_construccion,
            piso=self.piso,
            tiene_ascensor=self.tiene_ascensor,
            gastos_comunes=self.gastos_comunes,
        )


class AdministraPropiedad:
    """An agency's management of a property, with its publications."""

    def __init__(
        self,
        fecha: Fecha,
        inmobiliaria: Optional[Inmobiliaria] = None,
        inmueble: Optional[Inmueble] = None,
    ) -> None:
        self.fecha = fecha
        self.inmobiliaria = inmobiliaria
        self.inmueble = inmueble
        self._publicaciones: list[Publicacion] = []

    @property
    def publicaciones(self) -> tuple[Publicacion, ...]:
        return tuple(self._publicaciones)

    def to_dt(self) -> DTInmuebleAdministrado:
        if self.inmueble is None:
            raise ValueError("administracion sin inmueble")
        return DTInmuebleAdministrado(self.inmueble.codigo, self.inmueble.direccion, self.fecha)

    def agregar_publicacion(self, publicacion: Publicacion) -> None:
        if publicacion not in self._publicaciones:
            self._publicaciones.append(publicacion)

    def publicacion_activa(self, tipo: TipoPublicacion) -> Optional[Publicacion]:
        """The first active publication of the given kind, or None."""
        return next((p for p in self._publicaciones if p.tipo == tipo and p.activa), None)

    def quitar_publicaciones(self) -> list[Publicacion]:
        """Detach and return every publication of this management."""
        quitadas = self._publicaciones
        self._publicaciones = []
        return quitadas


class Publicacion:
    """A sale or rent offer; codes are handed out from 0 unless given."""

    _codigos: ClassVar[Iterator[int]] = itertools.count(0)

    def __init__(
        self,
        fecha: Fecha,
        tipo: TipoPublicacion,
        texto: str,
        precio: float,
        activa: bool = True,
        *,
        codigo: Optional[int] = None,
        administracion: Optional[AdministraPropiedad] = None,
    ) -> None:
        self.codigo = next(Publicacion._codigos) if codigo is None else codigo
        self.fecha = fecha
        self.tipo = tipo
        self.texto = texto
        self.precio = float(precio)
        self.activa = activa
        self.administracion = administracion

    def cumple_filtro(
        self,
        tipo: TipoPublicacion,
        precio_min: float,
        precio_max: float,
        tipo_inmueble: TipoInmueble,
    ) -> bool:
        """Whether this publication matches kind, price range and property kind."""
        if self.tipo != tipo:
            return False
        if self.precio < precio_min or self.precio > precio_max:
            return False
        if tipo_inmueble != TipoInmueble.TODOS:
            if self.administracion is None or self.administracion.inmueble is None:
                raise ValueError(f"la publicacion {self.codigo} no tiene inmueble")
            es_casa = self.administracion.inmueble.es_casa
            if tipo_inmueble == TipoInmueble.CASA and not es_casa:
                return False
            if tipo_inmueble == TipoInmueble.APARTAMENTO and es_casa:
                return False
        return True

    def to_dt(self) -> DTPublicacion:
        """Listing view; the price is written with six decimals."""
        if self.administracion is None or self.administracion.inmobiliaria is None:
            raise ValueError(f"la publicacion {self.codigo} no tiene inmobiliaria")
        return DTPublicacion(
            self.codigo,
            self.fecha,
            self.texto,
            f"{self.precio:f}",
            self.administracion.inmobiliaria.nombre,
        )

    def __repr__(self) -> str:
        return f"Publicacion(codigo={self.codigo}, tipo={self.tipo.name})"
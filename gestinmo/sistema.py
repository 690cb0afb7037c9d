"""The system's operations: users, properties, management, publications and notices."""

from __future__ import annotations

import itertools
from typing import Iterator, Optional

from .modelo import (
    AdministraPropiedad,
    Apartamento,
    Casa,
    Cliente,
    Inmobiliaria,
    Inmueble,
    Observador,
    Propietario,
    Publicacion,
)
from .registro import Registro
from .reloj import Reloj
from .tipos import (
    DTInmueble,
    DTInmuebleAdministrado,
    DTInmuebleListado,
    DTNotificacion,
    DTPublicacion,
    DTUsuario,
    TipoInmueble,
    TipoPublicacion,
    TipoTecho,
)

_LARGO_MINIMO_CONTRASENA = 6


class SistemaError(LookupError):
    """An operation refers to something the system does not hold."""


class Sistema:
    """Entry point for every use case of the real-estate system.

    Property codes are handed out from 1 and publication codes from 0,
    separately for each system.
    """

    def __init__(self, reloj: Optional[Reloj] = None) -> None:
        self.reloj = reloj if reloj is not None else Reloj()
        self.clientes: Registro[str, Cliente] = Registro(lambda c: c.nickname)
        self.propietarios: Registro[str, Propietario] = Registro(lambda p: p.nickname)
        self.inmobiliarias: Registro[str, Inmobiliaria] = Registro(lambda i: i.nickname)
        self.inmuebles: Registro[int, Inmueble] = Registro(lambda i: i.codigo)
        self.publicaciones: Registro[int, Publicacion] = Registro(lambda p: p.codigo)
        self._codigos_inmueble: Iterator[int] = itertools.count(1)
        self._codigos_publicacion: Iterator[int] = itertools.count(0)
        self._inmobiliaria_recordada: Optional[Inmobiliaria] = None
        self._propietario_recordado: Optional[Propietario] = None

    # --- lookups -------------------------------------------------------

    def _nickname_libre(self, nickname: str) -> bool:
        return not (
            nickname in self.clientes
            or nickname in self.propietarios
            or nickname in self.inmobiliarias
        )

    def _inmobiliaria(self, nickname: str) -> Inmobiliaria:
        inmo = self.inmobiliarias.find(nickname)
        if inmo is None:
            raise SistemaError(f"no existe la inmobiliaria {nickname!r}")
        return inmo

    def _inmueble(self, codigo: int) -> Inmueble:
        inm = self.inmuebles.find(codigo)
        if inm is None:
            raise SistemaError(f"no existe el inmueble {codigo}")
        return inm

    def _observador(self, nickname: str) -> Optional[Observador]:
        cliente = self.clientes.find(nickname)
        if cliente is not None:
            return cliente
        return self.propietarios.find(nickname)

    def _propietario_en_alta(self) -> Propietario:
        if self._propietario_recordado is None:
            raise SistemaError("no hay un propietario en alta")
        return self._propietario_recordado

    # --- users ---------------------------------------------------------

    def alta_cliente(self, nickname, contrasena, nombre, email, apellido, documento) -> bool:
        """Register a client; False if the password is short or the nickname taken."""
        if len(contrasena) < _LARGO_MINIMO_CONTRASENA or not self._nickname_libre(nickname):
            return False
        self.clientes.agregar(Cliente(nickname, contrasena, nombre, email, apellido, documento))
        return True

    def alta_propietario(
        self, nickname, contrasena, nombre, email, cuenta_bancaria, telefono
    ) -> bool:
        """Register an owner and remember it for the properties that follow."""
        if len(contrasena) < _LARGO_MINIMO_CONTRASENA or not self._nickname_libre(nickname):
            return False
        propietario = Propietario(nickname, contrasena, nombre, email, cuenta_bancaria, telefono)
        self.propietarios.agregar(propietario)
        self._propietario_recordado = propietario
        return True

    def alta_inmobiliaria(
        self, nickname, contrasena, nombre, email, direccion, url, telefono
    ) -> bool:
        """Register an agency and remember it for the owners it will represent."""
        if len(contrasena) < _LARGO_MINIMO_CONTRASENA or not self._nickname_libre(nickname):
            return False
        inmo = Inmobiliaria(nickname, contrasena, nombre, email, direccion, url, telefono)
        self.inmobiliarias.agregar(inmo)
        self._inmobiliaria_recordada = inmo
        return True

    def representar_propietario(self, nickname_propietario: str) -> None:
        """Make the agency being registered represent the given owner."""
        inmo = self._inmobiliaria_recordada
        if inmo is None:
            raise SistemaError("no hay una inmobiliaria en alta")
        propietario = self.propietarios.find(nickname_propietario)
        if propietario is None:
            raise SistemaError(f"no existe el propietario {nickname_propietario!r}")
        propietario.agregar_inmobiliaria(inmo)
        inmo.agregar_representado(propietario)

    def finalizar_alta_usuario(self) -> None:
        """Forget the owner or agency being registered."""
        self._inmobiliaria_recordada = None
        self._propietario_recordado = None

    # --- properties ----------------------------------------------------

    def _registrar_inmueble(self, inmueble: Inmueble) -> int:
        propietario = self._propietario_en_alta()
        inmueble.propietario = propietario
        propietario.agregar_propiedad(inmueble)
        self.inmuebles.agregar(inmueble)
        return inmueble.codigo

    def alta_casa(
        self, direccion, numero_puerta, superficie, anio_construccion, es_ph, techo: TipoTecho
    ) -> int:
        """Add a house to the owner being registered; returns its code."""
        self._propietario_en_alta()
        casa = Casa(
            direccion,
            numero_puerta,
            superficie,
            anio_construccion,
            es_ph,
            techo,
            codigo=next(self._codigos_inmueble),
        )
        return self._registrar_inmueble(casa)

    def alta_apartamento(
        self,
        direccion,
        numero_puerta,
        superficie,
        anio_construccion,
        piso,
        tiene_ascensor,
        gastos_comunes,
    ) -> int:
        """Add an apartment to the owner being registered; returns its code."""
        self._propietario_en_alta()
        apartamento = Apartamento(
            direccion,
            numero_puerta,
            superficie,
            anio_construccion,
            piso,
            tiene_ascensor,
            gastos_comunes,
            codigo=next(self._codigos_inmueble),
        )
        return self._registrar_inmueble(apartamento)

    # --- listings ------------------------------------------------------

    def listar_clientes(self) -> list[DTUsuario]:
        return sorted(c.to_dt() for c in self.clientes)

    def listar_propietarios(self) -> list[DTUsuario]:
        return sorted(p.to_dt() for p in self.propietarios)

    def listar_inmobiliarias(self) -> list[DTUsuario]:
        return sorted(i.to_dt() for i in self.inmobiliarias)

    def listar_inmuebles(self) -> list[DTInmuebleListado]:
        return sorted(i.to_listado() for i in self.inmuebles)

    def listar_inmuebles_administrados(
        self, nickname_inmobiliaria: str
    ) -> list[DTInmuebleAdministrado]:
        return self._inmobiliaria(nickname_inmobiliaria).inmuebles_administrados()

    def listar_inmuebles_no_administrados(
        self, nickname_inmobiliaria: str
    ) -> list[DTInmuebleListado]:
        """Properties of the agency's represented owners that it does not manage."""
        return self._inmobiliaria(nickname_inmobiliaria).inmuebles_no_administrados()

    # --- management and publications ----------------------------------

    def alta_administra_propiedad(
        self, nickname_inmobiliaria: str, codigo_inmueble: int
    ) -> AdministraPropiedad:
        """The agency starts managing the property from the current date."""
        inmo = self._inmobiliaria(nickname_inmobiliaria)
        inm = self._inmueble(codigo_inmueble)
        return inmo.alta_administracion(inm, self.reloj.fecha_actual())

    def alta_publicacion(
        self,
        nickname_inmobiliaria: str,
        codigo_inmueble: int,
        tipo: TipoPublicacion,
        texto: str,
        precio: float,
    ) -> int:
        """Publish a managed property; the previous active one of that kind is retired.

        Subscribers of the agency are notified. Returns the publication's code.
        """
        inmo = self._inmobiliaria(nickname_inmobiliaria)
        inm = self._inmueble(codigo_inmueble)
        ap = inmo.administracion_con(inm)
        if ap is None:
            raise SistemaError(
                f"{nickname_inmobiliaria!r} no administra el inmueble {codigo_inmueble}"
            )
        ahora = self.reloj.fecha_actual()
        vieja = ap.publicacion_activa(tipo)
        nueva = Publicacion(
            ahora,
            tipo,
            texto,
            precio,
            True,
            codigo=next(self._codigos_publicacion),
            administracion=ap,
        )
        self.publicaciones.agregar(nueva)
        ap.agregar_publicacion(nueva)
        if vieja is not None:
            vieja.activa = False
        inmo.notify_all(
            DTNotificacion(inmo.nickname, nueva.codigo, nueva.texto, nueva.tipo, inm.tipo, ahora)
        )
        return nueva.codigo

    def listar_publicaciones(
        self,
        tipo: TipoPublicacion,
        precio_min: float,
        precio_max: float,
        tipo_inmueble: TipoInmueble,
    ) -> list[DTPublicacion]:
        """Publications of the kind within the price range, ordered by code."""
        return sorted(
            p.to_dt()
            for p in self.publicaciones
            if p.cumple_filtro(tipo, precio_min, precio_max, tipo_inmueble)
        )

    def detalle_inmueble(self, codigo_inmueble: int) -> DTInmueble:
        return self._inmueble(codigo_inmueble).to_dt()

    def detalle_inmueble_publicacion(self, codigo_publicacion: int) -> DTInmueble:
        """Details of the property a publication is about."""
        pub = self.publicaciones.find(codigo_publicacion)
        if pub is None:
            raise SistemaError(f"no existe la publicacion {codigo_publicacion}")
        ap = pub.administracion
        if ap is None or ap.inmueble is None:
            raise SistemaError(f"la publicacion {codigo_publicacion} no tiene inmueble")
        return ap.inmueble.to_dt()

    def eliminar_inmueble(self, codigo_inmueble: int) -> None:
        """Remove a property with its managements and publications; unknown codes are ignored."""
        inm = self.inmuebles.find(codigo_inmueble)
        if inm is None:
            return
        if inm.propietario is not None:
            inm.propietario.borrar_propiedad(inm)
        for ap in inm.administraciones:
            if ap.inmobiliaria is not None:
                ap.inmobiliaria.borrar_administracion(ap)
            for pub in ap.quitar_publicaciones():
                self.publicaciones.borrar(pub.codigo)
        inm.borrar_administraciones()
        self.inmuebles.borrar(codigo_inmueble)

    # --- subscriptions -------------------------------------------------

    def suscribir_usuario(self, nickname_usuario: str, nickname_inmobiliaria: str) -> None:
        """Subscribe a client or owner to an agency; unknown names are ignored."""
        observador = self._observador(nickname_usuario)
        if observador is None:
            return
        inmo = self.inmobiliarias.find(nickname_inmobiliaria)
        if inmo is not None:
            inmo.suscribir(observador)

    def eliminar_suscripcion(self, nickname_usuario: str, nickname_inmobiliaria: str) -> None:
        """Cancel a client's or owner's subscription to an agency."""
        inmo = self._inmobiliaria(nickname_inmobiliaria)
        observador = self._observador(nickname_usuario)
        if observador is not None:
            inmo.desuscribir(observador)

    def consultar_notificaciones(self, nickname_usuario: str) -> list[DTNotificacion]:
        """Return and forget the notices received by a client or owner."""
        receptor = self.clientes.find(nickname_usuario) or self.propietarios.find(
            nickname_usuario
        )
        if receptor is None:
            raise SistemaError(f"no existe el usuario {nickname_usuario!r}")
        notificaciones = receptor.notificaciones()
        receptor.clear_notificaciones()
        return notificaciones

    def _inmobiliarias_por_suscripcion(
        self, nickname_usuario: str, suscrito: bool
    ) -> list[DTUsuario]:
        observador = self._observador(nickname_usuario)
        if observador is None:
            return []
        return sorted(
            inmo.to_dt()
            for inmo in self.inmobiliarias
            if inmo.esta_suscrito(observador) == suscrito
        )

    def listar_inmobiliarias_suscritas(self, nickname_usuario: str) -> list[DTUsuario]:
        return self._inmobiliarias_por_suscripcion(nickname_usuario, True)

    def listar_inmobiliarias_no_suscritas(self, nickname_usuario: str) -> list[DTUsuario]:
        return self._inmobiliarias_por_suscripcion(nickname_usuario, False)
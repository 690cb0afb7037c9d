import pytest

from gestinmo.sistema import Sistema, SistemaError
from gestinmo.tipos import (
    DTCasa,
    DTUsuario,
    Fecha,
    TipoInmueble,
    TipoPublicacion,
    TipoTecho,
)

PASSWORD = "password"
SHORT_PASSWORD = "token"


def _cliente(sistema, nick):
    return sistema.alta_cliente(nick, PASSWORD, nick.title(), "[email protected]", "Apellido", "doc")


@pytest.fixture
def sistema():
    s = Sistema()
    assert _cliente(s, "luis")
    s.finalizar_alta_usuario()
    assert s.alta_propietario("marcelo", PASSWORD, "Marcelo", "[email protected]", "cuenta", "tel")
    s.alta_casa("Av. Rivera", 1011, 120, 1995, True, TipoTecho.PLANO)
    s.alta_apartamento("Av. Brasil", 2031, 75, 1980, 5, True, 3500.0)
    s.finalizar_alta_usuario()
    assert s.alta_inmobiliaria(
        "casasur", PASSWORD, "Casa Sur", "[email protected]", "Canelones", "https://example.com", "tel"
    )
    s.representar_propietario("marcelo")
    s.finalizar_alta_usuario()
    assert s.alta_inmobiliaria(
        "idealhome", PASSWORD, "IHome", "[email protected]", "Italia", "https://example.com", "tel"
    )
    s.finalizar_alta_usuario()
    return s


def _codigos(sistema):
    return [dt.codigo for dt in sistema.listar_inmuebles()]


def test_short_password_is_rejected():
    s = Sistema()
    assert s.alta_cliente("ana", SHORT_PASSWORD, "Ana", "[email protected]", "Rojo", "1") is False
    assert s.listar_clientes() == []


def test_duplicate_nickname_across_kinds_is_rejected(sistema):
    assert sistema.alta_propietario("luis", PASSWORD, "L", "[email protected]", "c", "t") is False
    assert sistema.alta_inmobiliaria("marcelo", PASSWORD, "M", "[email protected]", "d", "u", "t") is False
    assert _cliente(sistema, "casasur") is False
    assert [u.nickname for u in sistema.listar_propietarios()] == ["marcelo"]


def test_listings_are_ordered_by_nickname(sistema):
    assert _cliente(sistema, "ana")
    assert sistema.listar_clientes() == [DTUsuario("ana", "Ana"), DTUsuario("luis", "Luis")]
    assert [u.nickname for u in sistema.listar_inmobiliarias()] == ["casasur", "idealhome"]


def test_property_codes_start_at_one(sistema):
    codigos = _codigos(sistema)
    assert codigos[0] == 1
    assert codigos == sorted(set(codigos))
    assert {dt.propietario for dt in sistema.listar_inmuebles()} == {"marcelo"}


def test_property_needs_owner_in_registration():
    s = Sistema()
    with pytest.raises(SistemaError):
        s.alta_casa("Calle", 1, 50, 2000, False, TipoTecho.LIVIANO)


def test_represent_needs_agency_in_registration(sistema):
    with pytest.raises(SistemaError):
        sistema.representar_propietario("marcelo")


def test_management_removes_from_unmanaged(sistema):
    casa, apto = _codigos(sistema)
    assert [dt.codigo for dt in sistema.listar_inmuebles_no_administrados("casasur")] == [casa, apto]
    sistema.reloj.set_fecha(12, 12, 2015)
    sistema.alta_administra_propiedad("casasur", apto)
    assert [dt.codigo for dt in sistema.listar_inmuebles_no_administrados("casasur")] == [casa]
    administrados = sistema.listar_inmuebles_administrados("casasur")
    assert [dt.codigo for dt in administrados] == [apto]
    assert administrados[0].fecha_comienzo == Fecha(12, 12, 2015)
    assert administrados[0].direccion == "Av. Brasil"


def test_unknown_agency_raises(sistema):
    with pytest.raises(SistemaError):
        sistema.listar_inmuebles_administrados("nadie")


def test_publication_requires_management(sistema):
    casa, _ = _codigos(sistema)
    with pytest.raises(SistemaError):
        sistema.alta_publicacion("casasur", casa, TipoPublicacion.VENTA, "texto", 100.0)


def test_new_publication_retires_previous_of_same_kind(sistema):
    casa, _ = _codigos(sistema)
    sistema.alta_administra_propiedad("casasur", casa)
    primera = sistema.alta_publicacion("casasur", casa, TipoPublicacion.VENTA, "uno", 100.0)
    alquiler = sistema.alta_publicacion("casasur", casa, TipoPublicacion.ALQUILER, "dos", 50.0)
    segunda = sistema.alta_publicacion("casasur", casa, TipoPublicacion.VENTA, "tres", 120.0)
    assert primera == 0
    assert sistema.publicaciones.find(primera).activa is False
    assert sistema.publicaciones.find(segunda).activa is True
    assert sistema.publicaciones.find(alquiler).activa is True


def test_listing_filters_by_kind_price_and_property(sistema):
    casa, apto = _codigos(sistema)
    sistema.alta_administra_propiedad("casasur", casa)
    sistema.alta_administra_propiedad("casasur", apto)
    p_casa = sistema.alta_publicacion("casasur", casa, TipoPublicacion.VENTA, "casa", 500.0)
    p_apto = sistema.alta_publicacion("casasur", apto, TipoPublicacion.VENTA, "apto", 300.0)
    sistema.alta_publicacion("casasur", apto, TipoPublicacion.ALQUILER, "alq", 20.0)

    todas = sistema.listar_publicaciones(TipoPublicacion.VENTA, 0, 1000, TipoInmueble.TODOS)
    assert [dt.codigo for dt in todas] == [p_casa, p_apto]
    assert {dt.inmobiliaria for dt in todas} == {"Casa Sur"}
    casas = sistema.listar_publicaciones(TipoPublicacion.VENTA, 0, 1000, TipoInmueble.CASA)
    assert [dt.codigo for dt in casas] == [p_casa]
    aptos = sistema.listar_publicaciones(TipoPublicacion.VENTA, 0, 1000, TipoInmueble.APARTAMENTO)
    assert [dt.codigo for dt in aptos] == [p_apto]
    baratas = sistema.listar_publicaciones(TipoPublicacion.VENTA, 0, 400, TipoInmueble.TODOS)
    assert [dt.codigo for dt in baratas] == [p_apto]


def test_subscribers_are_notified_and_notices_cleared(sistema):
    casa, _ = _codigos(sistema)
    sistema.suscribir_usuario("luis", "casasur")
    sistema.alta_administra_propiedad("casasur", casa)
    sistema.reloj.set_fecha(1, 10, 2023)
    codigo = sistema.alta_publicacion("casasur", casa, TipoPublicacion.VENTA, "Casa en venta", 9.0)
    notificaciones = sistema.consultar_notificaciones("luis")
    assert len(notificaciones) == 1
    nota = notificaciones[0]
    assert nota.codigo_publicacion == codigo
    assert nota.inmobiliaria == "casasur"
    assert nota.texto == "Casa en venta"
    assert nota.tipo_inmueble is TipoInmueble.CASA
    assert nota.fecha == Fecha(1, 10, 2023)
    assert sistema.consultar_notificaciones("luis") == []
    assert sistema.consultar_notificaciones("marcelo") == []


def test_unknown_user_notifications_raise(sistema):
    with pytest.raises(SistemaError):
        sistema.consultar_notificaciones("nadie")


def test_subscribed_and_unsubscribed_partition_agencies(sistema):
    sistema.suscribir_usuario("marcelo", "idealhome")
    suscritas = sistema.listar_inmobiliarias_suscritas("marcelo")
    no_suscritas = sistema.listar_inmobiliarias_no_suscritas("marcelo")
    assert [u.nickname for u in suscritas] == ["idealhome"]
    assert sorted(suscritas + no_suscritas) == sistema.listar_inmobiliarias()
    sistema.eliminar_suscripcion("marcelo", "idealhome")
    assert sistema.listar_inmobiliarias_suscritas("marcelo") == []
    assert sistema.listar_inmobiliarias_suscritas("nadie") == []


def test_unsubscribe_from_unknown_agency_raises(sistema):
    with pytest.raises(SistemaError):
        sistema.eliminar_suscripcion("luis", "nadie")


def test_detail_by_publication_matches_property_detail(sistema):
    casa, _ = _codigos(sistema)
    sistema.alta_administra_propiedad("casasur", casa)
    codigo = sistema.alta_publicacion("casasur", casa, TipoPublicacion.VENTA, "x", 1.0)
    detalle = sistema.detalle_inmueble(casa)
    assert sistema.detalle_inmueble_publicacion(codigo) == detalle
    assert isinstance(detalle, DTCasa) and detalle.techo is TipoTecho.PLANO
    with pytest.raises(SistemaError):
        sistema.detalle_inmueble_publicacion(codigo + 100)


def test_delete_property_removes_management_and_publications(sistema):
    casa, apto = _codigos(sistema)
    sistema.alta_administra_propiedad("casasur", casa)
    codigo = sistema.alta_publicacion("casasur", casa, TipoPublicacion.VENTA, "x", 1.0)
    sistema.eliminar_inmueble(casa)
    assert _codigos(sistema) == [apto]
    assert sistema.publicaciones.find(codigo) is None
    assert sistema.listar_inmuebles_administrados("casasur") == []
    assert [dt.codigo for dt in sistema.listar_inmuebles_no_administrados("casasur")] == [apto]
    with pytest.raises(SistemaError):
        sistema.detalle_inmueble(casa)
    sistema.eliminar_inmueble(casa)
    assert _codigos(sistema) == [apto]
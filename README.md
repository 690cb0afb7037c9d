# gestinmo

`gestinmo` es una biblioteca para gestionar inmobiliarias. Registra clientes,
propietarios e inmobiliarias, da de alta casas y apartamentos, registra qué
inmobiliaria administra cada inmueble y publica ofertas de venta o alquiler.
Los clientes y propietarios suscritos a una inmobiliaria reciben una
notificación por cada publicación nueva.

## Instalación

```
pip install .
```

## Módulos

- `gestinmo.tipos`: enumeraciones (`TipoInmueble`, `TipoPublicacion`,
  `TipoTecho`), la fecha `Fecha` y los objetos de datos que devuelve el
  sistema (`DTUsuario`, `DTCasa`, `DTApartamento`, `DTInmuebleAdministrado`,
  `DTInmuebleListado`, `DTPublicacion`, `DTNotificacion`).
- `gestinmo.modelo`: las entidades (`Cliente`, `Propietario`,
  `Inmobiliaria`, `Casa`, `Apartamento`, `AdministraPropiedad`,
  `Publicacion`).
- `gestinmo.registro`: `Registro`, una colección indexada por clave que se
  recorre en orden de clave.
- `gestinmo.reloj`: `Reloj`, la fecha actual del sistema, que empieza en
  1/1/1900 y se cambia con `set_fecha`.
- `gestinmo.sistema`: `Sistema`, con todas las operaciones, y `SistemaError`.

## Uso

```python
from gestinmo.sistema import Sistema
from gestinmo.tipos import TipoInmueble, TipoPublicacion, TipoTecho

password = "password"
sistema = Sistema()

sistema.alta_propietario("marta", password, "Marta", "marta@example.com", "cuenta-a", "tel-a")
codigo = sistema.alta_casa("Av. Rivera", 1011, 120, 1995, True, TipoTecho.PLANO)
sistema.finalizar_alta_usuario()

sistema.alta_inmobiliaria(
    "casasur", password, "Casa Sur", "casasur@example.com",
    "Canelones 2345", "casasur.example.com", "tel-b",
)
sistema.representar_propietario("marta")
sistema.finalizar_alta_usuario()

sistema.alta_cliente("luis", password, "Luis", "luis@example.com", "Pérez", "doc-1")
sistema.suscribir_usuario("luis", "casasur")

sistema.reloj.set_fecha(12, 12, 2015)
sistema.alta_administra_propiedad("casasur", codigo)
sistema.alta_publicacion("casasur", codigo, TipoPublicacion.VENTA, "Casa con techo plano", 520000)

for pub in sistema.listar_publicaciones(TipoPublicacion.VENTA, 0, 1_000_000, TipoInmueble.TODOS):
    print(pub.codigo, pub.fecha, pub.texto, pub.precio, pub.inmobiliaria)

for notificacion in sistema.consultar_notificaciones("luis"):
    print(notificacion.inmobiliaria, notificacion.texto)

print(sistema.detalle_inmueble(codigo).detalle())
```

## Reglas

- Las contraseñas deben tener al menos seis caracteres, y un nickname no
  puede repetirse entre clientes, propietarios e inmobiliarias. Si no se
  cumple, `alta_cliente`, `alta_propietario` y `alta_inmobiliaria` devuelven
  `False`.
- `alta_casa` y `alta_apartamento` asignan el inmueble al propietario que se
  está dando de alta; `representar_propietario` vincula a la inmobiliaria que
  se está dando de alta. `finalizar_alta_usuario` cierra ese alta.
- Los códigos de inmueble empiezan en 1 y los de publicación en 0, por
  separado en cada `Sistema`.
- Al publicar, la publicación activa anterior del mismo tipo sobre esa
  administración queda inactiva, y los suscriptores de la inmobiliaria
  reciben una notificación.
- `consultar_notificaciones` devuelve las notificaciones ordenadas por fecha
  y código de publicación, y las vacía.
- `eliminar_inmueble` borra el inmueble con sus administraciones y
  publicaciones; un código desconocido se ignora.
- Las operaciones que no encuentran una inmobiliaria, un inmueble, una
  publicación o un usuario lanzan `SistemaError`.

## Lo que no incluye

El paquete no trae un comando ni un menú de consola, ni un juego de datos de
ejemplo: se usa desde código Python. Los datos viven sólo en memoria, dentro
de cada `Sistema`, y no se guardan en disco.
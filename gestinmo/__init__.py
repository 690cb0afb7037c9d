"""Modelo y operaciones en memoria para inmobiliarias, inmuebles, publicaciones y notificaciones."""

__version__ = "0.1.0"
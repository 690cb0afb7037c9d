[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "gestinmo"
version = "0.1.0"
description = "Modelo y operaciones para gestionar inmobiliarias, propietarios, inmuebles, publicaciones y notificaciones"
requires-python = ">=3.10"
dependencies = []
keywords = ["inmobiliaria", "inmuebles", "publicaciones", "notificaciones"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["gestinmo*"]

[tool.pytest.ini_options]
addopts = "-ra"

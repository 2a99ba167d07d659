# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de comandos que el anfitrión invoca sobre el núcleo.
# --------------------------------------------------------------
"""Inicializa el paquete `api` con la superficie de comandos y su configuración."""

__all__ = ["commands", "config", "logger"]

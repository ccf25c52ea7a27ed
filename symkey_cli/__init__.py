# --------------------------------------------------------------
# File: __init__.py
# Description: Herramientas de consola para cifrar y descifrar mensajes.
# --------------------------------------------------------------
"""Inicializa el paquete `symkey_cli` con las dos herramientas de consola."""

__all__ = ["common", "decrypt", "encrypt"]

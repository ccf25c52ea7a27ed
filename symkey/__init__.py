# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de la librería criptográfica compartida.
# --------------------------------------------------------------
"""Inicializa el paquete `symkey` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_sym",
    "errors",
    "key",
    "models",
    "nonce",
    "services",
    "storage",
]

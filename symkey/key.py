# --------------------------------------------------------------
# File: key.py
# Description: Adaptación de la passphrase del operador a una clave de 256 bits.
# --------------------------------------------------------------
"""Construcción determinista de la clave simétrica a partir de la passphrase."""

import logging

from symkey.errors import KeyTooLongError
from symkey.models import KEY_SIZE

logger = logging.getLogger(__name__)


def derive_key(passphrase: str) -> bytes:
    """Convierte una passphrase corta en una clave de 32 bytes.

    Los bytes UTF-8 de la passphrase se copian en un búfer de 32 bytes a cero.
    No se aplica ningún estiramiento: la misma passphrase produce siempre la
    misma clave y la unicidad del cifrado recae en el nonce.

    Args:
        passphrase (str): Passphrase del operador, de menos de 32 caracteres.

    Returns:
        bytes: Clave simétrica de exactamente 32 bytes.

    Raises:
        KeyTooLongError: Si la passphrase tiene 32 caracteres o más, o si su
            codificación UTF-8 no cabe en la clave.

    """

    # surrogateescape recupera los bytes no UTF-8 recibidos por argv.
    encoded = passphrase.encode("utf-8", "surrogateescape")
    if len(passphrase) >= KEY_SIZE or len(encoded) > KEY_SIZE:
        raise KeyTooLongError()

    buffer = bytearray(KEY_SIZE)
    buffer[: len(encoded)] = encoded
    logger.debug("Clave derivada a partir de una passphrase de %d bytes", len(encoded))
    return bytes(buffer)

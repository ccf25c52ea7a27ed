# --------------------------------------------------------------
# File: services.py
# Description: Puntos de entrada de la librería para cifrar y descifrar mensajes.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que consumen las herramientas de consola."""

import logging
import os
from typing import Optional

from symkey import config
from symkey.crypto_sym import open_sealed, seal
from symkey.key import derive_key
from symkey.models import NonceChoice
from symkey.nonce import RandomSource, resolve_nonce
from symkey.storage import load_artifact, save_artifact

logger = logging.getLogger(__name__)


def encrypt_message(
    passphrase: str,
    message: str,
    choice: NonceChoice,
    location: Optional[str] = None,
    *,
    rng: RandomSource = os.urandom,
    associated_data: bytes = b"",
) -> Optional[str]:
    """Sella un mensaje de texto y lo guarda en el almacén.

    Args:
        passphrase (str): Passphrase compartida entre operadores.
        message (str): Texto en claro a proteger.
        choice (NonceChoice): Política de nonce elegida.
        location (Optional[str]): Ruta del artefacto; por defecto la configurada.
        rng (RandomSource): Fuente aleatoria para el modo generado.
        associated_data (bytes): Datos autenticados adicionales.

    Returns:
        Optional[str]: Token del nonce si se generó, ``None`` en otro caso.

    """

    key = derive_key(passphrase)
    resolved = resolve_nonce(choice, for_decrypt=False, rng=rng)
    sealed = seal(
        key, resolved.nonce, message.encode("utf-8", "surrogateescape"), associated_data
    )

    path = config.get_artifact_path(location)
    save_artifact(sealed, path)
    logger.info("Mensaje cifrado con nonce %s", resolved.mode.value)
    return resolved.token


def decrypt_message(
    passphrase: str,
    choice: NonceChoice,
    location: Optional[str] = None,
    *,
    associated_data: bytes = b"",
) -> str:
    """Recupera el texto en claro del artefacto almacenado.

    Args:
        passphrase (str): Passphrase utilizada al cifrar.
        choice (NonceChoice): Política de nonce; el modo generado no se admite.
        location (Optional[str]): Ruta del artefacto; por defecto la configurada.
        associated_data (bytes): Mismos datos asociados que al cifrar.

    Returns:
        str: Mensaje original; los bytes no UTF-8 vuelven como sustitutos
        (``surrogateescape``), igual que se recibieron al cifrar.

    Raises:
        AuthenticationFailedError: Si la clave, el nonce o los datos no casan.

    """

    key = derive_key(passphrase)
    resolved = resolve_nonce(choice, for_decrypt=True)
    sealed = load_artifact(config.get_artifact_path(location))
    plaintext = open_sealed(key, resolved.nonce, sealed, associated_data)

    return plaintext.decode("utf-8", "surrogateescape")

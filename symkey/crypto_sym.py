# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas ChaCha20-Poly1305 para sellar y abrir mensajes.
# --------------------------------------------------------------
"""Rutinas de cifrado autenticado con datos asociados (AEAD).

ChaCha20 aporta la confidencialidad y Poly1305 la integridad. El ciphertext
tiene la misma longitud que el texto en claro y la etiqueta mide 16 bytes. La
verificación de la etiqueta se realiza en tiempo constante dentro del backend
de ``cryptography``.
"""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from symkey.errors import AuthenticationFailedError
from symkey.models import KEY_SIZE, NONCE_SIZE, TAG_SIZE, SealedMessage

logger = logging.getLogger(__name__)


def _check_inputs(key: bytes, nonce: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"la clave debe medir {KEY_SIZE} bytes")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"el nonce debe medir {NONCE_SIZE} bytes")


def seal(
    key: bytes, nonce: bytes, plaintext: bytes, associated_data: bytes = b""
) -> SealedMessage:
    """Cifra y autentica datos con ChaCha20-Poly1305.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Nonce de 96 bits; no debe repetirse con la misma clave.
        plaintext (bytes): Datos a cifrar.
        associated_data (bytes): Datos autenticados adicionales, no cifrados.

    Returns:
        SealedMessage: Ciphertext sin etiqueta y etiqueta de 128 bits.

    Raises:
        ValueError: Si la clave o el nonce no tienen la longitud requerida.

    """

    _check_inputs(key, nonce)
    ct_full = ChaCha20Poly1305(key).encrypt(nonce, plaintext, associated_data)
    logger.debug("Mensaje sellado: %d bytes de texto en claro", len(plaintext))
    return SealedMessage(ciphertext=ct_full[:-TAG_SIZE], tag=ct_full[-TAG_SIZE:])


def open_sealed(
    key: bytes, nonce: bytes, sealed: SealedMessage, associated_data: bytes = b""
) -> bytes:
    """Verifica y descifra un mensaje sellado.

    Args:
        key (bytes): Clave simétrica utilizada al sellar.
        nonce (bytes): Nonce utilizado al sellar.
        sealed (SealedMessage): Ciphertext y etiqueta.
        associated_data (bytes): Mismos datos asociados que al sellar.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        AuthenticationFailedError: Si la etiqueta no verifica. No distingue entre
            clave errónea, nonce erróneo o datos manipulados.
        ValueError: Si la clave o el nonce no tienen la longitud requerida.

    """

    _check_inputs(key, nonce)
    try:
        plaintext = ChaCha20Poly1305(key).decrypt(
            nonce, sealed.ciphertext + sealed.tag, associated_data
        )
    except InvalidTag:
        raise AuthenticationFailedError() from None
    logger.debug("Mensaje abierto: %d bytes de texto en claro", len(plaintext))
    return plaintext

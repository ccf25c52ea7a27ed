# --------------------------------------------------------------
# File: nonce.py
# Description: Políticas de nonce (nulo, generado, especificado) y su token ASCII.
# --------------------------------------------------------------
"""Gestión del ciclo de vida del nonce de ChaCha20-Poly1305.

El nonce generado viaja entre operadores como un token de 24 letras
minúsculas: la representación big-endian en base 26 de sus 96 bits. Como
26**24 > 2**96, cualquier nonce cabe en el token y la decodificación es su
inversa exacta.
"""

import logging
import os
import string
from typing import Callable, Optional

from symkey.errors import (
    AmbiguousNonceModeError,
    GenerateNotSupportedOnDecryptError,
    InvalidNonceEncodingError,
)
from symkey.models import NONCE_SIZE, GeneratedNonce, NonceChoice, NonceMode, ResolvedNonce

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase
TOKEN_LENGTH = 24
_BASE = len(ALPHABET)
_NONCE_LIMIT = 1 << (8 * NONCE_SIZE)

RandomSource = Callable[[int], bytes]


def zero_nonce() -> bytes:
    """Devuelve el nonce nulo.

    Es determinista y por tanto reutilizable entre mensajes: dos mensajes
    sellados con la misma clave y el nonce nulo quedan vinculados
    criptográficamente. Solo debe usarse con fines de demostración.
    """

    return bytes(NONCE_SIZE)


def encode_ascii(nonce: bytes) -> str:
    """Representa un nonce de 12 bytes como token de 24 letras.

    Args:
        nonce (bytes): Nonce de 96 bits.

    Returns:
        str: Token en base 26 sobre el alfabeto ``a-z``.

    Raises:
        ValueError: Si el nonce no tiene la longitud requerida.

    """

    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"el nonce debe medir {NONCE_SIZE} bytes")

    value = int.from_bytes(nonce, "big")
    digits = []
    for _ in range(TOKEN_LENGTH):
        value, remainder = divmod(value, _BASE)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def decode_ascii(token: str) -> bytes:
    """Recupera los bytes del nonce a partir de su token ASCII.

    Los tokens de menos de 24 letras se interpretan como si estuvieran
    rellenados a la izquierda con ``a`` (el dígito cero).

    Args:
        token (str): Token introducido por el operador.

    Returns:
        bytes: Nonce de 12 bytes.

    Raises:
        InvalidNonceEncodingError: Si el token está vacío, supera las 24 letras,
            contiene caracteres fuera de ``a-z`` o excede los 96 bits.

    """

    if not token or len(token) > TOKEN_LENGTH:
        raise InvalidNonceEncodingError()

    value = 0
    for char in token:
        digit = ALPHABET.find(char)
        if digit < 0:
            raise InvalidNonceEncodingError()
        value = value * _BASE + digit

    if value >= _NONCE_LIMIT:
        raise InvalidNonceEncodingError()
    return value.to_bytes(NONCE_SIZE, "big")


def generate_nonce(rng: RandomSource = os.urandom) -> GeneratedNonce:
    """Genera un nonce aleatorio y su token transcribible.

    Args:
        rng (RandomSource): Fuente aleatoria ``rng(n) -> bytes``; por defecto la
            del sistema operativo. Se inyecta para obtener pruebas deterministas.

    Returns:
        GeneratedNonce: Bytes del nonce y token de 24 letras.

    Raises:
        ValueError: Si la fuente aleatoria no devuelve 12 bytes.

    """

    nonce = bytes(rng(NONCE_SIZE))
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"la fuente aleatoria debe devolver {NONCE_SIZE} bytes")
    return GeneratedNonce(nonce=nonce, token=encode_ascii(nonce))


def select_nonce_mode(
    *, null: bool = False, generate: bool = False, token: Optional[str] = None
) -> NonceChoice:
    """Construye la selección de nonce exigiendo exactamente una política.

    Args:
        null (bool): Usar el nonce nulo.
        generate (bool): Generar un nonce aleatorio.
        token (Optional[str]): Token ASCII especificado por el operador.

    Returns:
        NonceChoice: Variante etiquetada con la política elegida.

    Raises:
        AmbiguousNonceModeError: Si no se elige ninguna o se elige más de una.

    """

    selected = [null, generate, token is not None]
    if sum(selected) != 1:
        raise AmbiguousNonceModeError()
    if null:
        return NonceChoice(mode=NonceMode.NULL)
    if generate:
        return NonceChoice(mode=NonceMode.GENERATE)
    return NonceChoice(mode=NonceMode.SPECIFIED, token=token)


def resolve_nonce(
    choice: NonceChoice, *, for_decrypt: bool, rng: RandomSource = os.urandom
) -> ResolvedNonce:
    """Convierte la política elegida en los bytes de nonce a utilizar.

    Args:
        choice (NonceChoice): Política seleccionada por el operador.
        for_decrypt (bool): ``True`` en el camino de descifrado.
        rng (RandomSource): Fuente aleatoria para el modo generado.

    Returns:
        ResolvedNonce: Nonce listo para el motor AEAD y, si se generó, su token.

    Raises:
        GenerateNotSupportedOnDecryptError: Si se pide generar al descifrar.
        InvalidNonceEncodingError: Si el token especificado no es válido.

    """

    logger.debug("Resolviendo nonce en modo %s", choice.mode.value)
    if choice.mode is NonceMode.NULL:
        logger.warning("Se usa el nonce nulo; reutilizarlo con la misma clave es inseguro")
        return ResolvedNonce(mode=choice.mode, nonce=zero_nonce())

    if choice.mode is NonceMode.GENERATE:
        if for_decrypt:
            raise GenerateNotSupportedOnDecryptError()
        generated = generate_nonce(rng)
        return ResolvedNonce(mode=choice.mode, nonce=generated.nonce, token=generated.token)

    return ResolvedNonce(mode=choice.mode, nonce=decode_ascii(choice.token or ""))

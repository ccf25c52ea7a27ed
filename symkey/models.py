# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan mensajes sellados y selección de nonce."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from symkey.errors import CorruptArtifactError

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16


class SealedMessage(BaseModel):
    """Representa el resultado de una operación de sellado AEAD.

    Attributes:
        ciphertext (bytes): Datos cifrados sin etiqueta, de igual longitud que
            el texto en claro.
        tag (bytes): Etiqueta Poly1305 de 128 bits.

    """

    model_config = ConfigDict(frozen=True, strict=True)

    ciphertext: bytes
    tag: bytes

    @field_validator("tag")
    @classmethod
    def check_tag_size(cls, value: bytes) -> bytes:
        if len(value) != TAG_SIZE:
            raise ValueError(f"la etiqueta debe medir {TAG_SIZE} bytes")
        return value

    def to_bytes(self) -> bytes:
        """Serializa el mensaje como ``ciphertext || tag``."""

        return self.ciphertext + self.tag

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SealedMessage":
        """Reconstruye un mensaje sellado a partir de su forma persistida.

        Args:
            raw (bytes): Contenido ``ciphertext || tag`` leído del almacén.

        Returns:
            SealedMessage: Mensaje con el ciphertext y la etiqueta separados.

        Raises:
            CorruptArtifactError: Si los datos no alcanzan a contener la etiqueta.

        """

        if len(raw) < TAG_SIZE:
            raise CorruptArtifactError()
        return cls(ciphertext=raw[:-TAG_SIZE], tag=raw[-TAG_SIZE:])


class NonceMode(str, Enum):
    """Procedencia del nonce utilizado en una invocación."""

    NULL = "null"
    GENERATE = "generate"
    SPECIFIED = "specified"


class NonceChoice(BaseModel):
    """Variante etiquetada con la política de nonce elegida por el operador.

    Attributes:
        mode (NonceMode): Política seleccionada.
        token (Optional[str]): Token ASCII, solo presente en modo especificado.

    """

    model_config = ConfigDict(frozen=True)

    mode: NonceMode
    token: Optional[str] = None

    @model_validator(mode="after")
    def token_matches_mode(self) -> "NonceChoice":
        if (self.mode is NonceMode.SPECIFIED) != (self.token is not None):
            raise ValueError("el token solo acompaña al modo especificado")
        return self


class GeneratedNonce(BaseModel):
    """Nonce aleatorio junto a su token transcribible."""

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    token: str


class ResolvedNonce(BaseModel):
    """Bytes de nonce listos para el motor AEAD.

    Attributes:
        mode (NonceMode): Política de la que procede el nonce.
        nonce (bytes): Valor de 96 bits.
        token (Optional[str]): Token a mostrar al operador cuando se generó.

    """

    model_config = ConfigDict(frozen=True)

    mode: NonceMode
    nonce: bytes
    token: Optional[str] = None

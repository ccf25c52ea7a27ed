# --------------------------------------------------------------
# File: storage.py
# Description: Persistencia de un único mensaje sellado en disco.
# --------------------------------------------------------------
"""Funciones de entrada/salida para el almacén de mensajes cifrados.

El almacén tiene una sola ranura: cada guardado reemplaza el artefacto previo.
El formato es ``ciphertext || tag`` sin cabecera ni versión.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile

from symkey.errors import ArtifactIOError, ArtifactNotFoundError
from symkey.models import SealedMessage

__all__ = ["load_artifact", "save_artifact"]

logger = logging.getLogger(__name__)


def _ensure_parent_dir(path: str) -> str:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    return parent


def save_artifact(sealed: SealedMessage, path: str) -> None:
    """Guarda el mensaje sellado aplicando escritura atómica.

    Se escribe en un archivo temporal único del mismo directorio y después se
    mueve sobre el destino, de modo que una lectura concurrente observa el
    artefacto anterior o el nuevo, nunca uno a medias.

    Args:
        sealed (SealedMessage): Mensaje a persistir.
        path (str): Ubicación del artefacto.

    Raises:
        ArtifactIOError: Si el sistema operativo rechaza la escritura.

    """

    tmp_path = None
    try:
        parent = _ensure_parent_dir(path)
        fd, tmp_path = tempfile.mkstemp(
            dir=parent, prefix=f".{os.path.basename(path)}.", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as handler:
            handler.write(sealed.to_bytes())
            handler.flush()
            os.fsync(handler.fileno())
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            with contextlib.suppress(OSError):
                os.remove(tmp_path)
        logger.debug("No se pudo guardar el artefacto en %s: %s", path, exc.strerror)
        raise ArtifactIOError() from exc
    logger.info("Artefacto guardado en %s", path)


def load_artifact(path: str) -> SealedMessage:
    """Carga el mensaje sellado almacenado en ``path``.

    Args:
        path (str): Ubicación del artefacto.

    Returns:
        SealedMessage: Ciphertext y etiqueta leídos del disco.

    Raises:
        ArtifactNotFoundError: Si no existe ningún artefacto.
        CorruptArtifactError: Si el artefacto es demasiado corto.
        ArtifactIOError: Ante cualquier otro error de lectura.

    """

    try:
        with open(path, "rb") as handler:
            raw = handler.read()
    except FileNotFoundError:
        raise ArtifactNotFoundError() from None
    except OSError as exc:
        logger.debug("No se pudo leer el artefacto %s: %s", path, exc.strerror)
        raise ArtifactIOError() from exc

    logger.info("Artefacto cargado desde %s (%d bytes)", path, len(raw))
    return SealedMessage.from_bytes(raw)

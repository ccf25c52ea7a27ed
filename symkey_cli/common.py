# --------------------------------------------------------------
# File: common.py
# Description: Opciones compartidas y traducción de errores a códigos de salida.
# --------------------------------------------------------------
"""Utilidades comunes a `symkey-encrypt` y `symkey-decrypt`."""

import argparse
import logging
import sys
from typing import Callable

from symkey import config
from symkey.errors import SymkeyError
from symkey.models import NonceChoice
from symkey.nonce import select_nonce_mode

LOG_FORMAT = "%(asctime)s %(levelname)s [symkey] %(message)s"


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Registra la clave, el modo de nonce y la ubicación del artefacto."""

    parser.add_argument(
        "-k", "--key", required=True, help="Passphrase compartida (menos de 32 caracteres)."
    )
    parser.add_argument(
        "--null-nonce",
        action="store_true",
        help="Usa el nonce nulo. Inseguro si se reutiliza con la misma clave.",
    )
    parser.add_argument(
        "--generate-nonce",
        action="store_true",
        help="Genera un nonce aleatorio y lo muestra (solo al cifrar).",
    )
    parser.add_argument(
        "-n", "--nonce", default=None, help="Nonce de hasta 24 letras minúsculas."
    )
    parser.add_argument(
        "-a",
        "--artifact",
        default=None,
        help=f"Ruta del mensaje cifrado (por defecto: {config.ARTIFACT_PATH}).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Muestra trazas de depuración."
    )


def configure_logging(verbose: bool) -> None:
    level = logging.getLevelName(config.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def nonce_choice_from_args(args: argparse.Namespace) -> NonceChoice:
    return select_nonce_mode(
        null=args.null_nonce, generate=args.generate_nonce, token=args.nonce
    )


def run_command(action: Callable[[], None]) -> int:
    """Ejecuta la acción y convierte los errores de la librería en un código de salida.

    Args:
        action (Callable[[], None]): Operación de la herramienta.

    Returns:
        int: ``0`` si la operación termina bien o el código asociado al error.

    """

    try:
        action()
    except SymkeyError as exc:
        # El mensaje es fijo y no contiene material secreto.
        print(f"Error [{exc.category}]: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0

# --------------------------------------------------------------
# File: encrypt.py
# Description: Herramienta de consola que cifra un mensaje y lo guarda en disco.
# --------------------------------------------------------------
"""Punto de entrada de `symkey-encrypt`."""

import argparse
import sys
from typing import List, Optional

from symkey import config
from symkey.services import encrypt_message
from symkey_cli.common import (
    add_common_arguments,
    configure_logging,
    nonce_choice_from_args,
    run_command,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symkey-encrypt",
        description="Cifra un mensaje con ChaCha20-Poly1305 y lo guarda para su descifrado.",
    )
    parser.add_argument("-m", "--message", required=True, help="Mensaje a cifrar.")
    add_common_arguments(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    def action() -> None:
        choice = nonce_choice_from_args(args)
        token = encrypt_message(args.key, args.message, choice, args.artifact)
        print(f"Mensaje cifrado y guardado en {config.get_artifact_path(args.artifact)}.")
        if token is not None:
            print(f"El nonce de este mensaje se ha generado y es: {token}")

    return run_command(action)


if __name__ == "__main__":
    sys.exit(main())

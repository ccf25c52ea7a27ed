# --------------------------------------------------------------
# File: decrypt.py
# Description: Herramienta de consola que recupera el mensaje guardado.
# --------------------------------------------------------------
"""Punto de entrada de `symkey-decrypt`."""

import argparse
import sys
from typing import List, Optional

from symkey.services import decrypt_message
from symkey_cli.common import (
    add_common_arguments,
    configure_logging,
    nonce_choice_from_args,
    run_command,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symkey-decrypt",
        description="Descifra y autentica el mensaje guardado por symkey-encrypt.",
    )
    add_common_arguments(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    def action() -> None:
        choice = nonce_choice_from_args(args)
        plaintext = decrypt_message(args.key, choice, args.artifact)
        # Los bytes no UTF-8 se muestran como U+FFFD en la terminal.
        print(plaintext.encode("utf-8", "surrogateescape").decode("utf-8", "replace"))

    return run_command(action)


if __name__ == "__main__":
    sys.exit(main())

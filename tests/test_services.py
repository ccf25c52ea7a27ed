# --------------------------------------------------------------
# File: test_services.py
# Description: Pruebas de integración de encrypt_message y decrypt_message.
# --------------------------------------------------------------

import logging
import os

import pytest

from symkey.errors import (
    ArtifactNotFoundError,
    AuthenticationFailedError,
    GenerateNotSupportedOnDecryptError,
    KeyTooLongError,
)
from symkey.nonce import encode_ascii, select_nonce_mode
from symkey.services import decrypt_message, encrypt_message


def test_scenario_generated_nonce(artifact_path):
    """Valida el escenario completo con nonce generado.

    Args:
        artifact_path (str): Ruta configurada por el fixture de aislamiento.

    Returns:
        None: Las aserciones verifican artefacto, token y descifrado.
    """
    token = encrypt_message(
        "my-key-is-cool", "what is this message", select_nonce_mode(generate=True)
    )
    assert token is not None and len(token) == 24
    assert os.path.getsize(artifact_path) == len("what is this message") + 16

    plaintext = decrypt_message("my-key-is-cool", select_nonce_mode(token=token))
    assert plaintext == "what is this message"

    with pytest.raises(AuthenticationFailedError):
        decrypt_message("my-key-is-not-cool", select_nonce_mode(token=token))


def test_scenario_null_nonce_is_linkable(tmp_path):
    """Documenta que el nonce nulo produce artefactos válidos pero vinculables.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        None: Los artefactos difieren pero su XOR revela el de los textos en claro.
    """
    first, second = str(tmp_path / "a.bin"), str(tmp_path / "b.bin")
    null = select_nonce_mode(null=True)
    assert encrypt_message("baz", "attack at dawn", null, first) is None
    assert encrypt_message("baz", "attack at dusk", null, second) is None

    with open(first, "rb") as handler:
        raw_first = handler.read()
    with open(second, "rb") as handler:
        raw_second = handler.read()
    assert raw_first != raw_second

    # Mismo flujo de clave: el XOR de los ciphertexts es el XOR de los mensajes.
    xor_ct = bytes(a ^ b for a, b in zip(raw_first[:-16], raw_second[:-16]))
    xor_pt = bytes(a ^ b for a, b in zip(b"attack at dawn", b"attack at dusk"))
    assert xor_ct == xor_pt

    assert decrypt_message("baz", null, first) == "attack at dawn"
    assert decrypt_message("baz", null, second) == "attack at dusk"


@pytest.mark.parametrize("mode", ["null", "generate", "specified"])
def test_roundtrip_every_policy(mode, seeded_rng, tmp_path):
    """Comprueba el ciclo completo para cada política de nonce.

    Args:
        mode (str): Política parametrizada.
        seeded_rng (Callable[[int], bytes]): Fuente determinista del conftest.
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        None: El texto recuperado coincide con el original.
    """
    location = str(tmp_path / "slot.bin")
    message = "ñandú y 🔐"
    if mode == "null":
        choice = decrypt_choice = select_nonce_mode(null=True)
    elif mode == "generate":
        choice = select_nonce_mode(generate=True)
        decrypt_choice = select_nonce_mode(token=encode_ascii(seeded_rng(12)))
    else:
        choice = decrypt_choice = select_nonce_mode(token="operatorchosen")

    encrypt_message("x" * 31, message, choice, location, rng=seeded_rng)
    assert decrypt_message("x" * 31, decrypt_choice, location) == message


def test_wrong_nonce_fails(tmp_path):
    location = str(tmp_path / "slot.bin")
    encrypt_message("baz", "foobar", select_nonce_mode(token="abc"), location)
    with pytest.raises(AuthenticationFailedError):
        decrypt_message("baz", select_nonce_mode(token="abd"), location)
    with pytest.raises(AuthenticationFailedError):
        decrypt_message("baz", select_nonce_mode(null=True), location)


def test_decrypt_rejects_generate_mode():
    with pytest.raises(GenerateNotSupportedOnDecryptError):
        decrypt_message("baz", select_nonce_mode(generate=True))


def test_decrypt_without_artifact():
    with pytest.raises(ArtifactNotFoundError):
        decrypt_message("baz", select_nonce_mode(null=True))


def test_long_key_writes_nothing(artifact_path):
    with pytest.raises(KeyTooLongError):
        encrypt_message("k" * 32, "foobar", select_nonce_mode(null=True))
    assert not os.path.exists(artifact_path)


def test_non_utf8_message_roundtrip(tmp_path):
    location = str(tmp_path / "slot.bin")
    null = select_nonce_mode(null=True)
    encrypt_message("clave\udcff", "hola\udcff", null, location)
    with open(location, "rb") as handler:
        assert len(handler.read()) == len(b"hola\xff") + 16
    assert decrypt_message("clave\udcff", null, location) == "hola\udcff"


def test_logs_never_contain_secrets(caplog, seeded_rng):
    """Garantiza que las trazas no incluyan passphrase, token ni texto en claro.

    Args:
        caplog (pytest.LogCaptureFixture): Captura de los registros emitidos.
        seeded_rng (Callable[[int], bytes]): Fuente determinista del conftest.

    Returns:
        None: Ningún registro DEBUG o superior contiene material secreto.
    """
    caplog.set_level(logging.DEBUG)
    passphrase = "clave-muy-secreta"
    message = "mensaje confidencial"

    token = encrypt_message(
        passphrase, message, select_nonce_mode(generate=True), rng=seeded_rng
    )
    assert decrypt_message(passphrase, select_nonce_mode(token=token)) == message

    symkey_records = [r for r in caplog.records if r.name.startswith("symkey")]
    assert symkey_records
    for record in symkey_records:
        text = record.getMessage()
        for secret in (passphrase, token, message):
            assert secret not in text

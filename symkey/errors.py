# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores terminales de la librería symkey.
# --------------------------------------------------------------
"""Excepciones que la librería propaga a las herramientas de línea de comandos.

Los mensajes son fijos y nunca incluyen material secreto (clave, nonce o texto
en claro), de modo que pueden mostrarse tal cual al operador.
"""

EXIT_FAILURE = 1
EXIT_USAGE = 2


class SymkeyError(Exception):
    """Error base de todas las operaciones de la librería."""

    category = "Error"
    exit_code = EXIT_FAILURE
    default_message = "Error inesperado."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)


class KeyTooLongError(SymkeyError):
    """La passphrase no cabe en una clave de 32 bytes."""

    category = "KeyTooLong"
    exit_code = EXIT_USAGE
    default_message = "La clave debe tener menos de 32 caracteres."


class AmbiguousNonceModeError(SymkeyError):
    """No se eligió exactamente un modo de nonce."""

    category = "AmbiguousNonceMode"
    exit_code = EXIT_USAGE
    default_message = (
        "Debe elegirse exactamente un modo de nonce: nulo, generado o especificado."
    )


class GenerateNotSupportedOnDecryptError(SymkeyError):
    """Se pidió generar un nonce al descifrar."""

    category = "GenerateNotSupportedOnDecrypt"
    exit_code = EXIT_USAGE
    default_message = "No se puede generar un nonce al descifrar; indique el nonce usado."


class InvalidNonceEncodingError(SymkeyError):
    """El token ASCII del nonce no es válido."""

    category = "InvalidNonceEncoding"
    exit_code = EXIT_USAGE
    default_message = "El nonce debe tener entre 1 y 24 letras minúsculas (a-z)."


class AuthenticationFailedError(SymkeyError):
    """La etiqueta de autenticación no verifica.

    Agrupa clave incorrecta, nonce incorrecto y datos manipulados; los tres
    casos son indistinguibles a propósito.
    """

    category = "AuthenticationFailed"
    default_message = "No se ha podido autenticar el mensaje cifrado."


class ArtifactNotFoundError(SymkeyError):
    category = "NotFound"
    default_message = "No existe ningún mensaje cifrado en la ubicación indicada."


class CorruptArtifactError(SymkeyError):
    category = "CorruptArtifact"
    default_message = "El mensaje cifrado almacenado está truncado o dañado."


class ArtifactIOError(SymkeyError):
    category = "IOError"
    default_message = "Error de entrada/salida accediendo al mensaje cifrado."

# --------------------------------------------------------------
# File: commands.py
# Description: Superficie de comandos que el anfitrión invoca sobre el núcleo criptográfico.
# --------------------------------------------------------------
"""Comandos expuestos a la interfaz.

Cada comando devuelve un `CommandResult`: nunca propaga una excepción por
una entrada incorrecta. Los errores del núcleo se transforman en un error
estructurado con su categoría (`validation`, `encoding` o `crypto`).
"""

from typing import Any, Callable, Optional

from api import config
from api.logger import get_logger
from core import crypto_asym, crypto_sign, crypto_sym
from core.errors import CryptoDesktopError, ValidationError
from core.models import CommandResult

logger = get_logger("crypto_desktop.commands")


def _run(command: str, operation: Callable[[], Any]) -> CommandResult:
    """Ejecuta una operación del núcleo y traduce su resultado.

    Args:
        command (str): Nombre del comando, usado solo para el registro.
        operation (Callable[[], Any]): Operación sin argumentos a ejecutar.

    Returns:
        CommandResult: Valor devuelto o error estructurado.

    """

    try:
        value = operation()
    except CryptoDesktopError as exc:
        logger.warning("command=%s outcome=error kind=%s", command, exc.kind)
        return CommandResult.failure(exc)
    logger.info("command=%s outcome=ok", command)
    return CommandResult.success(value)


def ping() -> CommandResult:
    """Sonda de vida sin criptografía; el valor es siempre ``"pong"``."""

    return CommandResult.success("pong")


def aes_encrypt(plaintext: str, key: str, nonce: str) -> CommandResult:
    """Cifra con AES-256-GCM; la clave (32) y el nonce (12) son bytes literales del texto.

    El nonce no debe repetirse nunca con la misma clave.
    """

    return _run("aes_encrypt", lambda: crypto_sym.aes_gcm_encrypt(plaintext, key, nonce))


def aes_decrypt(ciphertext_b64: str, key: str, nonce: str) -> CommandResult:
    """Descifra un cifrado AES-256-GCM en Base64."""

    return _run("aes_decrypt", lambda: crypto_sym.aes_gcm_decrypt(ciphertext_b64, key, nonce))


def _checked_bits(bits: Any) -> int:
    if not isinstance(bits, int) or isinstance(bits, bool):
        raise ValidationError("El tamaño de clave RSA debe ser un número entero de bits.")
    if bits > config.RSA_MAX_BITS:
        raise ValidationError(
            f"El tamaño de clave RSA no puede superar {config.RSA_MAX_BITS} bits."
        )
    return bits


def rsa_generate_keypair(bits: Optional[int] = None) -> CommandResult:
    """Genera un par RSA; por defecto usa `RSA_DEFAULT_BITS`.

    Args:
        bits (Optional[int]): Tamaño del módulo en bits.

    Returns:
        CommandResult: `KeyPair` con las claves DER en Base64 o error.

    """

    if bits is None:
        bits = config.RSA_DEFAULT_BITS
    return _run("rsa_generate_keypair", lambda: crypto_asym.rsa_generate_keypair(_checked_bits(bits)))


def rsa_encrypt(plaintext: str, public_key_b64: str) -> CommandResult:
    return _run("rsa_encrypt", lambda: crypto_asym.rsa_encrypt(plaintext, public_key_b64))


def rsa_decrypt(ciphertext_b64: str, private_key_b64: str) -> CommandResult:
    return _run("rsa_decrypt", lambda: crypto_asym.rsa_decrypt(ciphertext_b64, private_key_b64))


def ed25519_generate_keypair() -> CommandResult:
    return _run("ed25519_generate_keypair", crypto_sign.ed25519_generate_keypair)


def ed25519_sign(message: str, private_key_b64: str) -> CommandResult:
    return _run("ed25519_sign", lambda: crypto_sign.ed25519_sign(message, private_key_b64))


def ed25519_verify(message: str, signature_b64: str, public_key_b64: str) -> CommandResult:
    """Verifica una firma; una firma inválida es `value=False`, no un error."""

    return _run(
        "ed25519_verify",
        lambda: crypto_sign.ed25519_verify(message, signature_b64, public_key_b64),
    )

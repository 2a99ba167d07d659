# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Cifrado autenticado AES-256-GCM con clave y nonce aportados por el llamante.

El núcleo no recuerda nonces usados: reutilizar un nonce con la misma clave
rompe la confidencialidad y la integridad de GCM, y evitarlo es
responsabilidad de quien invoca estas funciones.
"""

from __future__ import annotations

from typing import Tuple, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from core.encoding import as_bytes, b64d, b64e, bytes_to_text, check_length, text_to_bytes
from core.errors import CryptoOperationError

AES_KEY_SIZE = 32
AES_NONCE_SIZE = 12
AES_TAG_SIZE = 16


def _key_and_nonce(key: Union[str, bytes], nonce: Union[str, bytes]) -> Tuple[bytes, bytes]:
    """Valida longitudes exactas antes de tocar la librería."""

    key_bytes = as_bytes(key, field="La clave")
    check_length(key_bytes, AES_KEY_SIZE, field="La clave AES-256-GCM")
    nonce_bytes = as_bytes(nonce, field="El nonce")
    check_length(nonce_bytes, AES_NONCE_SIZE, field="El nonce AES-GCM")
    return key_bytes, nonce_bytes


def aes_gcm_encrypt(plaintext: str, key: Union[str, bytes], nonce: Union[str, bytes]) -> str:
    """Cifra texto con AES-256-GCM sin datos asociados.

    Args:
        plaintext (str): Texto en claro; se cifran sus bytes UTF-8.
        key (Union[str, bytes]): Clave de 32 bytes (texto literal o binaria).
        nonce (Union[str, bytes]): Nonce de 12 bytes, único por clave.

    Returns:
        str: Cifrado y etiqueta de 128 bits concatenados, en Base64.

    Raises:
        ValidationError: Si la clave o el nonce no tienen la longitud exacta.
        CryptoOperationError: Si la librería falla al sellar los datos.

    """

    key_bytes, nonce_bytes = _key_and_nonce(key, nonce)
    data = text_to_bytes(plaintext, field="El texto en claro")
    try:
        sealed = AESGCM(key_bytes).encrypt(nonce_bytes, data, None)
    except (ValueError, OverflowError) as exc:
        raise CryptoOperationError("El cifrado AES-GCM ha fallado.") from exc
    return b64e(sealed)


def aes_gcm_decrypt(ciphertext_b64: str, key: Union[str, bytes], nonce: Union[str, bytes]) -> str:
    """Descifra y autentica un cifrado AES-256-GCM.

    Args:
        ciphertext_b64 (str): Cifrado con etiqueta, en Base64.
        key (Union[str, bytes]): Clave de 32 bytes usada al cifrar.
        nonce (Union[str, bytes]): Nonce de 12 bytes usado al cifrar.

    Returns:
        str: Texto original.

    Raises:
        ValidationError: Si la clave o el nonce no tienen la longitud exacta.
        EncodingError: Si el Base64 es inválido o el resultado no es UTF-8.
        CryptoOperationError: Si la autenticación falla, sin más detalle.

    """

    key_bytes, nonce_bytes = _key_and_nonce(key, nonce)
    ciphertext = b64d(ciphertext_b64, field="El cifrado")
    try:
        plaintext = AESGCM(key_bytes).decrypt(nonce_bytes, ciphertext, None)
    except (InvalidTag, ValueError, OverflowError) as exc:
        raise CryptoOperationError("El descifrado ha fallado.") from exc
    return bytes_to_text(plaintext)

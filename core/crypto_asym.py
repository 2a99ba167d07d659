# --------------------------------------------------------------
# File: crypto_asym.py
# Description: Generación de claves RSA y cifrado asimétrico con OAEP-SHA256.
# --------------------------------------------------------------
"""Cifrado RSA-OAEP con claves serializadas en DER y codificadas en Base64."""

from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from core.encoding import b64d, b64e, bytes_to_text, text_to_bytes
from core.errors import CryptoOperationError, ValidationError
from core.models import KeyPair

RSA_PUBLIC_EXPONENT = 65537
# Tamaño mínimo que acepta la librería; para uso real se recomienda >= 2048.
RSA_LIBRARY_MIN_BITS = 1024
_OAEP_HASH_SIZE = hashes.SHA256.digest_size


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def oaep_max_plaintext(public_key: rsa.RSAPublicKey) -> int:
    """Máximo de bytes cifrables con OAEP-SHA256 para el módulo de la clave."""

    modulus_bytes = (public_key.key_size + 7) // 8
    return max(0, modulus_bytes - 2 * _OAEP_HASH_SIZE - 2)


def _load_public_key(public_key_b64: str) -> rsa.RSAPublicKey:
    der = b64d(public_key_b64, field="La clave pública")
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise ValidationError("La clave pública no es una clave DER válida.") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValidationError("La clave pública no es una clave RSA.")
    if (key.key_size + 7) // 8 < 2 * _OAEP_HASH_SIZE + 2:
        raise ValidationError(
            f"La clave RSA de {key.key_size} bits es demasiado pequeña para OAEP-SHA256."
        )
    return key


def _load_private_key(private_key_b64: str) -> rsa.RSAPrivateKey:
    der = b64d(private_key_b64, field="La clave privada")
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise ValidationError("La clave privada no es una clave DER válida.") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValidationError("La clave privada no es una clave RSA.")
    return key


def rsa_generate_keypair(bits: int) -> KeyPair:
    """Genera un par RSA con exponente 65537.

    Args:
        bits (int): Tamaño del módulo. La librería exige al menos 1024 bits.

    Returns:
        KeyPair: Claves pública y privada en DER PKCS#1, codificadas en Base64.

    Raises:
        ValidationError: Si `bits` no es un entero.
        CryptoOperationError: Si el generador rechaza el tamaño o falla.

    """

    if not isinstance(bits, int) or isinstance(bits, bool):
        raise ValidationError("El tamaño de clave RSA debe ser un número entero de bits.")
    try:
        private_key = rsa.generate_private_key(public_exponent=RSA_PUBLIC_EXPONENT, key_size=bits)
    except (ValueError, OverflowError) as exc:
        raise CryptoOperationError(
            f"No se ha podido generar una clave RSA de {bits} bits "
            f"(mínimo aceptado: {RSA_LIBRARY_MIN_BITS})."
        ) from exc

    private_der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.PKCS1,
    )
    return KeyPair(public_key=b64e(public_der), private_key=b64e(private_der))


def rsa_encrypt(plaintext: str, public_key_b64: str) -> str:
    """Cifra texto con RSA-OAEP (SHA-256) usando una semilla aleatoria nueva.

    Args:
        plaintext (str): Texto en claro.
        public_key_b64 (str): Clave pública DER (PKCS#1 o SPKI) en Base64.

    Returns:
        str: Cifrado en Base64; dos llamadas idénticas producen cifrados distintos.

    Raises:
        EncodingError: Si la clave no es Base64 válido.
        ValidationError: Si la clave no es RSA o el texto excede el límite.
        CryptoOperationError: Si la librería falla al cifrar.

    """

    public_key = _load_public_key(public_key_b64)
    data = text_to_bytes(plaintext, field="El texto en claro")
    limit = oaep_max_plaintext(public_key)
    if len(data) > limit:
        raise ValidationError(
            f"El texto ocupa {len(data)} bytes; con esta clave y OAEP-SHA256 "
            f"el máximo es {limit} bytes."
        )
    try:
        ciphertext = public_key.encrypt(data, _oaep())
    except ValueError as exc:
        raise CryptoOperationError("El cifrado RSA ha fallado.") from exc
    return b64e(ciphertext)


def rsa_decrypt(ciphertext_b64: str, private_key_b64: str) -> str:
    """Descifra un cifrado RSA-OAEP (SHA-256).

    Raises:
        EncodingError: Si el Base64 es inválido o el resultado no es UTF-8.
        ValidationError: Si la clave privada no es una clave RSA utilizable.
        CryptoOperationError: Si el relleno OAEP no se valida, sin más detalle.

    """

    private_key = _load_private_key(private_key_b64)
    ciphertext = b64d(ciphertext_b64, field="El cifrado")
    try:
        plaintext = private_key.decrypt(ciphertext, _oaep())
    except ValueError as exc:
        raise CryptoOperationError("El descifrado ha fallado.") from exc
    return bytes_to_text(plaintext)

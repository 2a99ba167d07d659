# --------------------------------------------------------------
# File: test_crypto_asym.py
# Description: Pruebas de generación de claves RSA y cifrado OAEP-SHA256.
# --------------------------------------------------------------

import base64

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, padding, rsa

from core.crypto_asym import (
    oaep_max_plaintext,
    rsa_decrypt,
    rsa_encrypt,
    rsa_generate_keypair,
)
from core.errors import CryptoOperationError, EncodingError, ValidationError


def _load_public(keypair):
    """Carga la clave pública DER del par generado.

    Args:
        keypair (KeyPair): Par devuelto por `rsa_generate_keypair`.

    Returns:
        RSAPublicKey: Objeto de clave de la librería.
    """
    return serialization.load_der_public_key(base64.b64decode(keypair.public_key))


def test_keypair_is_pkcs1_der(rsa_keypair):
    """Ambas mitades son DER PKCS#1 de un módulo de 2048 bits."""
    public_key = _load_public(rsa_keypair)
    assert public_key.key_size == 2048
    der = base64.b64decode(rsa_keypair.public_key)
    assert der == public_key.public_bytes(
        serialization.Encoding.DER, serialization.PublicFormat.PKCS1
    )
    private_key = serialization.load_der_private_key(
        base64.b64decode(rsa_keypair.private_key), password=None
    )
    assert private_key.key_size == 2048


def test_rsa_roundtrip_ok(rsa_keypair):
    """El descifrado recupera el texto original.

    Returns:
        None: Las aserciones comparan claro y descifrado.
    """
    ct = rsa_encrypt("hola RSA ñ", rsa_keypair.public_key)
    assert rsa_decrypt(ct, rsa_keypair.private_key) == "hola RSA ñ"


def test_rsa_encryption_is_randomized(rsa_keypair):
    """Dos cifrados del mismo texto difieren gracias a OAEP."""
    first = rsa_encrypt("mismo texto", rsa_keypair.public_key)
    second = rsa_encrypt("mismo texto", rsa_keypair.public_key)
    assert first != second


def test_rsa_plaintext_limit(rsa_keypair):
    """El máximo para 2048 bits con OAEP-SHA256 es 190 bytes."""
    limit = oaep_max_plaintext(_load_public(rsa_keypair))
    assert limit == 190
    ct = rsa_encrypt("a" * limit, rsa_keypair.public_key)
    assert rsa_decrypt(ct, rsa_keypair.private_key) == "a" * limit
    with pytest.raises(ValidationError, match="190"):
        rsa_encrypt("a" * (limit + 1), rsa_keypair.public_key)


def test_rsa_accepts_spki_public_key(rsa_keypair):
    """También se admite la clave pública en SubjectPublicKeyInfo."""
    spki = _load_public(rsa_keypair).public_bytes(
        serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo
    )
    ct = rsa_encrypt("spki", base64.b64encode(spki).decode("ascii"))
    assert rsa_decrypt(ct, rsa_keypair.private_key) == "spki"


def test_rsa_rejects_malformed_base64_key():
    with pytest.raises(EncodingError):
        rsa_encrypt("hola", "esto no es base64")


def test_rsa_rejects_garbage_der():
    """Base64 correcto pero DER inválido es un error de validación."""
    garbage = base64.b64encode(b"\x30\x03\x02\x01\x05").decode("ascii")
    with pytest.raises(ValidationError):
        rsa_encrypt("hola", garbage)
    with pytest.raises(ValidationError):
        rsa_decrypt("AAAA", garbage)


def test_rsa_rejects_non_rsa_key():
    """Una clave Ed25519 en SPKI no sirve para RSA."""
    spki = ed25519.Ed25519PrivateKey.generate().public_key().public_bytes(
        serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo
    )
    with pytest.raises(ValidationError, match="RSA"):
        rsa_encrypt("hola", base64.b64encode(spki).decode("ascii"))


def test_rsa_decrypt_tampered_fails_without_detail(rsa_keypair):
    """Un cifrado manipulado falla con un mensaje genérico."""
    raw = bytearray(base64.b64decode(rsa_encrypt("hola", rsa_keypair.public_key)))
    raw[-1] ^= 1
    tampered = base64.b64encode(bytes(raw)).decode("ascii")
    with pytest.raises(CryptoOperationError) as excinfo:
        rsa_decrypt(tampered, rsa_keypair.private_key)
    assert excinfo.value.message == "El descifrado ha fallado."


def test_rsa_decrypt_with_other_key_fails(rsa_keypair):
    other = rsa_generate_keypair(1024)
    ct = rsa_encrypt("hola", other.public_key)
    with pytest.raises(CryptoOperationError):
        rsa_decrypt(ct, rsa_keypair.private_key)


def test_rsa_decrypt_malformed_ciphertext(rsa_keypair):
    with pytest.raises(EncodingError):
        rsa_decrypt("###", rsa_keypair.private_key)


def test_rsa_generate_rejects_tiny_modulus():
    """El generador rechaza tamaños por debajo de su mínimo."""
    with pytest.raises(CryptoOperationError):
        rsa_generate_keypair(256)


@pytest.mark.parametrize("bits", ["2048", 2048.0, True, None])
def test_rsa_generate_rejects_non_integer_bits(bits):
    with pytest.raises(ValidationError):
        rsa_generate_keypair(bits)


def _reserialize_private(keypair, encryption):
    """Vuelve a serializar la clave privada generada como DER PKCS#8.

    Args:
        keypair (KeyPair): Par devuelto por `rsa_generate_keypair`.
        encryption (KeySerializationEncryption): Cifrado a aplicar a la clave.

    Returns:
        str: Clave privada PKCS#8 en Base64.
    """
    private_key = serialization.load_der_private_key(
        base64.b64decode(keypair.private_key), password=None
    )
    der = private_key.private_bytes(
        serialization.Encoding.DER, serialization.PrivateFormat.PKCS8, encryption
    )
    return base64.b64encode(der).decode("ascii")


def test_rsa_decrypt_accepts_pkcs8_private_key(rsa_keypair):
    """También se admite la clave privada en PKCS#8 sin cifrar."""
    pkcs8 = _reserialize_private(rsa_keypair, serialization.NoEncryption())
    ct = rsa_encrypt("pkcs8", rsa_keypair.public_key)
    assert rsa_decrypt(ct, pkcs8) == "pkcs8"


def test_rsa_decrypt_rejects_password_protected_key(rsa_keypair):
    """Una clave privada protegida con contraseña no es utilizable."""
    protected = _reserialize_private(
        rsa_keypair, serialization.BestAvailableEncryption(b"contrasena")
    )
    ct = rsa_encrypt("hola", rsa_keypair.public_key)
    with pytest.raises(ValidationError):
        rsa_decrypt(ct, protected)


def test_rsa_decrypt_rejects_non_utf8_plaintext(rsa_keypair):
    """Un descifrado correcto que no es UTF-8 es un error de codificación."""
    raw = _load_public(rsa_keypair).encrypt(
        b"\xff\xfe",
        padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        ),
    )
    with pytest.raises(EncodingError):
        rsa_decrypt(base64.b64encode(raw).decode("ascii"), rsa_keypair.private_key)


def test_rsa_rejects_key_too_small_for_oaep():
    """Un módulo de 512 bits no admite OAEP-SHA256 y nunca da un límite negativo."""
    small = rsa.RSAPublicNumbers(65537, (1 << 511) | 1).public_key()
    assert oaep_max_plaintext(small) == 0
    der = small.public_bytes(serialization.Encoding.DER, serialization.PublicFormat.PKCS1)
    with pytest.raises(ValidationError, match="demasiado pequeña"):
        rsa_encrypt("", base64.b64encode(der).decode("ascii"))

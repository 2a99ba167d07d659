# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Funciones para gestionar claves y firmas Ed25519.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación y validación Ed25519.

Las claves viajan en formato crudo: semilla privada de 32 bytes y punto
público comprimido de 32 bytes, ambos en Base64.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from core.encoding import b64d, b64e, check_length, text_to_bytes
from core.errors import ValidationError
from core.models import KeyPair

ED25519_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

# Parámetros de Edwards25519 (RFC 8032, sección 5.1).
_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


def is_valid_point(encoded: bytes) -> bool:
    """Comprueba que 32 bytes decodifican a un punto de Edwards25519.

    Sigue la decodificación de RFC 8032 §5.1.3: `y` canónico, existencia de
    la raíz cuadrada para `x` y rechazo de `x = 0` con bit de signo activo.

    Args:
        encoded (bytes): Punto comprimido en little-endian.

    Returns:
        bool: ``True`` si el punto está en la curva.

    """

    if len(encoded) != ED25519_KEY_SIZE:
        return False
    y = int.from_bytes(encoded, "little")
    sign = y >> 255
    y &= (1 << 255) - 1
    if y >= _P:
        return False

    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x = (u * pow(v, 3, _P) * pow(u * pow(v, 7, _P), (_P - 5) // 8, _P)) % _P
    vx2 = (v * x * x) % _P
    if vx2 == u:
        pass
    elif vx2 == (-u) % _P:
        x = (x * _SQRT_M1) % _P
    else:
        return False
    return not (x == 0 and sign == 1)


def ed25519_generate_keypair() -> KeyPair:
    """Genera un par de claves Ed25519 con el generador seguro de la librería.

    Returns:
        KeyPair: Clave pública y semilla privada crudas en Base64.

    """

    private_key = ed25519.Ed25519PrivateKey.generate()
    public_key = private_key.public_key()
    return KeyPair(
        public_key=b64e(public_key.public_bytes_raw()),
        private_key=b64e(private_key.private_bytes_raw()),
    )


def ed25519_sign(message: str, private_key_b64: str) -> str:
    """Firma un mensaje con la clave privada Ed25519 proporcionada.

    La firma es determinista: el mismo mensaje y la misma clave producen
    siempre la misma firma.

    Args:
        message (str): Mensaje que se firmará (bytes UTF-8).
        private_key_b64 (str): Semilla privada de 32 bytes en Base64.

    Returns:
        str: Firma Ed25519 de 64 bytes en Base64.

    """

    seed = b64d(private_key_b64, field="La clave privada")
    check_length(seed, ED25519_KEY_SIZE, field="La clave privada Ed25519")
    data = text_to_bytes(message, field="El mensaje")
    key = ed25519.Ed25519PrivateKey.from_private_bytes(seed)
    return b64e(key.sign(data))


def ed25519_verify(message: str, signature_b64: str, public_key_b64: str) -> bool:
    """Verifica una firma Ed25519.

    Args:
        message (str): Mensaje original firmado.
        signature_b64 (str): Firma de 64 bytes en Base64.
        public_key_b64 (str): Clave pública de 32 bytes en Base64.

    Returns:
        bool: ``True`` si la firma es válida; ``False`` en caso contrario.

    Raises:
        EncodingError: Si la clave o la firma no son Base64 válido.
        ValidationError: Si las longitudes son incorrectas o la clave pública
            no es un punto de la curva.

    """

    public_raw = b64d(public_key_b64, field="La clave pública")
    check_length(public_raw, ED25519_KEY_SIZE, field="La clave pública Ed25519")
    signature = b64d(signature_b64, field="La firma")
    check_length(signature, ED25519_SIGNATURE_SIZE, field="La firma Ed25519")
    if not is_valid_point(public_raw):
        raise ValidationError("La clave pública Ed25519 no es un punto válido de la curva.")
    data = text_to_bytes(message, field="El mensaje")

    try:
        public_key = ed25519.Ed25519PublicKey.from_public_bytes(public_raw)
    except ValueError as exc:
        raise ValidationError("La clave pública Ed25519 no es válida.") from exc
    try:
        public_key.verify(signature, data)
    except InvalidSignature:
        return False
    return True

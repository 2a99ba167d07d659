# --------------------------------------------------------------
# File: encoding.py
# Description: Convenciones de codificación Base64 y texto compartidas por los motores.
# --------------------------------------------------------------
"""Utilidades de codificación comunes a AES, RSA y Ed25519.

Las claves y nonces de AES llegan como texto y se usan como sus bytes
literales; los cifrados, firmas y claves serializadas viajan en Base64
estándar con relleno.
"""

from __future__ import annotations

import base64
import binascii
from typing import Union

from core.errors import EncodingError, ValidationError

__all__ = ["b64e", "b64d", "as_bytes", "text_to_bytes", "bytes_to_text", "check_length"]


def b64e(data: bytes) -> str:
    """Codifica datos binarios en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def b64d(value: str, *, field: str = "valor") -> bytes:
    """Decodifica Base64 estándar de forma estricta.

    Args:
        value (str): Texto Base64; se ignoran los espacios de los extremos.
        field (str): Nombre del parámetro para el mensaje de error.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        EncodingError: Si el texto no es Base64 válido.

    """

    if not isinstance(value, str):
        raise ValidationError(f"{field} debe ser texto Base64.")
    stripped = value.strip()
    try:
        decoded = base64.b64decode(stripped, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"{field} no es Base64 válido.") from exc
    # Solo la forma canónica: relleno exacto y bits finales a cero.
    if b64e(decoded) != stripped:
        raise EncodingError(f"{field} no es Base64 válido.")
    return decoded


def text_to_bytes(value: str, *, field: str = "texto") -> bytes:
    """Convierte texto en sus bytes UTF-8."""

    if not isinstance(value, str):
        raise ValidationError(f"{field} debe ser texto.")
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"{field} contiene caracteres no representables en UTF-8.") from exc


def bytes_to_text(data: bytes) -> str:
    """Interpreta bytes descifrados como texto UTF-8.

    Raises:
        EncodingError: Si los bytes no forman UTF-8 válido.

    """

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError("El resultado descifrado no es texto UTF-8 válido.") from exc


def as_bytes(value: Union[str, bytes], *, field: str) -> bytes:
    """Obtiene el material de clave/nonce tal cual lo entrega el llamante.

    El texto se toma como sus bytes literales (no se decodifica Base64); los
    `bytes` se aceptan sin transformar para claves binarias.
    """

    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return text_to_bytes(value, field=field)


def check_length(data: bytes, expected: int, *, field: str) -> None:
    """Exige una longitud exacta en bytes."""

    if len(data) != expected:
        raise ValidationError(
            f"{field} debe tener exactamente {expected} bytes (recibidos {len(data)})."
        )

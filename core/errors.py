# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores expuesta por la capa criptográfica.
# --------------------------------------------------------------
"""Excepciones de dominio que sustituyen a los errores de las librerías.

Los motores criptográficos nunca dejan escapar excepciones de `cryptography`,
`binascii` o de decodificación de texto: las traducen a una de estas tres
categorías para que la capa de comandos pueda devolver un error estable.
"""

from __future__ import annotations

__all__ = [
    "CryptoDesktopError",
    "ValidationError",
    "EncodingError",
    "CryptoOperationError",
]


class CryptoDesktopError(Exception):
    """Error base de la capa criptográfica.

    Attributes:
        kind (str): Categoría estable que viaja hasta la interfaz.
        message (str): Mensaje descriptivo para el usuario.

    """

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CryptoDesktopError):
    """Longitud de clave/nonce incorrecta, clave inválida o texto demasiado largo."""

    kind = "validation"


class EncodingError(CryptoDesktopError):
    """Base64 mal formado o bytes que no representan texto UTF-8."""

    kind = "encoding"


class CryptoOperationError(CryptoDesktopError):
    """Fallo de la operación criptográfica en sí.

    El mensaje es deliberadamente genérico: no distingue entre etiqueta,
    clave o nonce incorrectos.
    """

    kind = "crypto"

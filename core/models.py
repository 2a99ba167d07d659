# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from core.errors import CryptoDesktopError


class KeyPair(BaseModel):
    """Par de claves efímero devuelto por la generación.

    Attributes:
        public_key (str): Clave pública codificada en Base64.
        private_key (str): Clave privada codificada en Base64.

    """

    model_config = ConfigDict(frozen=True)

    public_key: str
    private_key: str


class CommandError(BaseModel):
    """Error estructurado que la capa de comandos entrega a la interfaz."""

    model_config = ConfigDict(frozen=True)

    kind: str
    message: str


class CommandResult(BaseModel):
    """Resultado de un comando: valor en caso de éxito o error descriptivo.

    Attributes:
        ok (bool): Indica si el comando terminó correctamente.
        value (Any): Texto, booleano o `KeyPair` devuelto por el comando.
        error (Optional[CommandError]): Detalle del fallo cuando `ok` es falso.

    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Any = None
    error: Optional[CommandError] = None

    @classmethod
    def success(cls, value: Any) -> "CommandResult":
        """Construye un resultado correcto con el valor del comando."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: CryptoDesktopError) -> "CommandResult":
        """Construye un resultado fallido a partir de un error del núcleo."""
        return cls(ok=False, error=CommandError(kind=exc.kind, message=exc.message))

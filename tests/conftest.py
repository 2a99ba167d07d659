# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con material de clave para las pruebas.
# --------------------------------------------------------------

import pytest

from core.crypto_asym import rsa_generate_keypair
from core.crypto_sign import ed25519_generate_keypair
from core.models import KeyPair

AES_KEY = "01234567890123456789012345678901"
AES_NONCE = "012345678901"


@pytest.fixture(scope="session")
def rsa_keypair() -> KeyPair:
    """Genera un único par RSA de 2048 bits para toda la sesión.

    Returns:
        KeyPair: Claves DER en Base64 reutilizadas por las pruebas RSA.
    """
    return rsa_generate_keypair(2048)


@pytest.fixture
def ed_keypair() -> KeyPair:
    """Genera un par Ed25519 nuevo para cada prueba.

    Returns:
        KeyPair: Claves crudas en Base64.
    """
    return ed25519_generate_keypair()


@pytest.fixture
def aes_key() -> str:
    return AES_KEY


@pytest.fixture
def aes_nonce() -> str:
    return AES_NONCE

# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las primitivas AES-GCM del paquete gcm_core.
# --------------------------------------------------------------
"""Inicializa el paquete `gcm_core` y reexporta sus operaciones principales."""

from gcm_core.cipher_select import select_cipher
from gcm_core.crypto_sym import decrypt, encrypt
from gcm_core.errors import (
    AeadError,
    InvalidArguments,
    InvalidIvLength,
    InvalidKeyLength,
    InvalidTagLength,
)
from gcm_core.models import CipherVariant, DecryptResult, EncryptResult

__all__ = [
    "AeadError",
    "CipherVariant",
    "DecryptResult",
    "EncryptResult",
    "InvalidArguments",
    "InvalidIvLength",
    "InvalidKeyLength",
    "InvalidTagLength",
    "decrypt",
    "encrypt",
    "select_cipher",
]

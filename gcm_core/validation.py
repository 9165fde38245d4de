# --------------------------------------------------------------
# File: validation.py
# Description: Constantes y comprobaciones previas compartidas por cifrado y descifrado.
# --------------------------------------------------------------
"""Validaciones de argumentos que se ejecutan antes de crear el contexto GCM."""

from __future__ import annotations

from typing import Any, Optional

from gcm_core.errors import InvalidArguments, InvalidIvLength, InvalidTagLength

TAG_LEN = 16

# GCM admite IVs de cualquier longitud no vacía.
MIN_IV_LEN = 1

# Rango de IV aceptado por modes.GCM de cryptography; fuera de él se usa pycryptodome.
OPENSSL_MIN_IV_LEN = 8
OPENSSL_MAX_IV_LEN = 128

BUFFER_TYPES = (bytes, bytearray, memoryview)


def is_buffer(value: Any) -> bool:
    return isinstance(value, BUFFER_TYPES)


def check_buffer(name: str, value: Any) -> None:
    """Lanza InvalidArguments si `value` no es un buffer binario.

    Args:
        name (str): Nombre del argumento, usado en el mensaje de error.
        value (Any): Valor recibido del llamador.

    """

    if not is_buffer(value):
        raise InvalidArguments(f"{name} must be a bytes-like buffer, got {type(value).__name__}.")


def byte_length(value: Any) -> int:
    """Longitud en bytes de un buffer ya validado, sin copiarlo."""

    if isinstance(value, memoryview):
        return value.nbytes
    return len(value)


def require_buffer(name: str, value: Any) -> bytes:
    check_buffer(name, value)
    return bytes(value)


def optional_buffer(name: str, value: Any) -> Optional[bytes]:
    """Igual que `require_buffer`, pero acepta None como AAD ausente."""

    if value is None:
        return None
    return require_buffer(name, value)


def check_iv_length(iv_len: int) -> None:
    if iv_len < MIN_IV_LEN:
        raise InvalidIvLength(f"Invalid IV length {iv_len}. The IV must not be empty.")


def check_tag(auth_tag: bytes) -> None:
    if len(auth_tag) != TAG_LEN:
        raise InvalidTagLength(
            f"Invalid auth tag length {len(auth_tag)}. Exactly {TAG_LEN} bytes are required."
        )

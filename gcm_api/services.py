# --------------------------------------------------------------
# File: services.py
# Description: Servicios de frontera para cifrar y descifrar con AES-GCM.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que validan argumentos y devuelven diccionarios.

Replican el contrato de la frontera de llamada: `gcm_encrypt` devuelve
``{"ciphertext", "auth_tag"}`` y `gcm_decrypt` devuelve ``{"plaintext", "auth_ok"}``.
"""

import logging
from typing import Any, Dict, Optional

import cryptography
from cryptography.hazmat.backends.openssl.backend import backend as openssl_backend

from gcm_core.crypto_sym import decrypt, encrypt
from gcm_core.errors import InvalidArguments
from gcm_core.validation import is_buffer

logger = logging.getLogger(__name__)

ENCRYPT_USAGE = (
    "Not enough (or wrong) arguments specified. Required: "
    "key (Buffer), iv (Buffer), plaintext (Buffer), auth_data (Buffer | NULL)."
)
DECRYPT_USAGE = (
    "Not enough (or wrong) arguments specified. Required: "
    "key (Buffer), iv (Buffer), ciphertext (Buffer), auth_data (Buffer | NULL), "
    "auth tag (Buffer, 16 bytes)."
)


def _check_args(usage: str, *required: Any, aad: Any = None) -> None:
    """Rechaza buffers ausentes o de tipo incorrecto antes de cualquier cifrado.

    Args:
        usage (str): Mensaje de uso que acompaña al error.
        *required (Any): Buffers obligatorios de la llamada.
        aad (Any): AAD opcional; None indica ausencia.

    Raises:
        InvalidArguments: Si algún argumento no es un buffer válido.
    """

    if not all(is_buffer(value) for value in required):
        raise InvalidArguments(usage)
    if aad is not None and not is_buffer(aad):
        raise InvalidArguments(usage)


def gcm_encrypt(key: Any, iv: Any, plaintext: Any, aad: Any = None) -> Dict[str, bytes]:
    """Cifra un buffer y devuelve el cifrado y la etiqueta.

    Args:
        key (bytes): Clave de 128, 192 o 256 bits.
        iv (bytes): Vector de inicialización.
        plaintext (bytes): Datos en claro.
        aad (Optional[bytes]): Datos autenticados adicionales o None.

    Returns:
        Dict[str, bytes]: Claves ``ciphertext`` y ``auth_tag``.
    """

    _check_args(ENCRYPT_USAGE, key, iv, plaintext, aad=aad)
    return encrypt(key, iv, plaintext, aad).model_dump()


def gcm_decrypt(key: Any, iv: Any, ciphertext: Any, aad: Any, auth_tag: Any) -> Dict[str, Any]:
    """Descifra un buffer y devuelve el claro junto al veredicto de autenticidad.

    Args:
        key (bytes): Clave usada al cifrar.
        iv (bytes): Vector de inicialización usado al cifrar.
        ciphertext (bytes): Datos cifrados.
        aad (Optional[bytes]): Datos autenticados adicionales o None.
        auth_tag (bytes): Etiqueta de 16 bytes.

    Returns:
        Dict[str, Any]: Claves ``plaintext`` y ``auth_ok``. Si ``auth_ok`` es
        False el claro debe descartarse.
    """

    _check_args(DECRYPT_USAGE, key, iv, ciphertext, auth_tag, aad=aad)
    return decrypt(key, iv, ciphertext, aad, auth_tag).model_dump()


def _unhex(name: str, value: Optional[str]) -> Optional[bytes]:
    """Decodifica una cadena hexadecimal ignorando espacios; None se conserva."""

    if value is None:
        return None
    try:
        return bytes.fromhex("".join(value.split()))
    except (ValueError, AttributeError):
        raise InvalidArguments(f"{name} is not valid hexadecimal.") from None


def encrypt_hex(key_hex: str, iv_hex: str, plaintext: str, aad_hex: Optional[str] = None) -> Dict[str, str]:
    """Cifra texto UTF-8 recibiendo clave, IV y AAD en hexadecimal.

    Returns:
        Dict[str, str]: ``ciphertext`` y ``auth_tag`` en hexadecimal.
    """

    if not isinstance(plaintext, str):
        raise InvalidArguments(f"plaintext must be text, got {type(plaintext).__name__}.")
    result = gcm_encrypt(
        _unhex("key", key_hex),
        _unhex("iv", iv_hex),
        plaintext.encode("utf-8"),
        _unhex("aad", aad_hex),
    )
    return {name: value.hex() for name, value in result.items()}


def decrypt_hex(
    key_hex: str,
    iv_hex: str,
    ciphertext_hex: str,
    tag_hex: str,
    aad_hex: Optional[str] = None,
) -> Dict[str, Any]:
    """Descifra datos en hexadecimal e intenta interpretarlos como UTF-8.

    Returns:
        Dict[str, Any]: ``plaintext`` en hexadecimal, ``text`` (None si no es
        UTF-8 válido o si la etiqueta no verifica) y ``auth_ok``.
    """

    result = gcm_decrypt(
        _unhex("key", key_hex),
        _unhex("iv", iv_hex),
        _unhex("ciphertext", ciphertext_hex),
        _unhex("aad", aad_hex),
        _unhex("auth_tag", tag_hex),
    )
    text = None
    if result["auth_ok"]:
        try:
            text = result["plaintext"].decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("plaintext is not valid UTF-8")
    return {
        "plaintext": result["plaintext"].hex(),
        "text": text,
        "auth_ok": result["auth_ok"],
    }


def backend_info() -> Dict[str, str]:
    """Informa de la versión de cryptography y del OpenSSL enlazado."""

    return {
        "cryptography": cryptography.__version__,
        "openssl": openssl_backend.openssl_version_text(),
    }

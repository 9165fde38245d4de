# --------------------------------------------------------------
# File: cipher_select.py
# Description: Selección de la variante AES-GCM a partir de la longitud de clave.
# --------------------------------------------------------------
"""Mapeo puro entre longitud de clave y variante AES-GCM."""

from gcm_core.errors import InvalidKeyLength
from gcm_core.models import CipherVariant

KEY_LENGTH_ERROR = "Invalid key length specified. Allowed are 128, 192 and 256 bits."


def select_cipher(key_len: int) -> CipherVariant:
    """Devuelve la variante AES-GCM correspondiente a una clave de `key_len` bytes.

    Args:
        key_len (int): Longitud real de la clave en bytes.

    Returns:
        CipherVariant: AES128GCM, AES192GCM o AES256GCM.

    """

    # bool es subclase de int, pero no es una longitud.
    if isinstance(key_len, bool) or not isinstance(key_len, int):
        raise InvalidKeyLength(KEY_LENGTH_ERROR)
    try:
        return CipherVariant(key_len)
    except ValueError:
        raise InvalidKeyLength(KEY_LENGTH_ERROR) from None

# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico AES-GCM con clave e IV proporcionados.

Ambas operaciones siguen la secuencia init -> AAD -> update -> finalize sobre
un contexto que pertenece a una única llamada. El tamaño de la salida es
siempre el de la entrada: GCM no añade relleno.

El contexto es el de `cryptography` cuando el IV mide entre 8 y 128 bytes;
para cualquier otra longitud no vacía se usa AES-GCM de pycryptodome, que
acepta nonces de longitud arbitraria.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from Crypto.Cipher import AES
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from gcm_core import config
from gcm_core.cipher_select import select_cipher
from gcm_core.models import CipherVariant, DecryptResult, EncryptResult
from gcm_core.validation import (
    OPENSSL_MAX_IV_LEN,
    OPENSSL_MIN_IV_LEN,
    TAG_LEN,
    byte_length,
    check_buffer,
    check_iv_length,
    check_tag,
    optional_buffer,
    require_buffer,
)
from gcm_core.zeroize import sensitive, wipe_bytes_like

logger = logging.getLogger(__name__)


class AnyNonceGcmContext:
    """Contexto AES-GCM de pycryptodome con la interfaz de `cryptography`.

    Expone `authenticate_additional_data`, `update`, `finalize`, `tag` y
    `finalize_with_tag` para que cifrado y descifrado no distingan backends.
    Un fallo de verificación se traduce a `cryptography.exceptions.InvalidTag`.
    """

    def __init__(self, key: Any, iv: Any, *, encrypting: bool) -> None:
        self._cipher = AES.new(key, AES.MODE_GCM, nonce=iv, mac_len=TAG_LEN)
        self._encrypting = encrypting
        self.tag: Optional[bytes] = None

    def authenticate_additional_data(self, data: bytes) -> None:
        self._cipher.update(data)

    def update(self, data: bytes) -> bytes:
        if self._encrypting:
            return self._cipher.encrypt(data)
        return self._cipher.decrypt(data)

    def finalize(self) -> bytes:
        self.tag = self._cipher.digest()
        return b""

    def finalize_with_tag(self, tag: bytes) -> bytes:
        try:
            self._cipher.verify(tag)
        except ValueError:
            raise InvalidTag() from None
        return b""


@contextmanager
def _gcm_context(key: Any, iv: Any, *, encrypting: bool) -> Iterator[Any]:
    """Crea el contexto GCM de una llamada y borra clave e IV al salir.

    Ambos backends toman la longitud real del IV, por lo que no se asume el
    valor por defecto de 12 bytes.
    """

    with sensitive(key) as key_buf, sensitive(iv) as iv_buf:
        if OPENSSL_MIN_IV_LEN <= len(iv_buf) <= OPENSSL_MAX_IV_LEN:
            cipher = Cipher(algorithms.AES(key_buf), modes.GCM(iv_buf))
            yield cipher.encryptor() if encrypting else cipher.decryptor()
        else:
            yield AnyNonceGcmContext(key_buf, iv_buf, encrypting=encrypting)


def _prepare(key: Any, iv: Any) -> CipherVariant:
    variant = select_cipher(byte_length(key))
    check_iv_length(byte_length(iv))
    return variant


def encrypt(key: Any, iv: Any, plaintext: Any, aad: Any = None) -> EncryptResult:
    """Cifra `plaintext` con AES-GCM y devuelve el cifrado y su etiqueta.

    Args:
        key (bytes): Clave de 128, 192 o 256 bits.
        iv (bytes): Vector de inicialización elegido por el llamador.
        plaintext (bytes): Datos en claro, de cualquier longitud.
        aad (Optional[bytes]): Datos autenticados adicionales; None si no hay.

    Returns:
        EncryptResult: `ciphertext` de la misma longitud que el claro y
        `auth_tag` de 16 bytes.

    """

    check_buffer("key", key)
    check_buffer("iv", iv)
    data = require_buffer("plaintext", plaintext)
    auth_data = optional_buffer("aad", aad)
    variant = _prepare(key, iv)

    with _gcm_context(key, iv, encrypting=True) as ctx:
        if auth_data is not None:
            ctx.authenticate_additional_data(auth_data)
        ciphertext = ctx.update(data)
        # En GCM finalize no emite bytes; solo calcula la etiqueta.
        ciphertext += ctx.finalize()
        auth_tag = ctx.tag

    logger.debug(
        "encrypt %s iv_len=%d pt_len=%d aad=%s",
        variant.openssl_name,
        byte_length(iv),
        len(data),
        "absent" if auth_data is None else len(auth_data),
    )
    return EncryptResult(ciphertext=ciphertext, auth_tag=auth_tag)


def decrypt(
    key: Any,
    iv: Any,
    ciphertext: Any,
    aad: Any,
    auth_tag: Any,
    *,
    strict: Optional[bool] = None,
) -> DecryptResult:
    """Descifra `ciphertext` con AES-GCM y verifica la etiqueta recibida.

    Un fallo de autenticación no lanza excepción: se informa con
    `auth_ok=False`. En ese caso el claro devuelto debe descartarse.

    Args:
        key (bytes): Clave simétrica usada al cifrar.
        iv (bytes): Vector de inicialización usado al cifrar.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        aad (Optional[bytes]): Datos autenticados adicionales; None si no hay.
            Es obligatorio pasarlo, aunque sea None.
        auth_tag (bytes): Etiqueta de autenticación de 16 bytes.
        strict (Optional[bool]): Si es True, no devuelve bytes no autenticados.
            None aplica AEAD_STRICT_DECRYPT.

    Returns:
        DecryptResult: `plaintext` de la misma longitud que el cifrado y el
        veredicto `auth_ok`.

    """

    check_buffer("key", key)
    check_buffer("iv", iv)
    data = require_buffer("ciphertext", ciphertext)
    auth_data = optional_buffer("aad", aad)
    tag = require_buffer("auth_tag", auth_tag)
    check_tag(tag)
    variant = _prepare(key, iv)
    if strict is None:
        strict = config.strict_decrypt()

    plaintext = bytearray()
    try:
        with _gcm_context(key, iv, encrypting=False) as ctx:
            if auth_data is not None:
                ctx.authenticate_additional_data(auth_data)
            plaintext += ctx.update(data)
            try:
                plaintext += ctx.finalize_with_tag(tag)
                auth_ok = True
            except InvalidTag:
                auth_ok = False

        if auth_ok:
            logger.debug("decrypt %s ct_len=%d auth_ok", variant.openssl_name, len(data))
            return DecryptResult(plaintext=bytes(plaintext), auth_ok=True)

        logger.warning(
            "decrypt %s: authentication tag mismatch (ct_len=%d)", variant.openssl_name, len(data)
        )
        if strict:
            return DecryptResult(plaintext=b"", auth_ok=False)
        return DecryptResult(plaintext=bytes(plaintext), auth_ok=False)
    finally:
        if config.wipe_buffers():
            wipe_bytes_like(plaintext)

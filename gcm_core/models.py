# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic y variantes de cifrado que devuelven las operaciones GCM."""

from enum import Enum

from pydantic import BaseModel, Field

from gcm_core.validation import TAG_LEN


class CipherVariant(Enum):
    """Variantes AES-GCM indexadas por longitud de clave en bytes."""

    AES128GCM = 16
    AES192GCM = 24
    AES256GCM = 32

    @property
    def key_len(self) -> int:
        return self.value

    @property
    def key_bits(self) -> int:
        return self.value * 8

    @property
    def openssl_name(self) -> str:
        """Nombre de la variante tal y como la identifica OpenSSL."""

        return f"aes-{self.key_bits}-gcm"


class EncryptResult(BaseModel):
    """Representa el resultado de una operación de cifrado AES-GCM.

    Attributes:
        ciphertext (bytes): Datos cifrados, con la misma longitud que el claro.
        auth_tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    ciphertext: bytes
    auth_tag: bytes = Field(min_length=TAG_LEN, max_length=TAG_LEN)


class DecryptResult(BaseModel):
    """Representa el resultado de una operación de descifrado AES-GCM.

    Si `auth_ok` es False, `plaintext` no debe considerarse válido: contiene
    los bytes producidos antes de la verificación (o vacío en modo estricto)
    y debe descartarse.

    Attributes:
        plaintext (bytes): Datos descifrados, con la misma longitud que el cifrado.
        auth_ok (bool): Veredicto de la verificación de la etiqueta.

    """

    plaintext: bytes
    auth_ok: bool

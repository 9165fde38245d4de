# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores de validación para las operaciones AES-GCM.
# --------------------------------------------------------------
"""Excepciones lanzadas antes de crear cualquier estado criptográfico.

El fallo de autenticación no forma parte de esta jerarquía: `decrypt` lo
informa mediante `DecryptResult.auth_ok` en lugar de lanzar una excepción.
"""


class AeadError(Exception):
    """Error base de la librería."""


class InvalidArguments(AeadError, ValueError):
    """Falta un buffer obligatorio o su tipo no es válido."""


class InvalidKeyLength(InvalidArguments):
    """La clave no mide 16, 24 ni 32 bytes."""


class InvalidTagLength(InvalidArguments):
    """La etiqueta de autenticación no mide exactamente 16 bytes."""


class InvalidIvLength(InvalidArguments):
    """El IV está fuera del rango admitido por el backend GCM."""

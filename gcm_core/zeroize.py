# --------------------------------------------------------------
# File: zeroize.py
# Description: Buffers sensibles con borrado garantizado al salir del ámbito.
# --------------------------------------------------------------
"""Borrado best-effort de material sensible.

Los objetos `bytes` de Python son inmutables y no pueden sobrescribirse; por
eso las claves, IVs y resultados intermedios se copian a `bytearray`, que sí
se ponen a cero al liberarse.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from gcm_core import config


def wipe_bytes_like(buf: Any) -> None:
    """Sobrescribe con ceros un bytearray o memoryview escribible.

    Los buffers inmutables (bytes, memoryview de solo lectura) se ignoran.
    """

    if isinstance(buf, bytearray):
        buf[:] = bytes(len(buf))
    elif isinstance(buf, memoryview) and not buf.readonly and buf.c_contiguous:
        flat = buf.cast("B")
        flat[:] = bytes(flat.nbytes)


@contextmanager
def sensitive(data: Any) -> Iterator[bytearray]:
    """Entrega una copia mutable de `data` y la borra al cerrar el ámbito.

    Args:
        data (Any): Buffer binario con material sensible.

    Returns:
        Iterator[bytearray]: Copia que vive únicamente dentro del bloque `with`.

    """

    buf = bytearray(data)
    try:
        yield buf
    finally:
        if config.wipe_buffers():
            wipe_bytes_like(buf)

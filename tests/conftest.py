# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y generar claves.
# --------------------------------------------------------------

import os
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables AEAD_* del entorno para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ("AEAD_LOG_LEVEL", "AEAD_STRICT_DECRYPT", "AEAD_WIPE_BUFFERS"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(params=[16, 24, 32], ids=["aes128", "aes192", "aes256"])
def key(request) -> bytes:
    """Clave aleatoria para cada variante AES-GCM."""
    return os.urandom(request.param)


@pytest.fixture
def iv() -> bytes:
    return os.urandom(12)

# --------------------------------------------------------------
# File: test_zeroize.py
# Description: Pruebas del borrado de buffers sensibles.
# --------------------------------------------------------------

import pytest

from gcm_core.zeroize import sensitive, wipe_bytes_like


def test_wipe_bytearray():
    buf = bytearray(b"secret-key-bytes")
    wipe_bytes_like(buf)
    assert buf == bytearray(16)


def test_wipe_writable_memoryview():
    backing = bytearray(b"abcdef")
    wipe_bytes_like(memoryview(backing)[1:4])
    assert backing == bytearray(b"a\x00\x00\x00ef")


def test_wipe_ignores_immutable():
    data = b"immutable"
    wipe_bytes_like(data)
    wipe_bytes_like(memoryview(data))
    assert data == b"immutable"


def test_sensitive_copy_wiped_on_exit():
    """La copia mutable se pone a cero al salir, incluso si hay excepción.

    Returns:
        None: Se inspecciona la copia retenida tras cerrar el ámbito.
    """
    source = b"\x01" * 32
    with sensitive(source) as buf:
        held = buf
        assert held == bytearray(source)
    assert held == bytearray(32)

    with pytest.raises(RuntimeError):
        with sensitive(source) as buf:
            held = buf
            raise RuntimeError("boom")
    assert held == bytearray(32)
    assert source == b"\x01" * 32


def test_sensitive_wipe_can_be_disabled(monkeypatch):
    monkeypatch.setenv("AEAD_WIPE_BUFFERS", "0")
    with sensitive(b"\x07" * 4) as buf:
        held = buf
    assert held == bytearray(b"\x07" * 4)

# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de lectura de configuración desde variables de entorno.
# --------------------------------------------------------------

import logging

import pytest

from gcm_core import config


def test_defaults():
    assert config.log_level() == "WARNING"
    assert config.strict_decrypt() is False
    assert config.wipe_buffers() is True


@pytest.mark.parametrize("raw, expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("no", False)])
def test_strict_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("AEAD_STRICT_DECRYPT", raw)
    assert config.strict_decrypt() is expected


def test_configure_logging_sets_package_level(monkeypatch):
    monkeypatch.setenv("AEAD_LOG_LEVEL", "debug")
    config.configure_logging()
    assert logging.getLogger("gcm_core").level == logging.DEBUG
    assert logging.getLogger("gcm_api").level == logging.DEBUG
    logging.getLogger("gcm_core").setLevel(logging.NOTSET)
    logging.getLogger("gcm_api").setLevel(logging.NOTSET)

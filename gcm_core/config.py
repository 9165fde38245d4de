import logging
import os

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def log_level() -> str:
    return os.getenv("AEAD_LOG_LEVEL", "WARNING").upper()


def strict_decrypt() -> bool:
    # Política por defecto de decrypt cuando no se pasa `strict` explícito.
    return _env_flag("AEAD_STRICT_DECRYPT", "0")


def wipe_buffers() -> bool:
    return _env_flag("AEAD_WIPE_BUFFERS", "1")


def configure_logging() -> None:
    """Aplica AEAD_LOG_LEVEL al logger raíz del paquete."""

    level = getattr(logging, log_level(), logging.WARNING)
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("gcm_core").setLevel(level)
    logging.getLogger("gcm_api").setLevel(level)

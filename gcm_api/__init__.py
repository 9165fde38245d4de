# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios que expone las operaciones AES-GCM al exterior.
# --------------------------------------------------------------
"""Inicializa el paquete `gcm_api`."""

__all__ = ["services"]

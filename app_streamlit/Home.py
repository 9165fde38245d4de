# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from gcm_api.services import backend_info
from gcm_core.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="AES-GCM Lab", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 AES-GCM Lab")
st.write("Cifrado y descifrado autenticado con AES-128/192/256-GCM, con AAD opcional.")
st.info("La clave y el IV los elige quien llama: usa **Cifrar** y después **Descifrar**.")

info = backend_info()
st.caption(f"cryptography {info['cryptography']} | {info['openssl']}")

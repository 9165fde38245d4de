# --------------------------------------------------------------
# File: 2_Descifrar.py
# Description: Formulario de descifrado AES-GCM y verificación de la etiqueta.
# --------------------------------------------------------------

import streamlit as st

from gcm_api.services import decrypt_hex
from gcm_core.errors import AeadError

st.title("🔓 Descifrar")

key_hex = st.text_input("Clave (hex)")
iv_hex = st.text_input("IV (hex)", value="00" * 12)
ciphertext_hex = st.text_area("Ciphertext (hex)")
tag_hex = st.text_input("Auth tag (hex, 16 bytes)")
use_aad = st.checkbox("Incluir AAD")
aad_hex = st.text_input("AAD (hex)", disabled=not use_aad)

if st.button("Descifrar"):
    try:
        result = decrypt_hex(key_hex, iv_hex, ciphertext_hex, tag_hex, aad_hex if use_aad else None)
    except AeadError as exc:
        st.error(str(exc))
        st.stop()

    if result["auth_ok"]:
        st.success("✅ Etiqueta verificada")
        st.code(result["text"] if result["text"] is not None else result["plaintext"])
    else:
        # SECURITY: el claro no autenticado no se muestra.
        st.error("❌ La etiqueta no verifica: los datos deben descartarse.")

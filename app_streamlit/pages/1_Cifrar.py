# --------------------------------------------------------------
# File: 1_Cifrar.py
# Description: Formulario de cifrado AES-GCM con clave, IV y AAD en hexadecimal.
# --------------------------------------------------------------

import streamlit as st

from gcm_api.services import encrypt_hex
from gcm_core.errors import AeadError

st.title("🔒 Cifrar")

key_hex = st.text_input("Clave (hex, 16/24/32 bytes)")
iv_hex = st.text_input("IV (hex)", value="00" * 12)
plaintext = st.text_area("Texto en claro")
# AAD ausente y AAD vacía son estados distintos.
use_aad = st.checkbox("Incluir AAD")
aad_hex = st.text_input("AAD (hex)", disabled=not use_aad)

if st.button("Cifrar con AES-GCM"):
    try:
        result = encrypt_hex(key_hex, iv_hex, plaintext, aad_hex if use_aad else None)
    except AeadError as exc:
        st.error(str(exc))
        st.stop()
    st.success("Texto cifrado.")
    st.code(f"ciphertext={result['ciphertext']}\nauth_tag={result['auth_tag']}")

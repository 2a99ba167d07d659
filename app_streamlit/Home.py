# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen de la herramienta.
# --------------------------------------------------------------

import streamlit as st

from api import commands

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Crypto Desktop", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 Crypto Desktop")
st.write(
    "Caja de herramientas criptográficas: AES-256-GCM, RSA-OAEP y firmas Ed25519. "
    "Las claves se introducen en cada operación y nunca se guardan."
)

# Comprueba que la capa de comandos responde.
status = commands.ping()
st.caption(f"Estado del núcleo: {status.value}")
st.info("Elige **Cifrado Simétrico** o **Cifrado Asimétrico** en el menú lateral.")

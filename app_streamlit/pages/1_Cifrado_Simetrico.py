# --------------------------------------------------------------
# File: 1_Cifrado_Simetrico.py
# Description: Panel de cifrado y descifrado AES-256-GCM en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from api import commands
from core.models import CommandResult


def store_result(result: CommandResult, ok_message: str) -> bool:
    """Guarda el valor del comando o su error para mostrarlo en el panel.

    Args:
        result (CommandResult): Resultado devuelto por la capa de comandos.
        ok_message (str): Texto a mostrar si la operación tuvo éxito.

    Returns:
        bool: ``True`` si el comando terminó correctamente.
    """
    if result.ok:
        st.session_state["sym_result"] = result.value
        st.session_state["sym_status"] = ("success", ok_message)
    else:
        st.session_state["sym_status"] = ("error", f"[{result.error.kind}] {result.error.message}")
    return result.ok


def on_encrypt() -> None:
    """Cifra y deja el resultado en el campo de cifrado para descifrarlo después."""
    state = st.session_state
    result = commands.aes_encrypt(state["sym_plain"], state["sym_key"], state["sym_nonce"])
    if store_result(result, "Cifrado correctamente."):
        state["sym_ct"] = result.value


def on_decrypt() -> None:
    state = st.session_state
    result = commands.aes_decrypt(state["sym_ct"], state["sym_key"], state["sym_nonce"])
    store_result(result, "Descifrado correctamente.")


# Presenta el título de la sección dedicada al cifrado simétrico.
st.title("🔑 Cifrado Simétrico")
st.caption("AES-256-GCM requiere una clave de 32 bytes y un nonce de 12 bytes.")

st.text_area("Texto en claro", placeholder="Mensaje a cifrar", key="sym_plain")
st.text_area("Cifrado (Base64)", placeholder="Pega el cifrado a descifrar", key="sym_ct")
st.text_input("Clave (32 bytes)", placeholder="Clave de 32 caracteres", key="sym_key")
st.text_input(
    "Nonce (12 bytes)",
    placeholder="Nonce de 12 caracteres",
    key="sym_nonce",
    help="No reutilices nunca un nonce con la misma clave.",
)

col_enc, col_dec = st.columns(2)
with col_enc:
    st.button("Cifrar", key="btn_sym_encrypt", on_click=on_encrypt)
with col_dec:
    st.button("Descifrar", key="btn_sym_decrypt", on_click=on_decrypt)

# Muestra el estado y el último resultado obtenido.
status = st.session_state.pop("sym_status", None)
if status:
    tone, message = status
    (st.success if tone == "success" else st.error)(message)
st.markdown("### Resultado")
st.code(st.session_state.get("sym_result") or "Sin resultado todavía.")

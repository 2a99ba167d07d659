# --------------------------------------------------------------
# File: 2_Cifrado_Asimetrico.py
# Description: Paneles RSA-OAEP y Ed25519 para generar claves, cifrar y firmar.
# --------------------------------------------------------------

import streamlit as st

from api import commands, config
from core.models import CommandResult


def set_status(section: str, result: CommandResult, ok_message: str) -> bool:
    """Registra el mensaje de estado de una sección del panel.

    Args:
        section (str): Prefijo de la sección (`rsa` o `ed`).
        result (CommandResult): Resultado devuelto por la capa de comandos.
        ok_message (str): Texto a mostrar si la operación tuvo éxito.

    Returns:
        bool: ``True`` si el comando terminó correctamente.
    """
    if result.ok:
        st.session_state[f"{section}_status"] = ("success", ok_message)
    else:
        st.session_state[f"{section}_status"] = (
            "error",
            f"[{result.error.kind}] {result.error.message}",
        )
    return result.ok


def show_status(section: str) -> None:
    status = st.session_state.pop(f"{section}_status", None)
    if status:
        tone, message = status
        {"success": st.success, "warning": st.warning}.get(tone, st.error)(message)


# Callbacks: los resultados se vuelcan en los campos del paso siguiente.
def on_rsa_keygen() -> None:
    state = st.session_state
    result = commands.rsa_generate_keypair(int(state["rsa_bits"]))
    if set_status("rsa", result, "Par de claves RSA generado."):
        state["rsa_pub"] = result.value.public_key
        state["rsa_priv"] = result.value.private_key


def on_rsa_encrypt() -> None:
    state = st.session_state
    result = commands.rsa_encrypt(state["rsa_plain"], state["rsa_pub"])
    if set_status("rsa", result, "Cifrado RSA completado."):
        state["rsa_ct"] = result.value
        state["rsa_result"] = result.value


def on_rsa_decrypt() -> None:
    state = st.session_state
    result = commands.rsa_decrypt(state["rsa_ct"], state["rsa_priv"])
    if set_status("rsa", result, "Descifrado RSA completado."):
        state["rsa_result"] = result.value


def on_ed_keygen() -> None:
    state = st.session_state
    result = commands.ed25519_generate_keypair()
    if set_status("ed", result, "Par de claves Ed25519 generado."):
        state["ed_pub"] = result.value.public_key
        state["ed_priv"] = result.value.private_key


def on_ed_sign() -> None:
    state = st.session_state
    result = commands.ed25519_sign(state["ed_msg"], state["ed_priv"])
    if set_status("ed", result, "Mensaje firmado."):
        state["ed_sig_input"] = result.value


def on_ed_verify() -> None:
    state = st.session_state
    result = commands.ed25519_verify(state["ed_msg"], state["ed_sig_input"], state["ed_pub"])
    if set_status("ed", result, "✅ Firma verificada.") and not result.value:
        state["ed_status"] = ("warning", "❌ Firma no válida.")


# Presenta el título general de la página.
st.title("🗝️ Cifrado Asimétrico")

tab_rsa, tab_ed = st.tabs(["RSA-OAEP", "Ed25519"])

# Sección RSA: generación de claves y cifrado OAEP-SHA256.
with tab_rsa:
    st.number_input(
        "Tamaño de clave (bits)",
        min_value=1024,
        max_value=config.RSA_MAX_BITS,
        value=config.RSA_DEFAULT_BITS,
        step=1024,
        key="rsa_bits",
    )
    st.button("Generar par RSA", key="btn_rsa_keygen", on_click=on_rsa_keygen)

    st.text_area("Clave pública (Base64)", key="rsa_pub")
    st.text_area("Clave privada (Base64)", key="rsa_priv")
    st.text_area("Texto en claro", key="rsa_plain")
    st.text_area("Cifrado (Base64)", key="rsa_ct")

    col_enc, col_dec = st.columns(2)
    with col_enc:
        st.button("Cifrar con RSA", key="btn_rsa_encrypt", on_click=on_rsa_encrypt)
    with col_dec:
        st.button("Descifrar con RSA", key="btn_rsa_decrypt", on_click=on_rsa_decrypt)

    show_status("rsa")
    st.code(st.session_state.get("rsa_result") or "Sin resultado todavía.")

# Sección Ed25519: generación de claves, firma y verificación.
with tab_ed:
    st.button("Generar par Ed25519", key="btn_ed_keygen", on_click=on_ed_keygen)

    st.text_input("Clave pública (Base64)", key="ed_pub")
    st.text_input("Clave privada (Base64)", key="ed_priv", type="password")
    st.text_area("Mensaje", key="ed_msg")
    st.text_input("Firma (Base64)", key="ed_sig_input")

    col_sign, col_verify = st.columns(2)
    with col_sign:
        st.button("Firmar", key="btn_ed_sign", on_click=on_ed_sign)
    with col_verify:
        st.button("Verificar", key="btn_ed_verify", on_click=on_ed_verify)

    show_status("ed")

# --------------------------------------------------------------
# File: config.py
# Description: Configuración del anfitrión leída del entorno y de .env.
# --------------------------------------------------------------
import os
from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("CRYPTO_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("CRYPTO_LOG_FILE") or None
RSA_DEFAULT_BITS = int(os.getenv("RSA_DEFAULT_BITS", "2048"))
RSA_MAX_BITS = int(os.getenv("RSA_MAX_BITS", "8192"))

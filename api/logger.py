# --------------------------------------------------------------
# File: logger.py
# Description: Logger estructurado en JSON para la capa de comandos.
# --------------------------------------------------------------
import json
import logging
import os
import sys
import time

from api import config


def get_logger(name="crypto_desktop", level=None, to_file=None):
    """Devuelve un logger con salida JSON en una línea y marcas de tiempo UTC.

    Nunca debe recibir textos en claro, claves, nonces ni cifrados.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level or config.LOG_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        to_file = to_file or config.LOG_FILE
        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger

# -*- coding: utf-8 -*-
"""Destinos de salida compartidos (portapapeles con respaldo a consola)."""
import logging

import pyperclip

from .logs import warn

log = logging.getLogger(__name__)


def copy_to_clipboard(text: str, what: str = "Output") -> bool:
    """Copia al portapapeles; si no hay backend disponible avisa e imprime en consola."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as ex:
        warn(f"Clipboard not available ({ex}). {what} printed to console instead.")
        print(text)
        return False
    log.info("%s copied to clipboard", what)
    return True

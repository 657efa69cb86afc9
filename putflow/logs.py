# -*- coding: utf-8 -*-
"""
Configuración de logging para putflow.

Niveles: DEBUG, INFO, WARN, ERROR (por defecto WARN). Cada función pública
acepta ``log_level=`` y lo aplica sólo durante esa llamada:

    with with_log_level("DEBUG"):
        put("./src")
"""
import contextlib
import logging
import warnings
from typing import Iterator, Optional

from .config import DEFAULT_LOG_LEVEL

LOGGER_NAME = "putflow"
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}
_NAMES = {v: k for k, v in LOG_LEVELS.items()}

log = logging.getLogger(LOGGER_NAME)


def _normalize(level: str) -> str:
    if not isinstance(level, str):
        raise ValueError(f"log level must be one of: {', '.join(LOG_LEVELS)}")
    name = level.strip().upper()
    if name == "WARNING": name = "WARN"
    if name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level '{level}'. Must be one of: {', '.join(LOG_LEVELS)}")
    return name


def get_log_level() -> str:
    return _NAMES.get(log.level, DEFAULT_LOG_LEVEL if DEFAULT_LOG_LEVEL in LOG_LEVELS else "WARN")


def set_log_level(level: str = "WARN") -> str:
    """Fija el nivel del logger ``putflow`` y devuelve el nivel anterior."""
    name = _normalize(level)
    old = get_log_level()
    log.setLevel(LOG_LEVELS[name])
    return old


@contextlib.contextmanager
def with_log_level(level: Optional[str]) -> Iterator[str]:
    """Aplica ``level`` dentro del bloque y restaura el anterior al salir (None = no tocar)."""
    if level is None:
        yield get_log_level()
        return
    old = set_log_level(level)
    try:
        yield _normalize(level)
    finally:
        set_log_level(old)


# nivel inicial
if DEFAULT_LOG_LEVEL in LOG_LEVELS:
    log.setLevel(LOG_LEVELS[DEFAULT_LOG_LEVEL])
else:
    log.setLevel(logging.WARNING)


# ---------- avisos recuperables ----------
class PutflowWarning(UserWarning):
    """Aviso de condición recuperable (sin archivos, validación, tema inválido...)."""


def warn(message: str, stacklevel: int = 3) -> None:
    warnings.warn(message, PutflowWarning, stacklevel=stacklevel)

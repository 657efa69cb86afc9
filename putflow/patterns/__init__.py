# -*- coding: utf-8 -*-
"""
Biblioteca de patrones de detección para ``put_auto``.

Cada patrón es un dict ``{"regex", "func", "description"}`` agrupado por
categoría (``input``, ``output``, ``dependency``). Las regex se aplican
línea a línea y sin distinguir mayúsculas.

    >>> get_detection_patterns("python", "output")[0]["func"]
    'df.to_csv'
"""
from typing import Dict, List, Optional, Union

from . import misc, scripting, systems, web
from .base import Pattern

CATEGORIES = ("input", "output", "dependency")

# los 16 lenguajes con auto-detección
_DETECTION_TABLES: Dict[str, Dict[str, List[Pattern]]] = {
    "r": scripting.R,
    "python": scripting.PYTHON,
    "sql": scripting.SQL,
    "shell": scripting.SHELL,
    "julia": scripting.JULIA,
    "javascript": web.JAVASCRIPT,
    "typescript": web.TYPESCRIPT,
    "go": systems.GO,
    "rust": systems.RUST,
    "java": systems.JAVA,
    "c": systems.C,
    "cpp": systems.CPP,
    "matlab": misc.MATLAB,
    "ruby": misc.RUBY,
    "lua": misc.LUA,
    "wgsl": misc.WGSL,
}
DETECTION_LANGUAGES = tuple(_DETECTION_TABLES)

# tablas de constructos para archivos de build
_BUILD_TABLES: Dict[str, Dict[str, List[Pattern]]] = {
    "makefile": misc.MAKEFILE,
    "dockerfile": misc.DOCKERFILE,
}


def _lookup(language: Optional[str]) -> Optional[Dict[str, List[Pattern]]]:
    if not isinstance(language, str): return None
    key = language.lower()
    return _DETECTION_TABLES.get(key) or _BUILD_TABLES.get(key)


def has_detection_patterns(language: Optional[str]) -> bool:
    return _lookup(language) is not None


def get_detection_patterns(language: str = "r", type: Optional[str] = None
                           ) -> Union[Dict[str, List[Pattern]], List[Pattern]]:
    """Tabla completa (dict por categoría) o la lista de una categoría si se pasa ``type``."""
    tbl = _lookup(language)
    if tbl is None:
        supported = ", ".join(list(DETECTION_LANGUAGES) + list(_BUILD_TABLES))
        raise ValueError(f"Unsupported language: {language!r}. Supported: {supported}")
    if type is None:
        return {cat: [dict(p) for p in tbl[cat]] for cat in CATEGORIES}
    if type not in CATEGORIES:
        raise ValueError(f"Invalid type: {type!r}. Must be one of: {', '.join(CATEGORIES)}")
    return [dict(p) for p in tbl[type]]


def count_patterns(language: str) -> Dict[str, int]:
    tbl = get_detection_patterns(language)
    counts = {cat: len(tbl[cat]) for cat in CATEGORIES}
    counts["total"] = sum(counts.values())
    return counts

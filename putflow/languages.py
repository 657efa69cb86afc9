# -*- coding: utf-8 -*-
"""
Registro de lenguajes: extensión -> prefijo de comentario, nombre de lenguaje
y sintaxis de comentarios de bloque.

Familias:
  hash  (#)  : r, py, sh, bash, jl, rb, pl, yaml, yml, toml, makefile, dockerfile
  dash  (--) : sql, lua, hs
  slash (//) : js, ts, jsx, tsx, c, cpp, h, hpp, java, go, rs, swift, kt, cs,
               php, scala, groovy, d, wgsl   (+ bloques /* ... */)
  percent (%): m, tex
"""
from __future__ import annotations

import pathlib
import re
from typing import Dict, List, NamedTuple, Optional

from .patterns import DETECTION_LANGUAGES, has_detection_patterns

LANGUAGE_GROUPS: Dict[str, Dict] = {
    "hash": {
        "prefix": "#",
        "extensions": {
            "r": "r", "py": "python", "sh": "shell", "bash": "shell", "jl": "julia",
            "rb": "ruby", "pl": "perl", "yaml": "yaml", "yml": "yaml", "toml": "toml",
            "makefile": "makefile", "dockerfile": "dockerfile",
        },
    },
    "dash": {
        "prefix": "--",
        "extensions": {"sql": "sql", "lua": "lua", "hs": "haskell"},
    },
    "slash": {
        "prefix": "//",
        "extensions": {
            "js": "javascript", "jsx": "javascript", "ts": "typescript", "tsx": "typescript",
            "c": "c", "h": "c", "cpp": "cpp", "hpp": "cpp", "java": "java", "go": "go",
            "rs": "rust", "swift": "swift", "kt": "kotlin", "cs": "csharp", "php": "php",
            "scala": "scala", "groovy": "groovy", "d": "d", "wgsl": "wgsl",
        },
    },
    "percent": {
        "prefix": "%",
        "extensions": {"m": "matlab", "tex": "latex"},
    },
}

# archivos sin extensión que igual tienen lenguaje
FILENAME_MAP: Dict[str, str] = {
    "Dockerfile": "dockerfile",
    "Makefile": "makefile",
    "makefile": "makefile",
    "GNUmakefile": "makefile",
}

BLOCK_COMMENT_SYNTAX = {"open": "/*", "close": "*/", "line_prefix": "*"}
DEFAULT_PREFIX = "#"

_EXT_INDEX: Dict[str, str] = {}
for _grp, _info in LANGUAGE_GROUPS.items():
    for _ext in _info["extensions"]:
        _EXT_INDEX[_ext] = _grp


class ResolvedLanguage(NamedTuple):
    language: Optional[str]
    ext: str
    comment_prefix: str


def _clean_ext(ext: Optional[str]) -> str:
    if not ext: return ""
    return str(ext).lstrip(".").lower()


def get_comment_group(ext: Optional[str]) -> Optional[str]:
    return _EXT_INDEX.get(_clean_ext(ext))


def get_comment_prefix(ext: Optional[str]) -> str:
    grp = get_comment_group(ext)
    return LANGUAGE_GROUPS[grp]["prefix"] if grp else DEFAULT_PREFIX


def ext_to_language(ext: Optional[str]) -> Optional[str]:
    grp = get_comment_group(ext)
    if not grp: return None
    return LANGUAGE_GROUPS[grp]["extensions"][_clean_ext(ext)]


def get_block_comment_syntax(ext: Optional[str]) -> Optional[Dict[str, str]]:
    """Sólo la familia slash admite bloques ``/* ... */``."""
    if get_comment_group(ext) == "slash":
        return dict(BLOCK_COMMENT_SYNTAX)
    return None


def resolve_language_from_file(path) -> ResolvedLanguage:
    """Resuelve lenguaje por nombre exacto (Dockerfile, Makefile) o por extensión."""
    p = pathlib.Path(path)
    if p.name in FILENAME_MAP:
        lang = FILENAME_MAP[p.name]
        return ResolvedLanguage(lang, lang, get_comment_prefix(lang))
    ext = _clean_ext(p.suffix)
    return ResolvedLanguage(ext_to_language(ext), ext, get_comment_prefix(ext))


def get_supported_extensions() -> List[str]:
    return sorted(_EXT_INDEX)


def list_supported_languages(detection_only: bool = False) -> List[str]:
    """Lenguajes conocidos; con ``detection_only`` sólo los 16 con patrones de auto-detección."""
    if detection_only:
        return list(DETECTION_LANGUAGES)
    langs: List[str] = []
    for info in LANGUAGE_GROUPS.values():
        for lang in info["extensions"].values():
            if lang not in langs: langs.append(lang)
    return sorted(langs)


def build_file_pattern(detection_only: bool = False) -> str:
    """Regex (búsqueda sobre el nombre base) para extensiones soportadas y nombres exactos."""
    if detection_only:
        exts = [e for e in get_supported_extensions() if has_detection_patterns(ext_to_language(e))]
    else:
        exts = get_supported_extensions()
    exts = sorted(exts, key=lambda e: (-len(e), e))
    names = sorted(FILENAME_MAP)
    alt_ext = "|".join(re.escape(e) for e in exts)
    alt_names = "|".join(re.escape(n) for n in names)
    return rf"(?i:\.({alt_ext})$)|^({alt_names})$"

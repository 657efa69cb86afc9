# -*- coding: utf-8 -*-
"""Recorrido de archivos: validación del path, patrón de inclusión y exclusiones."""
from __future__ import annotations

import logging
import os
import pathlib
import re
from typing import Iterable, List, Optional, Sequence, Union

from .config import IGNORE_DIRS

log = logging.getLogger(__name__)

Exclude = Optional[Union[str, Sequence[str]]]


def _should_ignore(p: pathlib.Path) -> bool:
    return any(seg in IGNORE_DIRS for seg in p.parts)


def validate_path_arg(path, caller: str = "put") -> pathlib.Path:
    """Exige un único path (str/PathLike), sin ``..``, que exista."""
    if isinstance(path, (str, os.PathLike)):
        s = os.fspath(path)
    else:
        raise TypeError(f"{caller}(): 'path' must be a single string (got {type(path).__name__})")
    if not s:
        raise ValueError(f"{caller}(): 'path' must be a non-empty string")
    parts = re.split(r"[\\/]+", s)
    if ".." in parts:
        raise ValueError(f"{caller}(): path traversal ('..') is not allowed: {s}")
    p = pathlib.Path(s)
    if not p.exists():
        raise FileNotFoundError(f"Path does not exist: {s}")
    return p


def _exclude_patterns(exclude: Exclude) -> List[str]:
    if exclude is None: return []
    if isinstance(exclude, str):
        pats = exclude.split(",")
    elif isinstance(exclude, (list, tuple)) and all(isinstance(e, str) for e in exclude):
        pats = list(exclude)
    else:
        raise TypeError("'exclude' must be a string or a list of regex patterns")
    return [x.strip() for x in pats if x and x.strip()]


def filter_excluded_files(files: Iterable, exclude: Exclude) -> List:
    """Quita los archivos cuyo path (con ``/``) contiene alguna de las regex."""
    files = list(files)
    pats = _exclude_patterns(exclude)
    if not pats: return files
    rx = [re.compile(x) for x in pats]
    kept = []
    for f in files:
        s = pathlib.Path(f).as_posix()
        if any(r.search(s) for r in rx):
            log.debug("excluded: %s", s)
            continue
        kept.append(f)
    return kept


def list_files(path: pathlib.Path, pattern: str, recursive: bool = True,
               exclude: Exclude = None) -> List[pathlib.Path]:
    """
    Archivos bajo ``path`` cuyo nombre base hace match con ``pattern``.
    Un archivo suelto se devuelve tal cual (sólo se le aplica ``exclude``).
    """
    if path.is_file():
        return filter_excluded_files([path], exclude)
    rx = re.compile(pattern)
    seen = set(); out: List[pathlib.Path] = []
    it = path.rglob("*") if recursive else path.glob("*")
    for p in sorted(it):
        if not p.is_file() or p in seen: continue
        if _should_ignore(p.relative_to(path)): continue
        if rx.search(p.name):
            seen.add(p); out.append(p)
    return filter_excluded_files(out, exclude)

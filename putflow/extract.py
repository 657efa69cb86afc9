# -*- coding: utf-8 -*-
"""
Extracción de anotaciones PUT -> WorkflowTable.

Uso:
    from putflow import put
    wf = put("./src")                       # recursivo, valida
    wf = put("etl.py", include_line_numbers=True)
"""
from __future__ import annotations

import logging
import pathlib
import uuid
from collections import Counter
from typing import Dict, List, Optional, Tuple

from .annotations import find_annotations, parse_put_annotation, validate_annotation
from .files import Exclude, list_files, validate_path_arg
from .languages import build_file_pattern, get_block_comment_syntax, resolve_language_from_file
from .logs import warn, with_log_level
from .workflow import ANNOTATION_COLUMNS, WorkflowTable, build_table

log = logging.getLogger(__name__)

PROVENANCE = ("file_name", "file_path", "file_type")


def read_lines(path: pathlib.Path) -> List[str]:
    return path.read_text(encoding="utf-8", errors="ignore").splitlines()


def _file_rows(path: pathlib.Path, include_line_numbers: bool, validate: bool,
               issues: List[str]) -> List[Dict]:
    lang = resolve_language_from_file(path)
    log.debug("%s -> language=%s prefix=%s", path, lang.language, lang.comment_prefix)
    lines = read_lines(path)
    rows: List[Dict] = []
    for text, line_no in find_annotations(lines, lang.comment_prefix, get_block_comment_syntax(lang.ext)):
        props = parse_put_annotation(text)
        if props is None:
            log.debug("%s:%d: skipped malformed annotation", path.name, line_no)
            continue
        if validate:
            issues.extend(f"{path.name} line {line_no}: {msg}" for msg in validate_annotation(props, text))
        row: Dict = {"file_name": path.name, "file_path": str(path), "file_type": lang.ext}
        for k, v in props.items():
            if k not in PROVENANCE: row[k] = v
        if "id" not in props:
            row["id"] = str(uuid.uuid4())
        if not row.get("output"):
            row["output"] = path.name
        if include_line_numbers:
            row["line_number"] = line_no
        rows.append(row)
    return rows


def _duplicate_ids(rows: List[Dict]) -> List[str]:
    counts = Counter(r.get("id") for r in rows if r.get("id"))
    return sorted(i for i, n in counts.items() if n > 1)


def put(path, pattern: Optional[str] = None, recursive: bool = True, exclude: Exclude = None,
        validate: bool = True, include_line_numbers: bool = False,
        log_level: Optional[str] = None) -> WorkflowTable:
    """
    Escanea ``path`` (archivo o directorio) y devuelve una fila por anotación.

    - ``pattern``: regex sobre el nombre base (por defecto todas las extensiones soportadas).
    - ``exclude``: regex (str separado por comas o lista) sobre el path completo.
    - ``validate``: emite un único aviso con todos los problemas. Los ids duplicados se avisan siempre.
    """
    with with_log_level(log_level):
        root = validate_path_arg(path, "put")
        pattern = pattern or build_file_pattern()
        fixed: Tuple[str, ...] = ANNOTATION_COLUMNS + (("line_number",) if include_line_numbers else ())
        files = list_files(root, pattern, recursive, exclude)
        if not files:
            warn(f"No files matching pattern '{pattern}' found in: {path}")
            return WorkflowTable([], list(fixed))
        log.info("Scanning %d file(s) in %s", len(files), path)

        rows: List[Dict] = []; issues: List[str] = []
        for f in files:
            try:
                rows.extend(_file_rows(f, include_line_numbers, validate, issues))
            except OSError as ex:
                warn(f"Could not read {f}: {ex}")

        if validate and issues:
            warn("Validation issues found:\n  " + "\n  ".join(issues))
        # los ids duplicados rompen el diagrama, se avisa aunque validate sea False
        dups = _duplicate_ids(rows)
        if dups:
            warn(f"Duplicate node IDs found: {', '.join(dups)}")
        log.info("Found %d annotation(s)", len(rows))
        return build_table(rows, fixed)

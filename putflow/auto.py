# -*- coding: utf-8 -*-
"""
Auto-detección de entradas/salidas, generación de anotaciones sugeridas y
fusión con anotaciones manuales.

    put_auto("./src")                               # WorkflowTable
    put_generate("./src", output="raw")             # ['# Suggested ...', ...]
    put_merge("./src", merge_strategy="supplement")
"""
from __future__ import annotations

import functools
import logging
import pathlib
import re
from typing import Dict, List, Optional, Sequence

from .config import GENERATE_OUTPUT_MODES, GENERATE_STYLES, MERGE_STRATEGIES
from .extract import put, read_lines
from .files import Exclude, list_files, validate_path_arg
from .languages import FILENAME_MAP, build_file_pattern, get_comment_prefix, resolve_language_from_file
from .logs import warn, with_log_level
from .patterns import get_detection_patterns, has_detection_patterns
from .sinks import copy_to_clipboard
from .workflow import ANNOTATION_COLUMNS, WorkflowTable, build_table, split_file_list

log = logging.getLogger(__name__)

QUOTED_RE = re.compile(r"[\"']([^\"']+)[\"']")
EXT_RE = re.compile(r"\.[a-zA-Z0-9]{1,10}$")
SEP_RE = re.compile(r"[/\\]")
URL_RE = re.compile(r"^(https?|ftp)://", re.I)
LITERAL_RE = re.compile(r"^(TRUE|FALSE|NULL|NA|NaN|Inf)$", re.I)


def _auto_columns(include_line_numbers: bool) -> List[str]:
    cols = list(ANNOTATION_COLUMNS)
    if include_line_numbers: cols.append("line_number")
    cols.append("auto_detected")
    return cols


# ---------- heurísticas ----------
def is_likely_file_path(s) -> bool:
    """Extensión corta o separador de path, >=3 chars, no URL ni literal."""
    if not isinstance(s, str): return False
    s = s.strip()
    if s in FILENAME_MAP: return True
    if len(s) < 3: return False
    if URL_RE.match(s) or LITERAL_RE.match(s): return False
    return bool(EXT_RE.search(s) or SEP_RE.search(s))


def extract_quoted_strings(line: str) -> List[str]:
    return QUOTED_RE.findall(line)


def infer_node_type(inputs: Sequence[str], outputs: Sequence[str]) -> str:
    if outputs and not inputs: return "input"
    if inputs and not outputs: return "output"
    return "process"


@functools.lru_cache(maxsize=None)
def _compile(regex: str):
    return re.compile(regex, re.IGNORECASE)


def detect_workflow_elements(path: pathlib.Path, language: Optional[str],
                             detect_inputs: bool = True, detect_outputs: bool = True,
                             detect_dependencies: bool = True) -> Dict[str, List[str]]:
    """Recorre el archivo línea a línea y junta los strings con pinta de path por categoría."""
    found: Dict[str, List[str]] = {"input": [], "output": [], "dependency": []}
    if not has_detection_patterns(language):
        return found
    table = get_detection_patterns(language)
    cats = [c for c, on in (("input", detect_inputs), ("output", detect_outputs),
                            ("dependency", detect_dependencies)) if on]
    for line in read_lines(path):
        for cat in cats:
            if not any(_compile(p["regex"]).search(line) for p in table[cat]):
                continue
            for s in extract_quoted_strings(line):
                if is_likely_file_path(s) and s not in found[cat]:
                    found[cat].append(s)
    return found


def _auto_row(path: pathlib.Path, detect_inputs: bool, detect_outputs: bool,
              detect_dependencies: bool) -> Dict:
    lang = resolve_language_from_file(path)
    found = detect_workflow_elements(path, lang.language, detect_inputs, detect_outputs, detect_dependencies)
    if found["dependency"]:
        log.debug("%s dependencies: %s", path.name, ", ".join(found["dependency"]))
    stem = path.name if path.name in FILENAME_MAP else path.stem
    row = {
        "file_name": path.name,
        "file_path": str(path),
        "file_type": lang.ext,
        "id": re.sub(r"[^a-zA-Z0-9_]", "_", stem.lower()),
        "label": stem,
        "node_type": infer_node_type(found["input"], found["output"]),
        "input": ",".join(found["input"]) or None,
        "output": ",".join(found["output"]) or path.name,
        "auto_detected": True,
    }
    log.debug("%s -> input=%s output=%s", path.name, row["input"], row["output"])
    return row


def _scan(path, caller: str, pattern: Optional[str], recursive: bool, exclude: Exclude):
    root = validate_path_arg(path, caller)
    pattern = pattern or build_file_pattern(detection_only=True)
    files = list_files(root, pattern, recursive, exclude)
    if not files:
        warn(f"No files matching pattern '{pattern}' found in: {path}")
    return files


def _auto_rows(files, detect_inputs=True, detect_outputs=True, detect_dependencies=True,
               include_line_numbers=False) -> List[Dict]:
    rows = []
    for f in files:
        try:
            row = _auto_row(f, detect_inputs, detect_outputs, detect_dependencies)
        except OSError as ex:
            warn(f"Could not read {f}: {ex}")
            continue
        if include_line_numbers: row["line_number"] = 1
        rows.append(row)
    return rows


# ---------- put_auto ----------
def put_auto(path, pattern: Optional[str] = None, recursive: bool = False,
             detect_inputs: bool = True, detect_outputs: bool = True,
             detect_dependencies: bool = True, include_line_numbers: bool = False,
             exclude: Exclude = None, log_level: Optional[str] = None) -> WorkflowTable:
    """Una fila por archivo con las E/S detectadas (sin anotaciones manuales)."""
    with with_log_level(log_level):
        files = _scan(path, "put_auto", pattern, recursive, exclude)
        cols = _auto_columns(include_line_numbers)
        if not files:
            return WorkflowTable([], cols)
        log.info("Auto-detecting workflow elements in %d file(s)", len(files))
        rows = _auto_rows(files, detect_inputs, detect_outputs, detect_dependencies, include_line_numbers)
        return build_table(rows, cols)


# ---------- put_generate ----------
def format_suggestion(row: Dict, prefix: str = "#", style: str = "multiline") -> str:
    parts = [f'id:"{row["id"]}"', f'label:"{row["label"]}"']
    rest = []
    if row.get("node_type"): rest.append(f'node_type:"{row["node_type"]}"')
    if row.get("input"): rest.append(f'input:"{row["input"]}"')
    if row.get("output") and row["output"] != row["file_name"]:
        rest.append(f'output:"{row["output"]}"')
    if style == "single":
        return f"{prefix}put " + ", ".join(parts + rest)
    lines = [f"{prefix} Suggested annotations for: {row['file_name']}",
             f"{prefix}put {parts[0]}, {parts[1]}" + (", \\" if rest else "")]
    for i, p in enumerate(rest):
        lines.append(f"{prefix}    {p}" + (", \\" if i < len(rest) - 1 else ""))
    return "\n".join(lines)


def insert_annotation(path: pathlib.Path, annotation: str) -> bool:
    """Inserta la sugerencia tras shebang/cabecera; no toca archivos que ya tienen anotación."""
    lines = read_lines(path)
    prefix = resolve_language_from_file(path).comment_prefix
    esc = re.escape(prefix)
    if any(re.match(rf"^\s*{esc}\s*put", ln) for ln in lines):
        log.info("Skipping %s - already has PUT annotation", path.name)
        return False
    at = 0
    for i, ln in enumerate(lines):
        if ln.startswith("#!") or ln.startswith("#'") or (i < 3 and re.match(rf"^{esc}", ln)):
            at = i + 1
        else:
            break
    new = lines[:at] + ["", annotation, ""] + lines[at:]
    path.write_text("\n".join(new) + "\n", encoding="utf-8")
    log.info("Inserted annotation into: %s", path.name)
    return True


def put_generate(path, pattern: Optional[str] = None, recursive: bool = False,
                 output: str = "console", insert: bool = False, style: str = "multiline",
                 exclude: Exclude = None, log_level: Optional[str] = None) -> List[str]:
    """Sugerencias de anotación para cada archivo (console | raw | clipboard | file)."""
    if output not in GENERATE_OUTPUT_MODES:
        raise ValueError(f"Invalid output: '{output}'. Valid options: {', '.join(GENERATE_OUTPUT_MODES)}")
    if style not in GENERATE_STYLES:
        raise ValueError(f"Invalid style: '{style}'. Valid options: {', '.join(GENERATE_STYLES)}")
    with with_log_level(log_level):
        files = _scan(path, "put_generate", pattern, recursive, exclude)
        suggestions: List[str] = []; written = []
        for f in files:
            rows = _auto_rows([f])
            if not rows: continue
            row = rows[0]
            text = format_suggestion(row, get_comment_prefix(row["file_type"]), style)
            suggestions.append(text); written.append(f)
            if insert:
                insert_annotation(f, text)
        if not suggestions:
            return suggestions
        combined = "\n\n".join(suggestions)
        if output == "console":
            print(combined)
        elif output == "clipboard":
            copy_to_clipboard(combined, "Annotations")
        elif output == "file":
            for f, text in zip(written, suggestions):
                out = f.with_name(f.name + ".put")
                out.write_text(text + "\n", encoding="utf-8")
                log.info("Annotations written to: %s", out)
        return suggestions


# ---------- put_merge ----------
def _blank(v) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _union(manual, auto, file_name: str, field: str) -> Optional[str]:
    toks = split_file_list(manual)
    extra = split_file_list(auto)
    if field == "output" and extra == [file_name]:
        extra = []   # salida por defecto de la auto-detección, no aporta nada
    for t in extra:
        if t not in toks: toks.append(t)
    return ",".join(toks) or manual


def _merge_row(manual: Dict, auto: Dict, strategy: str) -> Dict:
    row = dict(manual); touched = False
    for field, aval in auto.items():
        if field in ("file_name", "file_path", "file_type", "id", "auto_detected", "line_number"):
            continue
        mval = row.get(field)
        if strategy == "union" and field in ("input", "output"):
            new = _union(mval, aval, row["file_name"], field)
        elif strategy == "manual_priority":
            new = aval if (mval is None and not _blank(aval)) else mval
        elif field == "output":
            default_out = _blank(mval) or mval == row["file_name"]
            new = aval if (default_out and not _blank(aval) and aval != auto["file_name"]) else mval
        else:
            new = aval if (_blank(mval) and not _blank(aval)) else mval
        if new != mval:
            row[field] = new; touched = True
    row["auto_detected"] = touched
    return row


def merge_annotations(manual: Sequence[Dict], auto: Sequence[Dict], strategy: str) -> List[Dict]:
    if not manual: return [dict(r) for r in auto]
    if not auto: return [dict(r, auto_detected=False) for r in manual]
    by_path = {r["file_path"]: r for r in auto}
    out = []
    for m in manual:
        a = by_path.get(m["file_path"])
        out.append(_merge_row(m, a, strategy) if a else dict(m, auto_detected=False))
    seen = {m["file_path"] for m in manual}
    out.extend(dict(a) for a in auto if a["file_path"] not in seen)
    return out


def put_merge(path, pattern: Optional[str] = None, recursive: bool = False,
              merge_strategy: str = "manual_priority", include_line_numbers: bool = False,
              exclude: Exclude = None, log_level: Optional[str] = None) -> WorkflowTable:
    """
    Combina anotaciones manuales con la auto-detección:

    - ``manual_priority``: manda lo manual; lo auto sólo rellena campos ausentes
      y aporta filas para archivos sin anotaciones.
    - ``supplement``: además rellena campos vacíos (y la salida por defecto).
    - ``union``: input/output = unión (manual primero); el resto como supplement.
    """
    if merge_strategy not in MERGE_STRATEGIES:
        raise ValueError(f"Invalid merge_strategy: '{merge_strategy}'. "
                         f"Valid options: {', '.join(MERGE_STRATEGIES)}")
    with with_log_level(log_level):
        validate_path_arg(path, "put_merge")
        pattern = pattern or build_file_pattern(detection_only=True)
        manual = put(path, pattern=pattern, recursive=recursive, exclude=exclude,
                     validate=False, include_line_numbers=include_line_numbers)
        files = list_files(pathlib.Path(path), pattern, recursive, exclude)
        auto = _auto_rows(files, include_line_numbers=include_line_numbers)
        rows = merge_annotations(manual.to_records(), auto, merge_strategy)
        log.info("Merged %d manual and %d auto-detected row(s) -> %d", len(manual), len(auto), len(rows))
        return build_table(rows, _auto_columns(include_line_numbers))

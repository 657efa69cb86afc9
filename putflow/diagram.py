# -*- coding: utf-8 -*-
"""
Diagrama Mermaid (flowchart) a partir de una WorkflowTable.

Aristas: A -> B cuando una salida de A aparece como entrada de B.
Con ``show_artifacts`` los archivos de datos son nodos propios.

    code = put_diagram(put("./src"), output="raw", theme="github", show_files=True)
"""
from __future__ import annotations

import logging
import math
import os
import pathlib
import re
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

from jinja2 import Environment, StrictUndefined

from .config import (CLICK_PROTOCOLS, NODE_LABEL_MODES, OUTPUT_MODES, SOURCE_INFO_STYLES,
                     VALID_DIRECTIONS, VALID_THEMES)
from .logs import warn, with_log_level
from .sinks import copy_to_clipboard
from .theme import STYLE_TYPES, PutTheme, get_theme_colors
from .workflow import WorkflowTable, split_file_list

log = logging.getLogger(__name__)

SHAPES = {
    "input": ("([", "])"),       # stadium
    "process": ("[", "]"),
    "output": ("[[", "]]"),      # subroutine
    "decision": ("{", "}"),
    "start": ("([", "])"),
    "end": ("([", "])"),
    "artifact": ("[(", ")]"),    # cilindro
}
INTERNAL_SUFFIX = ".internal"
# palabras clave de Mermaid que no pueden ser id de nodo
RESERVED_IDS = {"end", "graph", "subgraph", "flowchart", "class", "classdef", "click", "style"}

# documento Markdown para output="file"
DIAGRAM_DOC_TMPL = "{% if title %}# {{ title }}\n\n{% endif %}```mermaid\n{{ code }}\n```\n"
_ENV = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=True)


# ---------- ids / labels / shapes ----------
def _missing(v) -> bool:
    return v is None or (isinstance(v, float) and math.isnan(v))


def sanitize_node_id(node_id) -> str:
    if _missing(node_id): return "unknown_node"
    s = re.sub(r"[^a-zA-Z0-9_]", "_", str(node_id))
    if re.match(r"^[0-9]", s): s = "node_" + s
    s = re.sub(r"_{2,}", "_", s).rstrip("_")
    if s.lower() in RESERVED_IDS: s = "node_" + s
    return s or "unnamed_node"


def sanitize_label(label) -> Optional[str]:
    """Escapa comillas dobles; None/NaN pasan como None y "" queda vacío."""
    if _missing(label): return None
    s = str(label).replace('"', "#quot;")
    return re.sub(r"[\r\n]+", " ", s)


def get_node_shape(node_type) -> Tuple[str, str]:
    return SHAPES.get(node_type if isinstance(node_type, str) else "", ("[", "]"))


def artifact_id(file_name: str) -> str:
    return sanitize_node_id("artifact_" + re.sub(r"[^a-zA-Z0-9_]", "_", file_name))


def _is_internal(f: str) -> bool:
    return f.endswith(INTERNAL_SUFFIX)


# ---------- validación de entrada ----------
def _rows_of(workflow) -> List[Dict]:
    if not isinstance(workflow, (list, tuple)) or len(workflow) == 0:
        raise ValueError("workflow must be a non-empty WorkflowTable (or list of row dicts)")
    if not all(isinstance(r, dict) for r in workflow):
        raise ValueError("workflow rows must be dicts")
    if isinstance(workflow, WorkflowTable):
        cols = set(workflow.columns)
    else:
        cols = {k for r in workflow for k in r}
    missing = [c for c in ("id", "file_name") if c not in cols]
    if missing:
        raise ValueError(f"workflow must contain 'id' and 'file_name' columns (missing: {', '.join(missing)})")
    rows = [r for r in workflow if not _missing(r.get("id")) and str(r.get("id")).strip()]
    if not rows:
        raise ValueError("No valid workflow nodes found (every 'id' is missing or empty)")
    return rows


# ---------- nodos ----------
def _node_text(row: Dict, node_labels: str, show_source_info: bool, source_info_style: str) -> str:
    nid = row.get("id")
    label = sanitize_label(row.get("label"))
    if node_labels == "name" or not label:
        text = sanitize_label(nid)
    elif node_labels == "both":
        text = f"{sanitize_label(nid)}: {label}"
    else:
        text = label
    if show_source_info and source_info_style == "inline" and row.get("file_name"):
        text += f"<br/><small>({sanitize_label(row['file_name'])})</small>"
    return text


def generate_node_definitions(rows: Sequence[Dict], node_labels: str = "label",
                              show_source_info: bool = False, source_info_style: str = "inline",
                              indent: str = "    ") -> List[str]:
    seen = set(); out = []
    for r in rows:
        nid = sanitize_node_id(r.get("id"))
        if nid in seen: continue
        seen.add(nid)
        op, cl = get_node_shape(r.get("node_type"))
        out.append(f'{indent}{nid}{op}"{_node_text(r, node_labels, show_source_info, source_info_style)}"{cl}')
    return out


def _grouped_definitions(rows: Sequence[Dict], node_labels: str) -> List[str]:
    groups: "OrderedDict[str, List[Dict]]" = OrderedDict()
    for r in rows:
        groups.setdefault(r.get("file_name") or "unknown", []).append(r)
    out = []
    for fname, members in groups.items():
        out.append(f'    subgraph {sanitize_node_id("file_" + fname)} ["{sanitize_label(fname)}"]')
        out.extend(generate_node_definitions(members, node_labels, indent="        "))
        out.append("    end")
    return out


def create_artifact_nodes(rows: Sequence[Dict]) -> List[Dict]:
    """Archivos de datos (entradas/salidas que no son scripts del workflow)."""
    scripts = {r.get("file_name") for r in rows}
    files: List[str] = []
    for r in rows:
        for f in split_file_list(r.get("input")) + split_file_list(r.get("output")):
            if f not in files and f not in scripts and not _is_internal(f):
                files.append(f)
    return [{"id": artifact_id(f), "label": f, "node_type": "artifact", "file_name": f,
             "is_artifact": True} for f in files]


# ---------- aristas ----------
def _edge(src: str, tgt: str, f: str, show_files: bool) -> str:
    return f"    {src} -->|{f}| {tgt}" if show_files else f"    {src} --> {tgt}"


def generate_connections(rows: Sequence[Dict], show_files: bool = False,
                         show_artifacts: bool = False) -> List[str]:
    producers: Dict[str, List[str]] = {}
    for r in rows:
        for f in split_file_list(r.get("output")):
            if _is_internal(f): continue
            nid = sanitize_node_id(r.get("id"))
            if nid not in producers.setdefault(f, []): producers[f].append(nid)

    # con artefactos, el archivo compartido se dibuja como nodo intermedio en vez de arista directa
    arts = {a["file_name"] for a in create_artifact_nodes(rows)} if show_artifacts else set()
    edges: List[str] = []
    for r in rows:
        tgt = sanitize_node_id(r.get("id"))
        for f in split_file_list(r.get("input")):
            if _is_internal(f) or f in arts: continue
            for src in producers.get(f, []):
                edges.append(_edge(src, tgt, f, show_files))

    if show_artifacts:
        for r in rows:
            nid = sanitize_node_id(r.get("id"))
            for f in split_file_list(r.get("input")):
                if f in arts: edges.append(_edge(artifact_id(f), nid, f, show_files))
            for f in split_file_list(r.get("output")):
                if f in arts: edges.append(_edge(nid, artifact_id(f), f, show_files))
    return list(OrderedDict.fromkeys(edges))


# ---------- estilos / clicks ----------
def generate_node_styling(rows: Sequence[Dict], palette: Dict[str, str],
                          show_workflow_boundaries: bool = True,
                          artifacts: Sequence[Dict] = ()) -> List[str]:
    groups: Dict[str, List[str]] = {t: [] for t in STYLE_TYPES}
    for r in list(rows) + list(artifacts):
        nt = r.get("node_type")
        if nt in ("start", "end") and not show_workflow_boundaries:
            nt = "input"
        if nt not in groups: continue
        nid = sanitize_node_id(r.get("id"))
        if nid not in groups[nt]: groups[nt].append(nid)
    out = []
    for t in STYLE_TYPES:
        if not groups[t] or t not in palette: continue
        out.append(f"    classDef {t}Style {palette[t]}")
        out.extend(f"    class {nid} {t}Style" for nid in groups[t])
    return out


def build_click_url(file_path: str, line_number=None, protocol: str = "vscode") -> str:
    p = quote(pathlib.Path(os.path.abspath(file_path)).as_posix(), safe="/:")
    line = int(line_number) if not _missing(line_number) else 1
    if protocol == "vscode":
        return f"vscode://file{p if p.startswith('/') else '/' + p}:{line}"
    if protocol == "rstudio":
        return f"rstudio://open-file?path={p}&line={line}"
    return f"file://{p if p.startswith('/') else '/' + p}"


def generate_click_directives(rows: Sequence[Dict], protocol: str = "vscode") -> List[str]:
    out = []; seen = set()
    for r in rows:
        fp = r.get("file_path")
        if _missing(fp) or not fp: continue
        nid = sanitize_node_id(r.get("id"))
        if nid in seen: continue
        seen.add(nid)
        url = build_click_url(fp, r.get("line_number"), protocol)
        out.append(f'    click {nid} "{url}" "Open {sanitize_label(r.get("file_name") or fp)}"')
    return out


# ---------- salida ----------
def fence(code: str) -> str:
    return f"```mermaid\n{code}\n```"


def render_markdown(code: str, title: Optional[str] = None) -> str:
    return _ENV.from_string(DIAGRAM_DOC_TMPL).render(code=code, title=title)


def handle_output(code: str, output: str = "console", file: str = "workflow_diagram.md",
                  title: Optional[str] = None) -> None:
    if output == "console":
        print(fence(code))
    elif output == "file":
        out = pathlib.Path(file or "workflow_diagram.md")
        out.write_text(render_markdown(code, title), encoding="utf-8")
        print(f"Diagram saved to: {out}")
    elif output == "clipboard":
        copy_to_clipboard(fence(code), "Diagram")


# ---------- put_diagram ----------
def put_diagram(workflow, output: str = "console", file: str = "workflow_diagram.md",
                title: Optional[str] = None, direction: str = "TD", node_labels: str = "label",
                show_files: bool = False, show_artifacts: bool = False,
                show_workflow_boundaries: bool = True, style_nodes: bool = True,
                theme: str = "light", palette: Optional[PutTheme] = None,
                show_source_info: bool = False, source_info_style: str = "inline",
                enable_clicks: bool = False, click_protocol: str = "vscode",
                log_level: Optional[str] = None) -> str:
    """
    Genera el flowchart Mermaid y lo envía a ``output`` (console | raw | file | clipboard).
    Siempre devuelve el texto Mermaid sin el bloque de código.
    """
    if output not in OUTPUT_MODES:
        raise ValueError(f"Invalid output: '{output}'. Valid options: {', '.join(OUTPUT_MODES)}")
    if direction not in VALID_DIRECTIONS:
        raise ValueError(f"Invalid direction: '{direction}'. Valid options: {', '.join(VALID_DIRECTIONS)}")
    if node_labels not in NODE_LABEL_MODES:
        raise ValueError(f"Invalid node_labels: '{node_labels}'. Valid options: {', '.join(NODE_LABEL_MODES)}")
    if source_info_style not in SOURCE_INFO_STYLES:
        raise ValueError(f"Invalid source_info_style: '{source_info_style}'. "
                         f"Valid options: {', '.join(SOURCE_INFO_STYLES)}")
    if click_protocol not in CLICK_PROTOCOLS:
        raise ValueError(f"Invalid click_protocol: '{click_protocol}'. Valid options: {', '.join(CLICK_PROTOCOLS)}")
    if palette is not None and not isinstance(palette, PutTheme):
        raise TypeError("palette must be a PutTheme object created by put_theme()")

    with with_log_level(log_level):
        rows = _rows_of(workflow)
        if palette is None and theme not in VALID_THEMES:
            warn(f"Invalid theme '{theme}'. Using 'light'. Valid themes: {', '.join(VALID_THEMES)}")
            theme = "light"
        colors = dict(palette) if palette is not None else get_theme_colors(theme)

        lines: List[str] = []
        if title:
            lines += ["---", f"title: {title}", "---"]
        lines.append(f"flowchart {direction}")

        if show_source_info and source_info_style == "subgraph":
            lines += _grouped_definitions(rows, node_labels)
        else:
            lines += generate_node_definitions(rows, node_labels, show_source_info, source_info_style)

        artifacts = create_artifact_nodes(rows) if show_artifacts else []
        lines += generate_node_definitions(artifacts, "label")

        connections = generate_connections(rows, show_files, show_artifacts)
        if connections:
            lines += ["", "    %% Connections"] + connections
        if enable_clicks:
            clicks = generate_click_directives(rows, click_protocol)
            if clicks:
                lines += ["", "    %% Click actions"] + clicks
        if style_nodes:
            styling = generate_node_styling(rows, colors, show_workflow_boundaries, artifacts)
            if styling:
                lines += ["", "    %% Styling"] + styling

        code = "\n".join(lines)
        log.info("Diagram: %d node(s), %d artifact(s), %d connection(s)", len(rows), len(artifacts), len(connections))
        handle_output(code, output, file, title)
        return code

# -*- coding: utf-8 -*-
"""
Capa de peticiones texto-libre -> operación -> resultado en texto.

Formato de mensajes (estilo agente):
    [{"role": "user", "parts": [{"content": "Scan './src' recursively", "content_type": "text/plain"}]}]

    run = create_run({"input": messages})
    get_run(run["run_id"])
"""
from __future__ import annotations

import datetime
import logging
import re
import uuid
from typing import Dict, List, Optional

from . import __version__
from .auto import put_auto, put_generate, put_merge
from .config import VALID_NODE_TYPES, VALID_THEMES
from .diagram import put_diagram
from .extract import put
from .languages import list_supported_languages
from .logs import warn
from .patterns import count_patterns
from .theme import get_diagram_themes
from .workflow import WorkflowTable

log = logging.getLogger(__name__)

AGENT_NAME = "putflow"

# (operación, regex) en orden de prioridad
OPERATION_RULES = [
    ("diagram", r"\b(diagram|visuali[sz]e|flowchart|mermaid)\b"),
    ("auto", r"\b(auto[- ]?detect|put_auto)\b"),
    ("generate", r"\b(generate|suggest|annotation suggestion)\b"),
    ("merge", r"\b(merge|combine)\b"),
    ("scan", r"\b(scan|extract|put annotation|find annotation)\b"),
    ("help", r"\b(help|usage|how to)\b"),
    ("skills", r"\b(skills|capabilities|what can)\b"),
]
HELP_TOPICS = ("annotation", "theme", "language", "node_type", "pattern", "example", "skill")

PATH_RE = re.compile(r"[\"']([^\"']+)[\"']|(?:^|\s)(\.?/\S+)")
THEME_RE = re.compile(r"theme[=: ]*['\"]?(" + "|".join(VALID_THEMES) + r")['\"]?", re.I)
DIRECTION_RE = re.compile(r"direction[=: ]*(TD|LR|BT|RL)\b", re.I)
CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
TRAVERSAL_RE = re.compile(r"(^|/)\.\.(/|$)")

_RUNS: Dict[str, Dict] = {}


# ---------- manifest ----------
def manifest() -> Dict:
    return {
        "name": AGENT_NAME,
        "description": ("Workflow annotation and diagram generation agent. Extracts PUT annotations "
                        "from source files and generates Mermaid flowchart diagrams."),
        "metadata": {
            "version": __version__,
            "capabilities": ["scan", "diagram", "auto-detect", "generate", "merge", "help"],
            "supported_languages": list_supported_languages(),
            "operations": {
                "scan": "Scan files for PUT workflow annotations",
                "diagram": "Generate Mermaid flowchart from workflow data",
                "auto": "Auto-detect workflow from code analysis",
                "generate": "Generate annotation suggestions for files",
                "merge": "Merge manual and auto-detected annotations",
                "help": "Get help on putflow usage",
                "skills": "Get assistant skills documentation",
            },
        },
    }


# ---------- parseo del mensaje ----------
def extract_text_content(messages) -> str:
    if not messages: return ""
    parts = []
    for msg in messages:
        for part in (msg or {}).get("parts") or []:
            if part.get("content") is not None:
                parts.append(str(part["content"]))
    return " ".join(parts)


def detect_operation(text: str) -> str:
    low = (text or "").lower()
    for op, rx in OPERATION_RULES:
        if re.search(rx, low): return op
    return "scan"


def extract_parameters(text: str) -> Dict:
    text = text or ""; low = text.lower()
    params: Dict = {}
    m = PATH_RE.search(text)
    if m:
        params["path"] = m.group(1) or m.group(2)
    if re.search(r"\bhelp\b", low):
        for topic in HELP_TOPICS:
            if re.search(topic.replace("_", ".?"), low):
                params["topic"] = topic; break
    m = THEME_RE.search(text)
    if m: params["theme"] = m.group(1).lower()
    m = DIRECTION_RE.search(text)
    if m: params["direction"] = m.group(1).upper()
    if re.search(r"\b(recursive|recursively)\b", low): params["recursive"] = True
    if re.search(r"\bartifacts?\b", low): params["show_artifacts"] = True
    return params


def parse_message(messages) -> Dict:
    text = extract_text_content(messages)
    return {"operation": detect_operation(text), "params": extract_parameters(text), "raw_content": text}


def sanitize_path(path) -> str:
    """Rechaza caracteres de control y ``..``; en ese caso devuelve ``"."``."""
    if not isinstance(path, str) or not path:
        return "."
    if CONTROL_RE.search(path):
        warn("Request path rejected: contains control characters")
        return "."
    if TRAVERSAL_RE.search(path.replace("\\", "/")):
        warn(f"Request path rejected: directory traversal not allowed: {path}")
        return "."
    return path


# ---------- ayuda ----------
def help_text(topic: Optional[str] = None) -> str:
    if topic == "annotation":
        return ("PUT annotation syntax:\n"
                '  # put id:"load", label:"Load data", node_type:"input", output:"raw.csv"\n'
                "  Prefixes: # (R, Python, shell...), -- (SQL, Lua), // (JS, Go, Rust...), % (MATLAB, LaTeX)\n"
                "  Continue long annotations with a trailing backslash.")
    if topic == "theme":
        return "Themes:\n" + "\n".join(f"  {k:<9}{v}" for k, v in get_diagram_themes().items())
    if topic == "language":
        return ("Languages: " + ", ".join(list_supported_languages()) + "\n"
                "Auto-detection: " + ", ".join(list_supported_languages(detection_only=True)))
    if topic == "node_type":
        return "Node types: " + ", ".join(VALID_NODE_TYPES)
    if topic == "pattern":
        rows = [f"  {lang:<11}{count_patterns(lang)['total']}" for lang in list_supported_languages(detection_only=True)]
        return "Detection patterns per language:\n" + "\n".join(rows)
    if topic == "example":
        return ("Examples:\n"
                "  wf = put('./src')\n"
                "  put_diagram(wf, theme='github', show_artifacts=True)\n"
                "  put_merge('./src', merge_strategy='supplement')")
    if topic == "skill":
        return skills_text()
    return ("putflow help topics: " + ", ".join(HELP_TOPICS) + "\n"
            "Operations: scan, diagram, auto, generate, merge, help, skills")


def skills_text() -> str:
    return "\n".join([
        "# putflow skills",
        "",
        "- scan: extract PUT annotations into a workflow table (put)",
        "- auto: detect inputs/outputs from code (put_auto)",
        "- generate: suggest annotations for files (put_generate)",
        "- merge: combine manual and detected annotations (put_merge)",
        "- diagram: render a Mermaid flowchart (put_diagram)",
        "",
        "Parameters understood in requests: a quoted path, theme=<name>, direction=TD|LR|BT|RL,",
        "'recursively' and 'artifacts'.",
    ])


# ---------- ejecución ----------
def _run_operation(op: str, p: Dict):
    path = p.get("path") or "."
    recursive = bool(p.get("recursive"))
    if op == "scan":
        return put(path, recursive=recursive)
    if op == "diagram":
        if not p.get("path"):
            return ("To generate a diagram, please provide a path to scan.\n"
                    "Example: 'Generate a diagram for ./src/'")
        wf = put(path, recursive=recursive)
        return put_diagram(wf, output="raw", theme=p.get("theme", "light"),
                           direction=p.get("direction", "TD"),
                           show_artifacts=bool(p.get("show_artifacts")))
    if op == "auto":
        return put_auto(path, recursive=recursive)
    if op == "generate":
        return "\n".join(put_generate(path, output="raw", recursive=recursive))
    if op == "merge":
        return put_merge(path, recursive=recursive)
    if op == "help":
        return help_text(p.get("topic"))
    if op == "skills":
        return skills_text()
    return "Unknown operation. Available operations: scan, diagram, auto, generate, merge, help, skills"


def execute_request(messages) -> object:
    """Ejecuta la operación detectada; los errores vuelven como ``"Error: ..."``."""
    parsed = parse_message(messages)
    params = parsed["params"]
    if "path" in params:
        params["path"] = sanitize_path(params["path"])
    log.info("request -> %s %s", parsed["operation"], params)
    try:
        return _run_operation(parsed["operation"], params)
    except Exception as ex:
        log.error("request failed: %s", ex)
        return f"Error: {ex}"


def format_result_as_text(result) -> str:
    if isinstance(result, WorkflowTable) or (isinstance(result, list) and all(isinstance(r, dict) for r in result)):
        if not result:
            return "No annotations found."
        lines = [f"Found {len(result)} workflow node(s):", ""]
        for i, row in enumerate(result, 1):
            lines.append(f"Node {i}: {row.get('id')}")
            for key, title in (("label", "Label"), ("file_name", "Source"), ("input", "Input"), ("output", "Output")):
                if row.get(key): lines.append(f"  {title}: {row[key]}")
            lines.append("")
        return "\n".join(lines)
    if isinstance(result, (list, tuple)):
        return "\n".join(str(r) for r in result)
    return str(result)


def format_output(result) -> List[Dict]:
    return [{"role": "assistant",
             "parts": [{"content": format_result_as_text(result), "content_type": "text/plain"}]}]


# ---------- tabla de ejecuciones ----------
def create_run(body: Dict) -> Dict:
    body = body or {}
    run_id = str(uuid.uuid4())
    result = execute_request(body.get("input"))
    run = {
        "run_id": run_id,
        "agent_name": AGENT_NAME,
        "session_id": body.get("session_id"),
        "status": "completed",
        "output": format_output(result),
        "created_at": datetime.datetime.now().isoformat(timespec="seconds"),
    }
    _RUNS[run_id] = run
    return run


def get_run(run_id: str) -> Optional[Dict]:
    return _RUNS.get(run_id)


def list_agents() -> Dict:
    return {"agents": [manifest()]}

# -*- coding: utf-8 -*-
"""Constantes compartidas (tipos de nodo, temas, modos de salida, dirs ignorados)."""
import os

VALID_NODE_TYPES = ("input", "process", "output", "decision", "start", "end")
VALID_THEMES = ("light", "dark", "auto", "minimal", "github",
                "viridis", "magma", "plasma", "cividis")
VALID_DIRECTIONS = ("TD", "TB", "LR", "BT", "RL")
NODE_LABEL_MODES = ("name", "label", "both")
OUTPUT_MODES = ("console", "raw", "file", "clipboard")
GENERATE_OUTPUT_MODES = ("console", "raw", "file", "clipboard")
GENERATE_STYLES = ("single", "multiline")
MERGE_STRATEGIES = ("manual_priority", "supplement", "union")
CLICK_PROTOCOLS = ("vscode", "file", "rstudio")
SOURCE_INFO_STYLES = ("inline", "subgraph")

IGNORE_DIRS = {".git", ".venv", "venv", "__pycache__", "node_modules",
               "build", "dist", ".idea", ".vscode"}

# nivel por defecto; la CLI lo puede sobreescribir con --log-level
DEFAULT_LOG_LEVEL = os.environ.get("PUTFLOW_LOG_LEVEL", "WARN").upper()

# -*- coding: utf-8 -*-
"""
Temas de color para los diagramas y paletas personalizadas.

    pal = put_theme(base="dark", input={"fill": "#1a5276", "stroke": "#154360", "color": "#ffffff"})
    put_diagram(wf, palette=pal)
"""
from __future__ import annotations

import re
from typing import Dict, Optional

from .config import VALID_THEMES

STYLE_TYPES = ("input", "process", "output", "decision", "artifact", "start", "end")
COLOR_KEYS = ("fill", "stroke", "color")

HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def _css(fill: str, stroke: str, color: str, width: str = "2px") -> str:
    return f"fill:{fill},stroke:{stroke},stroke-width:{width},color:{color}"


THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "input": _css("#e1f5fe", "#01579b", "#000000"),
        "process": _css("#f3e5f5", "#4a148c", "#000000"),
        "output": _css("#e8f5e8", "#1b5e20", "#000000"),
        "decision": _css("#fff3e0", "#e65100", "#000000"),
        "artifact": _css("#f9f9f9", "#666666", "#333333", "1px"),
        "start": _css("#c8e6c9", "#2e7d32", "#000000", "3px"),
        "end": _css("#ffcdd2", "#c62828", "#000000", "3px"),
    },
    "dark": {
        "input": _css("#1a237e", "#3f51b5", "#ffffff"),
        "process": _css("#4a148c", "#9c27b0", "#ffffff"),
        "output": _css("#1b5e20", "#4caf50", "#ffffff"),
        "decision": _css("#e65100", "#ff9800", "#ffffff"),
        "artifact": _css("#2d2d2d", "#888888", "#ffffff", "1px"),
        "start": _css("#2e7d32", "#81c784", "#ffffff", "3px"),
        "end": _css("#b71c1c", "#e57373", "#ffffff", "3px"),
    },
    "auto": {
        "input": _css("#3b82f6", "#1d4ed8", "#ffffff"),
        "process": _css("#8b5cf6", "#6d28d9", "#ffffff"),
        "output": _css("#10b981", "#047857", "#ffffff"),
        "decision": _css("#f59e0b", "#d97706", "#ffffff"),
        "artifact": _css("#6b7280", "#374151", "#ffffff", "1px"),
        "start": _css("#22c55e", "#15803d", "#ffffff", "3px"),
        "end": _css("#ef4444", "#b91c1c", "#ffffff", "3px"),
    },
    "minimal": {
        "input": _css("#f8fafc", "#64748b", "#1e293b", "1px"),
        "process": _css("#f1f5f9", "#64748b", "#1e293b", "1px"),
        "output": _css("#f8fafc", "#64748b", "#1e293b", "1px"),
        "decision": _css("#fef3c7", "#92400e", "#1e293b", "1px"),
        "artifact": _css("#e2e8f0", "#94a3b8", "#475569", "1px"),
        "start": _css("#f8fafc", "#334155", "#1e293b", "2px"),
        "end": _css("#f8fafc", "#334155", "#1e293b", "2px"),
    },
    "github": {
        "input": _css("#dbeafe", "#2563eb", "#1e40af"),
        "process": _css("#ede9fe", "#7c3aed", "#5b21b6"),
        "output": _css("#dcfce7", "#16a34a", "#15803d"),
        "decision": _css("#fef3c7", "#d97706", "#92400e"),
        "artifact": _css("#f3f4f6", "#6b7280", "#374151", "1px"),
        "start": _css("#d1fae5", "#059669", "#065f46", "3px"),
        "end": _css("#fee2e2", "#dc2626", "#991b1b", "3px"),
    },
    # paletas perceptualmente uniformes (aptas para daltonismo)
    "viridis": {
        "input": _css("#440154", "#2d0a3e", "#ffffff"),
        "process": _css("#21918c", "#176d69", "#ffffff"),
        "output": _css("#5ec962", "#3e8f41", "#000000"),
        "decision": _css("#fde725", "#b5a300", "#000000"),
        "artifact": _css("#3b528b", "#283a66", "#ffffff", "1px"),
        "start": _css("#31688e", "#1f4a6a", "#ffffff", "3px"),
        "end": _css("#90d743", "#5e9a23", "#000000", "3px"),
    },
    "magma": {
        "input": _css("#3b0f70", "#1c0637", "#ffffff"),
        "process": _css("#8c2981", "#5f1b57", "#ffffff"),
        "output": _css("#fe9f6d", "#c4703f", "#000000"),
        "decision": _css("#fcfdbf", "#b8b97a", "#000000"),
        "artifact": _css("#000004", "#51127c", "#ffffff", "1px"),
        "start": _css("#51127c", "#2c0a45", "#ffffff", "3px"),
        "end": _css("#de4968", "#a3304a", "#ffffff", "3px"),
    },
    "plasma": {
        "input": _css("#0d0887", "#070450", "#ffffff"),
        "process": _css("#b12a90", "#7d1d66", "#ffffff"),
        "output": _css("#fca636", "#c47a14", "#000000"),
        "decision": _css("#f0f921", "#b0b700", "#000000"),
        "artifact": _css("#6a00a8", "#48006f", "#ffffff", "1px"),
        "start": _css("#5c01a6", "#3d0070", "#ffffff", "3px"),
        "end": _css("#e16462", "#a94442", "#ffffff", "3px"),
    },
    "cividis": {
        "input": _css("#00204d", "#001433", "#ffffff"),
        "process": _css("#666970", "#47494e", "#ffffff"),
        "output": _css("#cbba69", "#968841", "#000000"),
        "decision": _css("#ffea46", "#bfa900", "#000000"),
        "artifact": _css("#31446b", "#1f2c47", "#ffffff", "1px"),
        "start": _css("#414d6b", "#2a3247", "#ffffff", "3px"),
        "end": _css("#958f78", "#6b6655", "#000000", "3px"),
    },
}


def get_diagram_themes() -> Dict[str, str]:
    """Nombre del tema -> descripción corta."""
    return {
        "light": "Default light theme with bright colors",
        "dark": "Dark theme for dark mode environments",
        "auto": "GitHub-adaptive theme with solid colors that work in light and dark mode",
        "minimal": "Grayscale professional theme, print-friendly",
        "github": "Optimized for GitHub README files",
        "viridis": "Colorblind-safe (purple-blue-green-yellow), perceptually uniform",
        "magma": "Colorblind-safe warm palette (purple-red-yellow)",
        "plasma": "Colorblind-safe vibrant palette (purple-pink-yellow)",
        "cividis": "Optimized for deuteranopia and protanopia (blue-yellow)",
    }


def get_theme_colors(theme: str = "light") -> Dict[str, str]:
    """CSS por tipo de nodo; un tema desconocido cae en ``light``."""
    return dict(THEMES.get(theme, THEMES["light"]))


def is_valid_hex_color(value) -> bool:
    return isinstance(value, str) and bool(HEX_RE.match(value))


def parse_css(css: str) -> Dict[str, str]:
    out = {}
    for part in css.split(","):
        if ":" in part:
            k, v = part.split(":", 1)
            out[k.strip()] = v.strip()
    return out


class PutTheme(dict):
    """Paleta personalizada: tipo de nodo -> CSS de ``classDef``."""

    def __init__(self, styles: Dict[str, str], base: str = "light"):
        super().__init__(styles)
        self.base = base

    def __str__(self) -> str:
        lines = [f"putflow custom theme (base: {self.base})"]
        for t in STYLE_TYPES:
            if t in self:
                lines.append(f"  {t:<9}{self[t]}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"PutTheme(base={self.base!r}, types={list(self)!r})"


def _override(base_css: str, override, node_type: str) -> str:
    if not isinstance(override, dict):
        raise TypeError(f"'{node_type}' must be a dict with named keys fill, stroke, color "
                        f"(got {type(override).__name__})")
    unknown = [k for k in override if k not in COLOR_KEYS]
    if unknown:
        raise ValueError(f"Unknown key(s) in '{node_type}': {', '.join(map(str, unknown))}. "
                         f"Allowed: {', '.join(COLOR_KEYS)}")
    for k, v in override.items():
        if not is_valid_hex_color(v):
            raise ValueError(f"Invalid hex color for {node_type}.{k}: {v!r} "
                             "(use #RGB, #RRGGBB or #RRGGBBAA)")
    cur = parse_css(base_css)
    return _css(override.get("fill", cur.get("fill")), override.get("stroke", cur.get("stroke")),
                override.get("color", cur.get("color")), cur.get("stroke-width", "2px"))


def put_theme(base: str = "light", input: Optional[Dict[str, str]] = None,
              process: Optional[Dict[str, str]] = None, output: Optional[Dict[str, str]] = None,
              decision: Optional[Dict[str, str]] = None, artifact: Optional[Dict[str, str]] = None,
              start: Optional[Dict[str, str]] = None, end: Optional[Dict[str, str]] = None) -> PutTheme:
    """Parte de un tema base y sobreescribe colores por tipo de nodo."""
    if base not in THEMES:
        raise ValueError(f"Invalid base theme: '{base}'. Valid themes: {', '.join(VALID_THEMES)}")
    overrides = {"input": input, "process": process, "output": output, "decision": decision,
                 "artifact": artifact, "start": start, "end": end}
    styles = get_theme_colors(base)
    for node_type, override in overrides.items():
        if override is not None:
            styles[node_type] = _override(styles[node_type], override, node_type)
    return PutTheme(styles, base)

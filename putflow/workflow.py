# -*- coding: utf-8 -*-
"""
Tabla de workflow: lista de filas (dict) con columnas ordenadas.

Columnas fijas primero; las propiedades extra de las anotaciones van al final
en orden alfabético. Un valor ausente se guarda como ``None``.
"""
from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

ANNOTATION_COLUMNS = ("file_name", "file_path", "file_type", "id", "label",
                      "node_type", "input", "output")


def split_file_list(value) -> List[str]:
    """``"a.csv, b.csv"`` -> ``["a.csv", "b.csv"]``; None/""/NaN -> []."""
    if value is None: return []
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        if isinstance(value, float) and value != value: return []
        items = str(value).split(",")
    return [s.strip() for s in items if s and s.strip()]


class WorkflowTable(list):
    """Filas de nodos del workflow. Se comporta como ``list`` de dicts."""

    def __init__(self, rows: Iterable[Dict] = (), columns: Optional[Sequence[str]] = None):
        rows = list(rows)
        if columns is None:
            columns = []
            for r in rows:
                for k in r:
                    if k not in columns: columns.append(k)
        self.columns: List[str] = list(columns)
        super().__init__({c: r.get(c) for c in self.columns} for r in rows)

    # ---- acceso ----
    def column(self, name: str) -> List:
        if name not in self.columns:
            raise KeyError(f"Unknown column: {name}")
        return [r.get(name) for r in self]

    def to_records(self) -> List[Dict]:
        return [dict(r) for r in self]

    @property
    def empty(self) -> bool:
        return len(self) == 0

    def summary(self) -> Dict:
        types = Counter(r.get("node_type") or "unspecified" for r in self)
        files = {r.get("file_name") for r in self if r.get("file_name")}
        return {"nodes": len(self), "files": len(files), "node_types": dict(types)}

    def __str__(self) -> str:
        s = self.summary()
        lines = [f"putflow workflow: {s['nodes']} node(s) in {s['files']} file(s)"]
        if s["node_types"]:
            lines.append("  node types: " + ", ".join(f"{k}={v}" for k, v in sorted(s["node_types"].items())))
        for r in self:
            lines.append(f"  - {r.get('id')} [{r.get('node_type') or '-'}] {r.get('file_name') or ''}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"WorkflowTable(rows={len(self)}, columns={self.columns!r})"


def build_table(rows: List[Dict], fixed_columns: Sequence[str] = ANNOTATION_COLUMNS) -> WorkflowTable:
    """Columnas fijas + extras ordenadas alfabéticamente; rellena faltantes con None."""
    extra = sorted({k for r in rows for k in r} - set(fixed_columns))
    return WorkflowTable(rows, list(fixed_columns) + extra)

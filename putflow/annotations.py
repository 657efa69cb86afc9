# -*- coding: utf-8 -*-
"""
Anotaciones PUT: parser, unión de líneas (continuación con ``\\`` y bloques
``/* ... */``) y validación.

Formato:
    # put id:"load", label:"Cargar datos", input:"raw.csv", output:"clean.csv"
    // put| id:"api", node_type:"input"
    /**
     * put id:"render", output:"out.html"
     */
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from .config import VALID_NODE_TYPES
from .languages import FILENAME_MAP

# prefijo opcional (#, --, //, %, /*, /**, *) + "put" + separador (|, :, espacio)
PUT_LINE_RE = re.compile(r"^\s*(?:#|--|//|%|/\*+|\*)?\s*put(?:[|:]|(?=\s)|$)")
# el valor no puede contener la comilla de apertura sin escapar
PAIR_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_.\-]*)\s*:\s*([\"'])((?:\\.|(?!\2)[^\\])*)\2\s*$", re.S)
HAS_EXT_RE = re.compile(r"\.[^./\\]+$")

PutProps = Dict[str, str]


# ---------- parser ----------
def parse_comma_separated_pairs(text: Optional[str]) -> List[str]:
    """Divide por comas fuera de comillas; descarta partes vacías."""
    if not text: return []
    parts: List[str] = []
    buf: List[str] = []
    quote = None; escaped = False
    for ch in text:
        if escaped:
            buf.append(ch); escaped = False
            continue
        if quote:
            buf.append(ch)
            if ch == "\\": escaped = True
            elif ch == quote: quote = None
            continue
        if ch in ("'", '"'):
            quote = ch; buf.append(ch)
        elif ch == ",":
            parts.append("".join(buf)); buf = []
        else:
            buf.append(ch)
    parts.append("".join(buf))
    return [p.strip() for p in parts if p.strip()]


def _annotation_body(line: str) -> Optional[str]:
    m = PUT_LINE_RE.match(line)
    if not m: return None
    return line[m.end():].strip()


def parse_put_annotation(line: Optional[str]) -> Optional[PutProps]:
    """Devuelve el dict de propiedades (en orden) o None si la línea no es una anotación válida."""
    if not isinstance(line, str) or not line.strip():
        return None
    body = _annotation_body(line)
    if not body:
        return None
    props: PutProps = {}
    for part in parse_comma_separated_pairs(body):
        m = PAIR_RE.match(part)
        if not m: continue   # fragmento sin valor entre comillas
        props[m.group(1).strip()] = m.group(3)
    return props or None


def is_valid_put_annotation(line: Optional[str]) -> bool:
    return parse_put_annotation(line) is not None


def format_put_annotation(props: PutProps, prefix: str = "#") -> str:
    """Serializa propiedades en una línea ``<prefix>put k:"v", ...``."""
    pairs = []
    for k, v in props.items():
        v = "" if v is None else str(v)
        q = "'" if ('"' in v and "'" not in v) else '"'
        pairs.append(f"{k}:{q}{v}{q}")
    return f"{prefix}put " + ", ".join(pairs)


# ---------- unión de líneas ----------
def _strip_continuation(line: str, prefix: str) -> str:
    # quita el prefijo de comentario (y separador opcional) de la línea de continuación
    return re.sub(rf"^\s*{re.escape(prefix)}[|:]?\s*", "", line)


def _find_outside_quotes(line: str, token: str) -> int:
    quote = None
    i = 0
    while i < len(line):
        ch = line[i]
        if quote:
            if ch == "\\": i += 2; continue
            if ch == quote: quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
        elif line.startswith(token, i):
            return i
        i += 1
    return -1


def _block_content_is_put(content: str) -> bool:
    return bool(re.match(r"put(?:[|:]|\s|$)", content))


def _block_annotations(lines: List[str], syntax: Dict[str, str]) -> List[Tuple[str, int]]:
    opener, closer, lp = syntax["open"], syntax["close"], syntax.get("line_prefix", "*")
    found: List[Tuple[str, int]] = []
    in_block = False
    for n, line in enumerate(lines, 1):
        if not in_block:
            idx = _find_outside_quotes(line, opener)
            if idx < 0: continue
            sl = _find_outside_quotes(line, "//")
            if 0 <= sl < idx: continue
            rest = line[idx + len(opener):]
            end = rest.find(closer)
            if end >= 0: rest = rest[:end]
            else: in_block = True
            content = rest.lstrip("*").strip()
        else:
            end = line.find(closer)
            content = line[:end] if end >= 0 else line
            if end >= 0: in_block = False
            content = content.strip()
            if content.startswith(lp): content = content[len(lp):].strip()
        if _block_content_is_put(content):
            found.append((content, n))
    return found


def find_block_comment_annotations(lines: List[str], block_syntax: Optional[Dict[str, str]]) -> List[int]:
    """Números de línea (base 1) de anotaciones dentro de comentarios de bloque."""
    if not block_syntax: return []
    return [n for _, n in _block_annotations(lines, block_syntax)]


def find_annotations(lines: List[str], comment_prefix: str = "#",
                     block_syntax: Optional[Dict[str, str]] = None) -> List[Tuple[str, int]]:
    """
    Devuelve [(texto_completo, linea_inicio)] con las continuaciones ``\\`` ya unidas.
    Deduplica por (línea, cuerpo) entre las pasadas de línea simple y de bloque.
    """
    start_re = re.compile(rf"^\s*{re.escape(comment_prefix)}\s*put(?:[|:]|\s|$)")
    cont_re = re.compile(rf"^\s*{re.escape(comment_prefix)}")
    out: List[Tuple[str, int]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if not start_re.match(line):
            i += 1; continue
        start = i + 1
        text = line.rstrip()
        while text.endswith("\\"):
            text = text[:-1]
            if i + 1 < len(lines) and cont_re.match(lines[i + 1]):
                i += 1
                text = text + " " + _strip_continuation(lines[i], comment_prefix).rstrip()
            else:
                break
        out.append((text, start))
        i += 1

    if block_syntax:
        out.extend(_block_annotations(lines, block_syntax))

    seen = set(); uniq = []
    for text, n in sorted(out, key=lambda t: t[1]):
        key = (n, _annotation_body(text) or text.strip())
        if key in seen: continue
        seen.add(key); uniq.append((text, n))
    return uniq


# ---------- validación ----------
def _file_tokens(value: Optional[str]) -> List[str]:
    if not value: return []
    return [t.strip() for t in str(value).split(",") if t.strip()]


def validate_annotation(props: PutProps, line: str = "") -> List[str]:
    """Lista de problemas (vacía si todo está bien)."""
    issues: List[str] = []
    if "id" not in props:
        issues.append("Missing 'id' property (a UUID will be generated)")
    elif not str(props["id"]).strip():
        issues.append("Missing or empty 'id' property")
    nt = props.get("node_type")
    if nt is not None and nt not in VALID_NODE_TYPES:
        issues.append(f"Unusual node_type: '{nt}' (expected one of: {', '.join(VALID_NODE_TYPES)})")
    for field in ("input", "output"):
        for tok in _file_tokens(props.get(field)):
            if tok in FILENAME_MAP: continue
            if not HAS_EXT_RE.search(tok):
                issues.append(f"File reference missing extension in {field}: {tok}")
    return issues

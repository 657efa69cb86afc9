#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CLI de putflow.

Ejemplos:
  putflow scan ./src --recursive
  putflow auto ./scripts --format json
  putflow generate ./scripts --style single
  putflow merge ./src --strategy supplement
  putflow diagram ./src --theme github --show-files --output file --file docs/workflow.md
  putflow ask "diagram './src' theme dark"
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .auto import put_auto, put_generate, put_merge
from .config import (CLICK_PROTOCOLS, DEFAULT_LOG_LEVEL, GENERATE_STYLES, MERGE_STRATEGIES,
                     NODE_LABEL_MODES, OUTPUT_MODES, VALID_DIRECTIONS, VALID_THEMES)
from .diagram import put_diagram
from .extract import put
from .logs import LOG_LEVELS, set_log_level
from .server import create_run


def _common(ap: argparse.ArgumentParser, recursive_default: bool):
    ap.add_argument("path", nargs="?", default=".", help="archivo o directorio a escanear")
    ap.add_argument("--pattern", default=None, help="regex sobre el nombre de archivo")
    ap.add_argument("--recursive", dest="recursive", action="store_true", default=recursive_default)
    ap.add_argument("--no-recursive", dest="recursive", action="store_false")
    ap.add_argument("--exclude", nargs="*", default=None, help="regex de paths a excluir")


def _print_table(wf, fmt: str):
    if fmt == "json":
        print(json.dumps(wf.to_records(), indent=2, ensure_ascii=False))
    else:
        print(wf)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="putflow", description="Anotaciones PUT -> workflow -> Mermaid")
    ap.add_argument("--version", action="version", version=f"putflow {__version__}")
    ap.add_argument("--log-level", default=DEFAULT_LOG_LEVEL if DEFAULT_LOG_LEVEL in LOG_LEVELS else "WARN",
                    choices=list(LOG_LEVELS))
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("scan", help="extrae anotaciones PUT")
    _common(sp, True)
    sp.add_argument("--no-validate", action="store_true")
    sp.add_argument("--line-numbers", action="store_true")
    sp.add_argument("--format", choices=["table", "json"], default="table")

    sp = sub.add_parser("auto", help="auto-detecta entradas/salidas")
    _common(sp, False)
    sp.add_argument("--line-numbers", action="store_true")
    sp.add_argument("--format", choices=["table", "json"], default="table")

    sp = sub.add_parser("generate", help="sugiere anotaciones")
    _common(sp, False)
    sp.add_argument("--style", choices=list(GENERATE_STYLES), default="multiline")
    sp.add_argument("--output", choices=["console", "clipboard", "file"], default="console")
    sp.add_argument("--insert", action="store_true", help="inserta la sugerencia en cada archivo")

    sp = sub.add_parser("merge", help="combina anotaciones manuales y auto-detectadas")
    _common(sp, False)
    sp.add_argument("--strategy", choices=list(MERGE_STRATEGIES), default="manual_priority")
    sp.add_argument("--format", choices=["table", "json"], default="table")

    sp = sub.add_parser("diagram", help="genera el diagrama Mermaid")
    _common(sp, True)
    sp.add_argument("--source", choices=["manual", "auto", "merge"], default="manual")
    sp.add_argument("--strategy", choices=list(MERGE_STRATEGIES), default="manual_priority")
    sp.add_argument("--output", choices=list(OUTPUT_MODES), default="console")
    sp.add_argument("--file", default="workflow_diagram.md")
    sp.add_argument("--title", default=None)
    sp.add_argument("--direction", choices=list(VALID_DIRECTIONS), default="TD")
    sp.add_argument("--node-labels", choices=list(NODE_LABEL_MODES), default="label")
    sp.add_argument("--theme", choices=list(VALID_THEMES), default="light")
    sp.add_argument("--show-files", action="store_true")
    sp.add_argument("--show-artifacts", action="store_true")
    sp.add_argument("--no-boundaries", action="store_true")
    sp.add_argument("--no-style", action="store_true")
    sp.add_argument("--source-info", choices=["none", "inline", "subgraph"], default="none")
    sp.add_argument("--clicks", choices=list(CLICK_PROTOCOLS), default=None,
                    help="agrega enlaces click con el protocolo indicado")

    sp = sub.add_parser("ask", help="petición en texto libre, resuelta como en el servidor")
    sp.add_argument("text", nargs="+", help="p. ej.: diagram './src' theme dark")
    sp.add_argument("--session", default=None)
    sp.add_argument("--json", action="store_true", help="imprime el registro completo de la ejecución")
    return ap


def run(args) -> int:
    if args.command == "scan":
        wf = put(args.path, pattern=args.pattern, recursive=args.recursive, exclude=args.exclude,
                 validate=not args.no_validate, include_line_numbers=args.line_numbers)
        _print_table(wf, args.format)
    elif args.command == "auto":
        wf = put_auto(args.path, pattern=args.pattern, recursive=args.recursive, exclude=args.exclude,
                      include_line_numbers=args.line_numbers)
        _print_table(wf, args.format)
    elif args.command == "generate":
        put_generate(args.path, pattern=args.pattern, recursive=args.recursive, exclude=args.exclude,
                     output=args.output, insert=args.insert, style=args.style)
    elif args.command == "merge":
        wf = put_merge(args.path, pattern=args.pattern, recursive=args.recursive, exclude=args.exclude,
                       merge_strategy=args.strategy)
        _print_table(wf, args.format)
    elif args.command == "diagram":
        if args.source == "auto":
            wf = put_auto(args.path, pattern=args.pattern, recursive=args.recursive, exclude=args.exclude)
        elif args.source == "merge":
            wf = put_merge(args.path, pattern=args.pattern, recursive=args.recursive, exclude=args.exclude,
                           merge_strategy=args.strategy, include_line_numbers=True)
        else:
            wf = put(args.path, pattern=args.pattern, recursive=args.recursive, exclude=args.exclude,
                     include_line_numbers=True)
        if not wf:
            print("[WARN] no workflow nodes found", file=sys.stderr)
            return 1
        code = put_diagram(
            wf, output=args.output, file=args.file, title=args.title, direction=args.direction,
            node_labels=args.node_labels, show_files=args.show_files, show_artifacts=args.show_artifacts,
            show_workflow_boundaries=not args.no_boundaries, style_nodes=not args.no_style,
            theme=args.theme, show_source_info=args.source_info != "none",
            source_info_style=args.source_info if args.source_info != "none" else "inline",
            enable_clicks=args.clicks is not None, click_protocol=args.clicks or "vscode")
        if args.output == "raw":
            print(code)
    elif args.command == "ask":
        rec = create_run({"input": [{"role": "user", "parts": [{"content": " ".join(args.text),
                                                              "content_type": "text/plain"}]}],
                          "session_id": args.session})
        text = rec["output"][0]["parts"][0]["content"]
        print(json.dumps(rec, indent=2, ensure_ascii=False) if args.json else text)
        if text.startswith("Error: "): return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(format="[%(levelname)s] %(message)s")
    logging.captureWarnings(True)
    set_log_level(args.log_level)
    try:
        return run(args)
    except (FileNotFoundError, ValueError, TypeError) as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

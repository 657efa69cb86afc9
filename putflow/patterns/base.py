# -*- coding: utf-8 -*-
"""Helpers para declarar tablas de patrones ``(regex, func, descripción)``."""
from typing import Dict, Iterable, List, Tuple

Pattern = Dict[str, str]


def build(rows: Iterable[Tuple[str, str, str]]) -> List[Pattern]:
    return [{"regex": rx, "func": fn, "description": desc} for rx, fn, desc in rows]


def table(input=(), output=(), dependency=()) -> Dict[str, List[Pattern]]:
    return {"input": build(input), "output": build(output), "dependency": build(dependency)}

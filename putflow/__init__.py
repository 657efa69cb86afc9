# -*- coding: utf-8 -*-
"""
putflow: anotaciones PUT en el código -> tabla de workflow -> diagrama Mermaid.

    from putflow import put, put_diagram
    put_diagram(put("./src"))
"""
__version__ = "0.1.0"

from .annotations import is_valid_put_annotation, parse_put_annotation, validate_annotation
from .auto import put_auto, put_generate, put_merge
from .diagram import put_diagram
from .extract import put
from .files import filter_excluded_files
from .languages import (build_file_pattern, ext_to_language, get_comment_prefix,
                        get_supported_extensions, list_supported_languages)
from .logs import PutflowWarning, get_log_level, set_log_level, with_log_level
from .patterns import get_detection_patterns
from .theme import get_diagram_themes, put_theme
from .workflow import WorkflowTable, split_file_list

__all__ = [
    "put", "put_auto", "put_generate", "put_merge", "put_diagram", "put_theme",
    "parse_put_annotation", "is_valid_put_annotation", "validate_annotation",
    "get_detection_patterns", "list_supported_languages", "get_supported_extensions",
    "get_comment_prefix", "ext_to_language", "build_file_pattern", "filter_excluded_files",
    "get_diagram_themes", "split_file_list", "WorkflowTable", "PutflowWarning",
    "set_log_level", "get_log_level", "with_log_level",
]

"""
cupt_tools package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .annotations import abstract, decorate, is_chosen, preserve_only, retrieve_mwes
from .cleanup import remove_annotations
from .config import CuptToolsConfig, config_from_dict, config_from_yaml, load_config
from .errors import ConsistencyError, CuptError, FormatError
from .merging import merge_document, merge_paragraph, merge_sentence
from .models import (
    OUTSIDE_ID,
    ROOT_ID,
    Mwe,
    RangeID,
    SingleID,
    Token,
    TokenID,
)
from .parsing import parse_cupt, parse_paragraph, read_cupt
from .rendering import render_cupt, render_paragraph, write_cupt

__all__ = [
    "CuptToolsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "CuptError",
    "FormatError",
    "ConsistencyError",
    "TokenID",
    "SingleID",
    "RangeID",
    "ROOT_ID",
    "OUTSIDE_ID",
    "Token",
    "Mwe",
    "read_cupt",
    "parse_cupt",
    "parse_paragraph",
    "write_cupt",
    "render_cupt",
    "render_paragraph",
    "decorate",
    "abstract",
    "preserve_only",
    "retrieve_mwes",
    "is_chosen",
    "remove_annotations",
    "merge_sentence",
    "merge_paragraph",
    "merge_document",
]

__version__ = "0.1.0"

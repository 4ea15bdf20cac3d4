"""Normalization stages for math delimiters in model output."""

from .escapes import normalize_escapes
from .markdown import format_options, normalize_line_breaks
from .delimiters import canonicalize_delimiters, wrap_environments
from .cjk import extract_chinese_text, space_cjk_delimiters, is_cjk_char
from .math_runs import wrap_math_runs, is_boundary_char
from .rescan import DelimiterState, rescan_delimiters, balance_delimiters
from .models import MathSpan, MathKind, MathSource, find_math_spans

__all__ = [
    "normalize_escapes",
    "format_options",
    "canonicalize_delimiters",
    "wrap_environments",
    "extract_chinese_text",
    "wrap_math_runs",
    "normalize_line_breaks",
    "DelimiterState",
    "rescan_delimiters",
    "balance_delimiters",
    "space_cjk_delimiters",
    "is_cjk_char",
    "is_boundary_char",
    "MathSpan",
    "MathKind",
    "MathSource",
    "find_math_spans",
]

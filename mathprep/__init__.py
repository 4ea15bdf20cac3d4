"""
mathprep - Math delimiter normalization for LLM output.

Prepares text that mixes prose (including Chinese) with LaTeX for renderers
that understand `$...$` and `$$...$$` delimiters.
"""

from .pipeline import LatexPreprocessor, StageResult, preprocess_latex

__version__ = "1.0.0"
__author__ = "mathprep contributors"

__all__ = ["LatexPreprocessor", "StageResult", "preprocess_latex"]

"""
LaTeX preprocessing pipeline for KaTeX-style renderers.

Runs the normalization stages in a fixed order. Each stage assumes the
delimiter form produced by the one before it, so the order in `STAGES`
must not change.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from mathprep.normalization import (
    normalize_escapes,
    format_options,
    canonicalize_delimiters,
    wrap_environments,
    extract_chinese_text,
    wrap_math_runs,
    normalize_line_breaks,
    DelimiterState,
    balance_delimiters,
    space_cjk_delimiters,
)
from mathprep.utils.logger import LoggerMixin


@dataclass
class StageResult:
    """
    Output of one pipeline stage.

    Attributes:
        name: Stage name.
        output: Text after the stage ran.
        changed: Whether the stage altered its input.
    """
    name: str
    output: str
    changed: bool


class LatexPreprocessor(LoggerMixin):
    """
    Normalizes math delimiters in model output.

    The preprocessor holds no per-call state, so one instance can be
    shared between threads.

    Example:
        >>> LatexPreprocessor().process(r"\\[ x^2 \\]")
        '$$ x^2 $$'
    """

    def __init__(self) -> None:
        self.stages: list[tuple[str, Callable[[str], str]]] = [
            ("escapes", normalize_escapes),
            ("options", format_options),
            ("delimiters", canonicalize_delimiters),
            ("environments", wrap_environments),
            ("chinese_text", extract_chinese_text),
            ("math_runs", wrap_math_runs),
            ("line_breaks", normalize_line_breaks),
            ("rescan", self._rescan),
            ("parity", balance_delimiters),
            ("cjk_spacing", space_cjk_delimiters),
        ]

    def _rescan(self, text: str) -> str:
        state = DelimiterState()
        result = state.scan(text)
        if not state.is_closed:
            self.logger.debug(
                f"Re-scan ended inside math (inline={state.in_inline}, "
                f"block={state.in_block}); leaving repair to parity pass"
            )
        return result

    def trace(self, text: Optional[str]) -> list[StageResult]:
        """
        Run every stage and record its output.

        Args:
            text: Raw text. Falsy input yields an empty trace.

        Returns:
            One StageResult per stage, in pipeline order.
        """
        if not text:
            return []

        results = []
        for name, stage in self.stages:
            output = stage(text)
            results.append(StageResult(name=name, output=output, changed=output != text))
            text = output
        return results

    def process(self, text: Optional[str]) -> str:
        """
        Normalize the math delimiters of one text.

        Args:
            text: Raw model output.

        Returns:
            Text using only `$...$` and `$$...$$` as math delimiters.
        """
        results = self.trace(text)
        if not results:
            return ""

        changed = [r.name for r in results if r.changed]
        if changed:
            self.logger.debug(f"Stages that changed text: {', '.join(changed)}")

        return results[-1].output


_default_preprocessor: Optional[LatexPreprocessor] = None


def get_preprocessor() -> LatexPreprocessor:
    """Get the shared preprocessor instance."""
    global _default_preprocessor
    if _default_preprocessor is None:
        _default_preprocessor = LatexPreprocessor()
    return _default_preprocessor


def preprocess_latex(value: Optional[str]) -> str:
    """
    Normalize LaTeX delimiters in model output for KaTeX-style rendering.

    Args:
        value: Raw text, possibly empty or None.

    Returns:
        Normalized text, or "" for falsy input.
    """
    if not value:
        return ""
    return get_preprocessor().process(value)

r"""
Implicit math detection for text outside explicit delimiters.

Models frequently write `x^2+1=0` or `\alpha + \beta` straight into prose.
A run starts at a backslash, `^`, `_`, or an alphanumeric directly followed
by `^`/`_`, and extends to the next boundary character so sentences are not
swallowed into math mode.
"""

import re

from .models import MathKind, MathSource, MathSpan, map_plain_segments

# Characters that end an implicit math run
BOUNDARY_CHARS = frozenset("\n。；，、.?!：")

_TEXT_COMMAND_PATTERN = re.compile(r"\\text\s*\{[^}]*\}")


def is_boundary_char(char: str) -> bool:
    """Check whether a character terminates an implicit math run."""
    return char in BOUNDARY_CHARS


def _starts_math_run(text: str, i: int) -> bool:
    char = text[i]
    if char in "\\^_":
        return True
    if char.isascii() and char.isalnum():
        return i + 1 < len(text) and text[i + 1] in "^_"
    return False


def _consume_math_run(text: str, start: int) -> MathSpan:
    end = start
    while end < len(text) and not is_boundary_char(text[end]):
        end += 1
    return MathSpan(
        text=f"${text[start:end].strip()}$",
        start=start,
        end=end,
        kind=MathKind.INLINE,
        source=MathSource.IMPLICIT,
    )


def _skip_explicit_span(text: str, start: int) -> int:
    """Return the index just past the `$`/`$$` span opening at `start`."""
    is_block = text.startswith("$$", start)
    i = start + (2 if is_block else 1)
    while i < len(text):
        if text[i] == "$" and (not is_block or text.startswith("$$", i)):
            return i + (2 if is_block else 1)
        i += 1
    return i


def wrap_segment_math_runs(segment: str) -> str:
    r"""
    Wrap `\text{}` commands and implicit math runs of one plain segment.

    Args:
        segment: Text known to sit outside any explicit math span.

    Returns:
        Segment with every detected run wrapped in `$...$`.
    """
    text = _TEXT_COMMAND_PATTERN.sub(lambda m: f"${m.group(0)}$", segment)

    out = []
    i = 0
    while i < len(text):
        if text[i] == "$":
            end = _skip_explicit_span(text, i)
            out.append(text[i:end])
            i = end
        elif _starts_math_run(text, i):
            span = _consume_math_run(text, i)
            out.append(span.text)
            i = span.end
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def wrap_math_runs(text: str) -> str:
    """Wrap implicit math in every segment outside existing `$`/`$$` spans."""
    return map_plain_segments(text, wrap_segment_math_runs)

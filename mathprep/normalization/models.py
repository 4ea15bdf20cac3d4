"""
Data models for the normalization module.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List


class MathKind(Enum):
    """Enumeration of math span kinds."""
    INLINE = "inline"
    BLOCK = "block"


class MathSource(Enum):
    """Where a math span came from."""
    EXPLICIT = "explicit"
    IMPLICIT = "implicit"


@dataclass
class MathSpan:
    """
    Represents a delimited math region of the text.

    Attributes:
        text: Span text including its delimiters.
        start: Offset where the span begins in the scanned text.
        end: Offset just past the span in the scanned text.
        kind: INLINE for `$...$`, BLOCK for `$$...$$`.
        source: EXPLICIT if delimited by the input, IMPLICIT if detected.
    """
    text: str
    start: int
    end: int
    kind: MathKind
    source: MathSource = MathSource.EXPLICIT

    @property
    def delimiter(self) -> str:
        """Get the delimiter token for this span's kind."""
        return "$$" if self.kind == MathKind.BLOCK else "$"

    @property
    def content(self) -> str:
        """Get the span text without its delimiters."""
        size = len(self.delimiter)
        return self.text[size:len(self.text) - size]


# Block spans are tried first so `$$a$$` is never read as two inline spans.
MATH_SPAN_PATTERN = re.compile(r"(\$\$[\s\S]*?\$\$|\$[^$]*\$)")


def find_math_spans(text: str) -> List[MathSpan]:
    """
    Find all explicitly delimited math spans, left to right.

    Args:
        text: Text to scan.

    Returns:
        Non-overlapping spans in order of appearance.
    """
    spans = []
    for match in MATH_SPAN_PATTERN.finditer(text):
        token = match.group(0)
        is_block = token.startswith("$$") and len(token) >= 4
        spans.append(MathSpan(
            text=token,
            start=match.start(),
            end=match.end(),
            kind=MathKind.BLOCK if is_block else MathKind.INLINE,
        ))
    return spans


def map_plain_segments(text: str, transform: Callable[[str], str]) -> str:
    """
    Apply a transform to the text between math spans only.

    Math spans are copied verbatim; each plain segment (possibly empty)
    is passed through `transform`.

    Args:
        text: Text to process.
        transform: Function applied to every plain segment.

    Returns:
        Reassembled text.
    """
    parts = []
    pos = 0
    for span in find_math_spans(text):
        parts.append(transform(text[pos:span.start]))
        parts.append(span.text)
        pos = span.end
    parts.append(transform(text[pos:]))
    return "".join(parts)

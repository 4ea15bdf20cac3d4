"""
Delimiter state re-scan and parity balancing.

Earlier passes are each locally correct but can leave globally
inconsistent delimiters, e.g. a stray `$` inside a `$$` block. The
re-scan is the single authority on what is inside math afterwards; the
parity balancer then drops a dangling last delimiter.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class DelimiterState:
    """
    Left-to-right delimiter state machine.

    Attributes:
        in_inline: Currently inside `$...$`.
        in_block: Currently inside `$$...$$`.
    """
    in_inline: bool = False
    in_block: bool = False
    _out: List[str] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def is_closed(self) -> bool:
        """True when no span is left open."""
        return not (self.in_inline or self.in_block)

    def scan(self, text: str) -> str:
        """
        Rewrite delimiters in `text` according to the current state.

        Returns:
            Text with `$$` inside inline math reduced to a closing `$`
            and single `$` inside block math dropped.
        """
        self._out = []
        i = 0
        while i < len(text):
            if text.startswith("$$", i):
                self._on_double()
                i += 2
            elif text[i] == "$":
                self._on_single()
                i += 1
            else:
                self._out.append(text[i])
                i += 1
        return "".join(self._out)

    def _on_double(self) -> None:
        if self.in_inline:
            # `$$` while inline: keep one `$` as the closer
            self._out.append("$")
            self.in_inline = False
            return
        self.in_block = not self.in_block
        self._out.append("$$")

    def _on_single(self) -> None:
        if self.in_block:
            return
        self.in_inline = not self.in_inline
        self._out.append("$")


def rescan_delimiters(text: str) -> str:
    """Run a fresh DelimiterState over `text`."""
    return DelimiterState().scan(text)


def count_delimiters(text: str) -> Tuple[List[int], List[int]]:
    """
    Tokenize delimiters left to right, `$$` taking precedence.

    Returns:
        (block token offsets, single-dollar token offsets).
    """
    blocks: List[int] = []
    inlines: List[int] = []
    i = 0
    while i < len(text):
        if text.startswith("$$", i):
            blocks.append(i)
            i += 2
        elif text[i] == "$":
            inlines.append(i)
            i += 1
        else:
            i += 1
    return blocks, inlines


def balance_delimiters(text: str) -> str:
    """
    Drop the last `$$` and/or last `$` token when its count is odd.

    Best-effort: with several unmatched delimiters only the last one of
    each kind is removed.
    """
    blocks, inlines = count_delimiters(text)

    cuts = []
    if len(blocks) % 2 == 1:
        cuts.append((blocks[-1], 2))
    if len(inlines) % 2 == 1:
        cuts.append((inlines[-1], 1))

    for start, size in sorted(cuts, reverse=True):
        text = text[:start] + text[start + size:]
    return text

"""Statement dataclass — one preprocessed source line.

No tree is built: each statement is classified and executed on its own,
every time it is reached.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Statement:
    """A trimmed, comment-stripped line.

    text    : the line as the dispatcher sees it
    line_num: 1-based physical source line, 0 for interactive input
    """
    text:     str
    line_num: int = 0


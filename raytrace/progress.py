"""Text progress bar for long-running renders."""

from __future__ import annotations

import sys
from typing import TextIO

BAR_WIDTH = 70


def progress_bar(progress: float, width: int = BAR_WIDTH) -> str:
    """Render a bar such as ``[====>    ] 50 %`` for a fraction in [0, 1]."""
    pos = int(width * progress)
    cells = "".join(
        "=" if i < pos else ">" if i == pos else " " for i in range(width)
    )
    return f"[{cells}] {int(progress * 100.0)} %"


def update_progress(progress: float, stream: TextIO | None = None) -> None:
    """Redraw the progress bar in place on ``stream`` (standard output by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(progress_bar(progress) + "\r")
    out.flush()
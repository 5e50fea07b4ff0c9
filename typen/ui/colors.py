"""Theme colors and color utilities for the UI."""

from typing import Optional, Tuple


class Palette:
    """Light slate/blue palette shared by every screen."""

    BG = "#f8fafc"
    SURFACE = "#ffffff"
    BORDER = "#e2e8f0"
    BORDER_SOFT = "#f1f5f9"

    PRIMARY = "#2563eb"
    PRIMARY_LIGHT = "#60a5fa"
    PRIMARY_DARK = "#1d4ed8"
    PRIMARY_TINT = "#eff6ff"

    DANGER = "#ef4444"
    DANGER_TINT = "#fef2f2"

    TEXT_PRIMARY = "#0f172a"
    TEXT_SECONDARY = "#64748b"
    TEXT_MUTED = "#94a3b8"
    TEXT_UNTYPED = "#cbd5e1"

    # Typing display
    CORRECT = "#0f172a"
    INCORRECT = "#ef4444"
    INCORRECT_BG = "#fef2f2"
    HINT = "#2563eb"
    CURSOR = "#2563eb"


def _rgb(color: str) -> Optional[Tuple[int, int, int]]:
    if len(color) != 7 or not color.startswith("#"):
        return None
    try:
        return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    except ValueError:
        return None


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix two ``#rrggbb`` colors; t=0 gives *a*, t=1 gives *b*.

    Returns *a* unchanged if either color is not ``#rrggbb``.
    """
    start, end = _rgb(a.strip()), _rgb(b.strip())
    if start is None or end is None:
        return a
    t = max(0.0, min(1.0, t))
    mixed = (int(s + (e - s) * t + 0.5) for s, e in zip(start, end))
    return "#" + "".join(f"{c:02x}" for c in mixed)

"""Terminal cell width helpers (wide glyphs count double)."""

from wcwidth import wcwidth


def display_width(text: str) -> int:
    width = 0
    for ch in text:
        w = wcwidth(ch)
        width += max(0, w or 0)
    return width


def trim_display(text: str, width: int, *, ellipsis: str = "…") -> str:
    """Trim text to ``width`` cells, marking the cut with ``ellipsis``."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    budget = width - display_width(ellipsis)
    if budget <= 0:
        return ellipsis[:width]
    acc = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch) or 0)
        if used + w > budget:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + ellipsis


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width)
    return trimmed + " " * max(0, width - display_width(trimmed))


def single_line(text: str) -> str:
    return " ".join((text or "").split())


__all__ = ["display_width", "trim_display", "pad_display", "single_line"]

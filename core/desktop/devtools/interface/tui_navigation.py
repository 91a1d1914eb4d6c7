"""Selection and scroll helpers for TodoBoardTUI."""


def ensure_selection_visible(tui) -> None:
    total = len(tui.cards)
    visible = tui.card_capacity()
    if total <= visible:
        tui.view_offset = 0
        return
    if tui.selected_index < tui.view_offset:
        tui.view_offset = tui.selected_index
    elif tui.selected_index >= tui.view_offset + visible:
        tui.view_offset = tui.selected_index - visible + 1
    tui.view_offset = max(0, min(tui.view_offset, total - visible))


def move_vertical_selection(tui, delta: int) -> None:
    """Move the selected card by `delta`, clamping to the visible cards."""
    total = len(tui.cards)
    if total <= 0:
        tui.selected_index = 0
        return
    tui.selected_index = max(0, min(tui.selected_index + delta, total - 1))
    ensure_selection_visible(tui)
    tui.force_render()


__all__ = ["ensure_selection_visible", "move_vertical_selection"]

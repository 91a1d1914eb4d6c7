def card_content_width(term_width: int) -> int:
    """Adaptive inner width for todo cards."""
    tw = max(20, term_width)
    if tw < 80:
        base = tw - 4
    elif tw < 120:
        base = tw - 8
    else:
        base = int(tw * 0.8)
    return max(16, min(base, tw - 2, 110))

def place_in_order(order: list[str], slug: str, previous_slug: str | None = None) -> list[str]:
    """Put ``slug`` where ``previous_slug`` (or ``slug`` itself) used to be, or at the front.

    Every existing entry for either slug is dropped first, so a rename takes over the old
    position and a brand-new slug is prepended.
    """
    anchor = previous_slug or slug
    position = next((i for i, entry in enumerate(order) if entry in (anchor, slug)), None)
    updated = [entry for entry in order if entry not in (slug, previous_slug)]
    if position is not None and position <= len(updated):
        updated.insert(position, slug)
    else:
        updated.insert(0, slug)
    return updated


def remove_from_order(order: list[str], item_id: str) -> list[str]:
    return [entry for entry in order if entry != item_id]


def dedupe_order(order: list[str]) -> list[str]:
    """Drop repeated ids keeping the first occurrence."""
    return list(dict.fromkeys(order))


def keep_known(order: list[str], known: set[str]) -> list[str]:
    return [entry for entry in order if entry in known]

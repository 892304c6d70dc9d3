from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def apply_order(
    items: Iterable[T],
    order: Iterable[str],
    key: Callable[[T], str],
    recency: Callable[[T], Any] | None = None,
) -> list[T]:
    """Arrange items by a curated id sequence, appending whatever the sequence does not mention.

    Ids in ``order`` that match no item are skipped, and only the first occurrence of a
    repeated id counts, so the result is always a permutation of ``items``. The unordered
    remainder is sorted newest first by ``recency`` when given, otherwise it keeps the
    original collection order.
    """
    remaining = {key(item): item for item in items}
    ordered: list[T] = []
    for item_id in order:
        item = remaining.pop(item_id, None)
        if item is not None:
            ordered.append(item)

    rest = list(remaining.values())
    if recency is not None:
        rest.sort(key=recency, reverse=True)
    return ordered + rest

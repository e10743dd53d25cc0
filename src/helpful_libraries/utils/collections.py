"""Collection-shaping helpers.

Synchronous helpers for reshaping in-memory collections: materializing lists,
projecting and filtering, building dictionaries with last-write-wins
semantics, deduplicating by key and joining strings. The last two helpers
re-flatten grouped content items (see `helpful_libraries.interfaces.content_item`).

Every helper enumerates its input once, except `select_where` which is lazy
and re-runs on each enumeration. Only `select_where` and
`join_not_null_or_empty` tolerate ``None`` as the input collection.
"""

import logging
from collections.abc import (
    Callable,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    MutableSequence,
)
from typing import Any, TypeVar, overload

from helpful_libraries.config import DEFAULT_SEPARATOR
from helpful_libraries.domain.errors import MultiplicityViolationError
from helpful_libraries.interfaces.content_item import ContentItem, group_by

T = TypeVar("T")
TOut = TypeVar("TOut")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# A Mapping of key -> items, or an iterable of (key, items) pairs such as
# `Grouping` values or the output of `itertools.groupby`.
Lookup = Mapping[Any, Iterable[ContentItem]] | Iterable[tuple[Any, Iterable[ContentItem]]]

logger = logging.getLogger(__name__)


def as_list(collection: Iterable[T]) -> MutableSequence[T]:
    """Return ``collection`` itself if it is already a mutable sequence, else a new list.

    Unlike ``list(collection)`` this does not copy a list. Useful when the
    value is expected to be a list but is typed as an iterable.
    """
    if isinstance(collection, MutableSequence):
        return collection
    return list(collection)


def select_where(
    collection: Iterable[T] | None,
    select: Callable[[T], TOut],
    where: Callable[[TOut], bool] | None = None,
) -> Iterator[TOut]:
    """Lazily transform ``collection`` with ``select`` and filter the results.

    Args:
        collection: Items to transform. ``None`` is treated as empty.
        select: Projection applied to each item.
        where: Optional predicate on the projected value. When omitted, only
            projections that are not ``None`` are kept.

    Yields:
        The projected values that pass the filter.
    """
    for item in () if collection is None else collection:
        converted = select(item)
        if where(converted) if where is not None else converted is not None:
            yield converted


@overload
def to_dict_overwrite(
    collection: Iterable[T], key_selector: Callable[[T], K]
) -> dict[K, T]: ...


@overload
def to_dict_overwrite(
    collection: Iterable[T],
    key_selector: Callable[[T], K],
    value_selector: Callable[[T], V],
) -> dict[K, V]: ...


def to_dict_overwrite(collection, key_selector, value_selector=None):
    """Build a dictionary from ``collection``.

    If there are key clashes, the item later in the enumeration overwrites the
    earlier one. Without ``value_selector`` the item itself is the value.
    """
    if value_selector is None:
        return {key_selector(item): item for item in collection}
    return {key_selector(item): value_selector(item) for item in collection}


def unique(
    collection: Iterable[T],
    key_selector: Callable[[T], K],
    order_by_selector: Callable[[T], Any] | None = None,
) -> list[T]:
    """Return ``collection`` without duplicate keys.

    Without ``order_by_selector`` the first item seen for each key survives.
    With it, the item with the smallest order value survives (the earliest
    one on ties). The result is in first-seen key order.
    """
    if order_by_selector is None:
        return [grouping.items[0] for grouping in group_by(collection, key_selector)]
    return [
        min(grouping.items, key=order_by_selector)
        for grouping in group_by(collection, key_selector)
    ]


def unique_descending(
    collection: Iterable[T],
    key_selector: Callable[[T], K],
    order_by_selector: Callable[[T], Any],
) -> list[T]:
    """Return ``collection`` without duplicate keys, keeping the largest.

    For each key the item with the largest ``order_by_selector`` value
    survives (the earliest one on ties). The result is in first-seen key order.
    """
    return [
        max(grouping.items, key=order_by_selector)
        for grouping in group_by(collection, key_selector)
    ]


def join_not_null_or_empty(
    strings: Iterable[str | None] | None, separator: str = DEFAULT_SEPARATOR
) -> str | None:
    """Join ``strings``, skipping ``None``, empty and whitespace-only items.

    Returns:
        The joined text, or ``None`` if nothing was left to join.
    """
    if strings is None:
        return None
    filtered = [text for text in strings if text and not text.isspace()]
    return separator.join(filtered) if filtered else None


def _iter_groups(lookup: Lookup) -> Iterator[tuple[Any, Iterable[ContentItem]]]:
    if isinstance(lookup, Mapping):
        yield from lookup.items()
    else:
        yield from lookup


def get_unique_values(lookup: Lookup) -> list[ContentItem]:
    """Re-flatten grouped content items, dropping duplicate versions.

    Duplicates are detected by ``content_item_version_id``; the first one seen
    is kept.
    """
    return unique(
        (item for _, items in _iter_groups(lookup) for item in items),
        lambda content_item: content_item.content_item_version_id,
    )


def get_single_values(lookup: Lookup) -> list[ContentItem]:
    """Re-flatten grouped content items that must be one-to-one.

    Raises:
        MultiplicityViolationError: If any group has zero or several items.
    """
    values: list[ContentItem] = []
    for key, items in _iter_groups(lookup):
        members = list(items)
        if len(members) != 1:
            logger.debug("Group %r has %d members, expected 1", key, len(members))
            raise MultiplicityViolationError(key, len(members))
        values.append(members[0])
    return values

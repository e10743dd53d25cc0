"""Content item interfaces.

This module defines:
- The `ContentItem` protocol: the opaque record type consumed by the grouped
  record helpers. Only the primary identity and the version identity are read.
- `ContentItemRecord`, a frozen dataclass implementing the protocol.
- `Grouping`, a key paired with the records sharing that key, and
  `group_by` which builds them.

Grouping order
--------------
`group_by` returns groups in the order their keys are first seen, and keeps
the input order of members inside each group.
"""

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, NamedTuple, Protocol, TypeVar, runtime_checkable

from helpful_libraries.domain.value_objects import PublicationStatus

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

# pylint: disable=too-few-public-methods


@runtime_checkable
class ContentItem(Protocol):
    """Contract for a versioned content record."""

    @property
    def content_item_id(self) -> str:
        """Primary identity shared by every version of the item."""

    @property
    def content_item_version_id(self) -> str:
        """Identity of one specific version of the item."""


@dataclass(frozen=True)
class ContentItemRecord:
    """Value object representing one version of a content item."""

    content_item_id: str
    content_item_version_id: str
    content_type: str = ""
    status: PublicationStatus = PublicationStatus.PUBLISHED


class Grouping(NamedTuple, Generic[K, T]):
    """A key together with the items that share it."""

    key: K
    items: tuple[T, ...]


def group_by(collection: Iterable[T], key_selector: Callable[[T], K]) -> list[Grouping[K, T]]:
    """Group ``collection`` by ``key_selector``.

    Args:
        collection: Items to group. Enumerated exactly once.
        key_selector: Returns the (hashable) grouping key of an item.

    Returns:
        One `Grouping` per distinct key, in first-seen key order.
    """
    groups: dict[K, list[T]] = {}
    for item in collection:
        groups.setdefault(key_selector(item), []).append(item)
    return [Grouping(key, tuple(items)) for key, items in groups.items()]

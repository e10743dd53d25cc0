"""Sequential async traversal helpers.

Each helper awaits the per-item operation for one item before starting the
next, so a single call never has more than one operation in flight. This is
the alternative to ``asyncio.gather`` when true concurrency is undesirable,
e.g. to keep side effects in input order or to bound resource usage.

Failures raised by the per-item operation propagate immediately and stop the
traversal. There is no timeout or cancellation handling here; make the
per-item operation cancellation-aware if needed.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

TItem = TypeVar("TItem")
TResult = TypeVar("TResult")

logger = logging.getLogger(__name__)


async def await_each(
    source: Iterable[TItem],
    async_operation: Callable[[TItem], Awaitable[TResult]],
) -> list[TResult]:
    """Await ``async_operation`` on each item sequentially.

    Args:
        source: A collection of items.
        async_operation: An async function to call on each item.

    Returns:
        The results, added one-by-one in input order.
    """
    results: list[TResult] = []
    for item in source:
        results.append(await async_operation(item))
    return results


async def await_while(
    source: Iterable[TItem],
    async_while_operation: Callable[[TItem], Awaitable[bool]],
) -> bool:
    """Await the operation sequentially while it returns True.

    Returns:
        True if the loop was never broken, i.e. every call returned True
        (including for an empty ``source``).
    """
    for index, item in enumerate(source):
        if not await async_while_operation(item):
            logger.debug("await_while stopped at item %d", index)
            return False
    return True


async def await_until(
    source: Iterable[TItem],
    async_until_operation: Callable[[TItem], Awaitable[bool]],
) -> bool:
    """Await the operation sequentially until it returns True.

    Note the polarity: the result says whether the loop ran to completion,
    not whether the condition was reached.

    Returns:
        True if the loop was never broken, i.e. no call returned True.
        False as soon as one call returns True.
    """
    for index, item in enumerate(source):
        if await async_until_operation(item):
            logger.debug("await_until stopped at item %d", index)
            return False
    return True


async def any_async(
    source: Iterable[TItem],
    predicate: Callable[[TItem], Awaitable[bool]],
) -> bool:
    """Determine whether any item satisfies ``predicate``, like ``any()``.

    Items are tested one at a time and testing stops at the first match.

    Returns:
        True if any item passes the predicate, otherwise False.
    """
    return not await await_until(source, predicate)

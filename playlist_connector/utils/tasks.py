"""Concurrent fan-out that always joins every branch."""

import asyncio
from collections.abc import Awaitable, Iterable
from typing import Any


async def gather_all(aws: Iterable[Awaitable[Any]]) -> list[Any]:
    """Run awaitables concurrently and wait for all of them to finish.

    Unlike a plain ``asyncio.gather``, a failing branch does not leave its
    siblings running in the background: every branch completes before the
    first failure (in argument order) is re-raised.

    Returns:
        The results in argument order.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results

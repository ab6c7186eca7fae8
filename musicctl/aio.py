"""
Concurrent fan-out helpers.

gather_all is fail-fast: the first exception cancels whatever is still
pending and propagates. gather_settled is best-effort: MusicCtlError
results are replaced by a default and the batch always completes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Iterable, TypeVar

from .errors import MusicCtlError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def gather_all(aws: Iterable[Awaitable[T]]) -> list[T]:
    tasks = [asyncio.ensure_future(a) for a in aws]
    if not tasks:
        return []
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for t in tasks:
            t.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def gather_settled(aws: Iterable[Awaitable[T]], default: Any = None) -> list[Any]:
    results = await asyncio.gather(*aws, return_exceptions=True)
    out: list[Any] = []
    for r in results:
        if isinstance(r, MusicCtlError):
            logger.debug("Ignoring failed query: %s", r)
            out.append(default)
        elif isinstance(r, BaseException):
            raise r
        else:
            out.append(r)
    return out

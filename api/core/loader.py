"""
Coalescing, caching key-value loader for asyncio.

Every `load()` issued before the event loop gets a chance to run the
dispatch callback joins the same pending batch. The batch is fetched with one
call to the batch function over the distinct keys (first-occurrence order),
and each waiter gets the value at its key's position.

Per-key lifecycle: uncached -> pending -> cached. `clear()` drops a cached
value, `prime()` writes one directly. Failures are never cached.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Hashable, Sequence
from typing import Any, Generic, TypeVar

from .errors import BatchLoadError, NotFoundError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

BatchFn = Callable[[list[K]], Awaitable[Sequence[Any]]]

logger = logging.getLogger(__name__)


class _Batch(Generic[K]):
    """Keys waiting for the next dispatch, each with a shared future."""

    def __init__(self) -> None:
        self.futures: dict[K, asyncio.Future] = {}
        self.dispatched = False


class BatchLoader(Generic[K, V]):
    def __init__(
        self,
        batch_fn: BatchFn,
        *,
        name: str = "loader",
        max_batch_size: int | None = None,
    ) -> None:
        if max_batch_size is not None and max_batch_size < 1:
            raise ValueError("max_batch_size must be a positive integer.")
        self.name = name
        self._batch_fn = batch_fn
        self._max_batch_size = max_batch_size
        self._cache: dict[K, V] = {}
        # Futures of keys whose batch has not resolved yet, including dispatched ones.
        self._inflight: dict[K, asyncio.Future] = {}
        self._batch: _Batch[K] | None = None
        self._tasks: set[asyncio.Task] = set()

    async def load(self, key: K) -> V:
        if key in self._cache:
            return self._cache[key]

        future = self._inflight.get(key)
        if future is None:
            future = self._enqueue(key)
        return await future

    async def load_many(self, keys: Sequence[K]) -> list[V]:
        """
        Load several keys in one window. Results follow the order of `keys`.
        """
        return list(await asyncio.gather(*(self.load(key) for key in keys)))

    def clear(self, key: K) -> BatchLoader[K, V]:
        self._cache.pop(key, None)
        # A batch that is still running keeps its waiters, but no longer owns the key.
        self._inflight.pop(key, None)
        return self

    def clear_all(self) -> BatchLoader[K, V]:
        self._cache.clear()
        self._inflight.clear()
        return self

    def prime(self, key: K, value: V) -> BatchLoader[K, V]:
        self._inflight.pop(key, None)
        self._cache[key] = value
        return self

    def is_cached(self, key: K) -> bool:
        return key in self._cache

    def _enqueue(self, key: K) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        batch = self._batch
        if batch is None or batch.dispatched:
            batch = _Batch()
            self._batch = batch
            loop.call_soon(self._dispatch, batch)

        # After clear/prime the key may still sit in the undispatched batch;
        # its earlier waiters and this one share that future.
        future = batch.futures.get(key)
        if future is None or future.done():
            future = loop.create_future()
            batch.futures[key] = future
        self._inflight[key] = future
        return future

    def _dispatch(self, batch: _Batch[K]) -> None:
        batch.dispatched = True
        if self._batch is batch:
            self._batch = None

        items = list(batch.futures.items())
        size = self._max_batch_size or len(items)
        for start in range(0, len(items), size):
            chunk = dict(items[start:start + size])
            task = asyncio.ensure_future(self._resolve(chunk))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _resolve(self, futures: dict[K, asyncio.Future]) -> None:
        keys = list(futures)
        logger.debug("batch_dispatched loader=%s size=%s", self.name, len(keys))

        try:
            values = list(await self._batch_fn(keys))
            if len(values) != len(keys):
                raise BatchLoadError(
                    f"Batch function of loader '{self.name}' returned {len(values)} "
                    f"values for {len(keys)} keys."
                )
        except Exception as exc:
            logger.warning("batch_failed loader=%s size=%s error=%s", self.name, len(keys), exc)
            for key, future in futures.items():
                self._release(key, future)
                if not future.done():
                    future.set_exception(exc)
            return

        for key, value in zip(keys, values):
            future = futures[key]
            owns_key = self._release(key, future)
            if future.done():
                continue
            if value is None:
                future.set_exception(NotFoundError(f"No value for key {key!r}."))
            elif isinstance(value, Exception):
                future.set_exception(value)
            else:
                if owns_key:
                    self._cache[key] = value
                future.set_result(value)

    def _release(self, key: K, future: asyncio.Future) -> bool:
        """Drop `key` from the in-flight map if `future` still owns it."""
        if self._inflight.get(key) is future:
            del self._inflight[key]
            return True
        return False

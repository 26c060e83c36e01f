"""
state shared by every cursor of one operator application.

a stage is captured by the iterator factory of the enumerable an operator
returns, so all enumerations of that enumerable see the same stage and the
stage lives exactly as long as the enumerable or one of its cursors does.
"""
from __future__ import annotations
import logging
from .types import *

logger = logging.getLogger(__name__)


class CachedResult(Generic[T]):
    """
    a result list computed on first request and replayed afterwards.
    the compute callable (and everything it captured) is dropped once it succeeded.
    """

    def __init__(self, compute: Callable[[], List[T]], label: str):
        self._compute: Optional[Callable[[], List[T]]] = compute
        self._label = label
        self._result: Optional[List[T]] = None

    @property
    def is_materialized(self) -> bool:
        return self._result is not None

    def get(self) -> List[T]:
        if self._result is None:
            self._result = self._compute()
            self._compute = None
            logger.debug("%s materialized %d element(s)", self._label, len(self._result))
        return self._result

    def __repr__(self) -> str:
        state = f"{len(self._result)} cached" if self._result is not None else "pending"
        return f"CachedResult({self._label}, {state})"


def replay(stage: CachedResult[T]) -> Iterator[T]:
    """cursor over a cached result; nothing is computed until the first pull"""
    yield from stage.get()


def replay_reversed(stage: CachedResult[T]) -> Iterator[T]:
    yield from reversed(stage.get())


class MemoizedSource(Generic[T]):
    """
    makes a one-shot iterator enumerable any number of times.
    elements are buffered as they are first pulled; cursors that are behind
    read the buffer, the cursor at the front pulls from the iterator.
    an exception raised by the iterator is kept and raised again to every
    cursor that reaches the end of the buffer, since the iterator is dead.
    """

    def __init__(self, iterator: Iterator[T]):
        self._source_iterator: Optional[Iterator[T]] = iterator
        self._cache: List[T] = []
        self._error: Optional[BaseException] = None

    @property
    def is_fully_enumerated(self) -> bool:
        return self._source_iterator is None and self._error is None

    @property
    def failed(self) -> bool:
        return self._error is not None

    def _pull(self) -> bool:
        """buffer one more element. false once the iterator is exhausted"""
        if self._error is not None:
            raise self._error
        if self._source_iterator is None:
            return False
        try:
            self._cache.append(next(self._source_iterator))
            return True
        except StopIteration:
            self._source_iterator = None
            return False
        except Exception as e:
            self._source_iterator, self._error = None, e
            logger.debug("memoized source failed after %d element(s): %r", len(self._cache), e)
            raise

    def __iter__(self) -> Iterator[T]:
        position = 0
        while True:
            if position < len(self._cache):
                yield self._cache[position]
                position += 1
            elif not self._pull():
                return

    def __repr__(self) -> str:
        suffix = "" if self.is_fully_enumerated else "+"
        return f"MemoizedSource({len(self._cache)}{suffix} buffered)"

import typing
from collections.abc import Iterator as _IteratorABC, Reversible
from .types import *
from .stage import MemoizedSource

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

# returned by a producer to signal the end of its sequence
END = object()

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    create enumerable from iterable.
    the data is not read until the enumerable is. one-shot iterators are
    buffered as they are read so the enumerable can be traversed again.
    """
    from .enumerable import Enumerable, IEnumerable
    if isinstance(data, IEnumerable):
        return data
    if isinstance(data, _IteratorABC):
        memo = MemoizedSource(data)
        return Enumerable(memo.__iter__)
    if isinstance(data, Reversible):
        return Enumerable(lambda: iter(data), lambda: reversed(data))
    return Enumerable(lambda: iter(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    return from_iterable(range(start, start + max(count, 0)))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (item for _ in range(count)), lambda: (item for _ in range(count)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    return from_iterable(())

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence using a function, called once per element as it is pulled"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (generator_func() for _ in range(count)))

def from_producer(producer_factory: Callable[[], Callable[[], T]]) -> 'Enumerable[T]':
    """
    create enumerable from a stateful "produce next" callable.
    each traversal asks the factory for a fresh producer and calls it until it returns END.
    """
    from .enumerable import Enumerable
    def produce_iter():
        produce = producer_factory()
        while (item := produce()) is not END:
            yield item
    return Enumerable(produce_iter)

# --- aliases ---
lazyq = from_iterable
P = from_iterable
p = from_iterable

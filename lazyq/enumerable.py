from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .traits import SequenceTraits, FORWARD_ONLY, BIDIRECTIONAL
from .stage import CachedResult, replay, replay_reversed
from .comparers import ComparatorChain, SortClause, default_comparer

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a new, independent cursor over the sequence"""
        pass

    @property
    @abstractmethod
    def traits(self) -> SequenceTraits:
        pass

    @abstractmethod
    def _iter_reversed(self) -> Iterator[T]:
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, iter_func: Callable[[], Iterable[T]],
                 reverse_func: Optional[Callable[[], Iterable[T]]] = None):
        """
        init with a function that starts a traversal when called.
        ``reverse_func``, when given, starts a traversal from the last element
        and makes the sequence bidirectional.
        """
        self._iter_func = iter_func
        self._reverse_func = reverse_func

    @property
    def traits(self) -> SequenceTraits:
        return FORWARD_ONLY if self._reverse_func is None else BIDIRECTIONAL

    def __iter__(self) -> Iterator[T]:
        return iter(self._iter_func())

    def _iter_reversed(self) -> Iterator[T]:
        if self._reverse_func is None:
            raise TypeError("sequence does not support reverse traversal")
        return iter(self._reverse_func())

    def _get_data(self) -> List[T]:
        """run a full enumeration into a new list"""
        return list(self)

    @classmethod
    def _from_cached(cls, stage: CachedResult[T]) -> 'Enumerable[T]':
        """expose a memoized stage result; every cursor replays the same list"""
        return Enumerable(lambda: replay(stage), lambda: replay_reversed(stage))

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired enumerable over any python iterable."""
    def __init__(self, iter_func: Callable[[], Iterable[T]],
                 reverse_func: Optional[Callable[[], Iterable[T]]] = None):
        super().__init__(iter_func, reverse_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({'bidirectional' if self.traits.reversible else 'forward'})"

# --- grouping ---

class Grouping(Enumerable[V], Generic[K, V]):
    """the values sharing one key, in the order they were encountered."""

    def __init__(self, key: K, values: List[V]):
        super().__init__(lambda: iter(values), lambda: reversed(values))
        self.key = key
        self._values = values

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, values={len(self._values)})"

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: Iterable[T], chain: ComparatorChain[T]):
        self._source = source
        self._chain = chain
        # the sort runs once, on first demand, whatever the number of cursors
        self._sorted = CachedResult(lambda: chain.sort(source), f"order_by[{len(chain)}]")
        super().__init__(lambda: replay(self._sorted), lambda: replay_reversed(self._sorted))

    @property
    def chain(self) -> ComparatorChain[T]:
        return self._chain

    def _then(self, key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]],
              descending: bool) -> 'OrderedEnumerable[T]':
        clause = SortClause(key_selector, comparer or default_comparer, descending)
        return OrderedEnumerable(self._source, self._chain.then(clause))

    def then_by(self, key_selector: KeySelector[T, K],
                comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        return self._then(key_selector, comparer, False)

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return self._then(key_selector, comparer, True)

"""
membership indices used by the set-indexed and relational operators.

with a comparer the indices keep elements in comparer order and search them
with bisect; two elements are the same member iff the comparer reports 0 for
them. without a comparer elements are hashed, and the first unhashable element
moves the whole index to the natural order (``default_comparer``), so lists
and other orderable but unhashable values work too.

an ordered index costs O(log N) comparer calls per lookup or insert. inserting
shifts the backing list, which is O(N) pointer moves but no comparer calls.
"""
from __future__ import annotations
import logging
from bisect import bisect_left
from .types import *
from .comparers import sort_key, default_comparer

logger = logging.getLogger(__name__)


def _bisect_wrapped(keys: List[Any], wrapped: Any) -> Tuple[int, bool]:
    position = bisect_left(keys, wrapped)
    # keys[position] >= wrapped, so they are equivalent unless wrapped < keys[position]
    return position, position < len(keys) and not (wrapped < keys[position])


class OrderedIndex(Generic[T]):
    """sorted set of elements under a caller-supplied comparer."""

    def __init__(self, comparer: Comparer[T]):
        # the index only borrows the comparer through its sort key wrapper
        self._sort_key = sort_key(comparer)
        self._keys: List[Any] = []

    def add(self, item: T) -> bool:
        """insert ``item``; true if it was not a member yet"""
        wrapped = self._sort_key(item)
        position, found = _bisect_wrapped(self._keys, wrapped)
        if found:
            return False
        self._keys.insert(position, wrapped)
        return True

    def __contains__(self, item: object) -> bool:
        return _bisect_wrapped(self._keys, self._sort_key(item))[1]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[T]:
        return (key.obj for key in self._keys)


class HashedIndex(Generic[T]):
    def __init__(self):
        self._members: Set[T] = set()
        self._ordered: Optional[OrderedIndex[T]] = None

    @property
    def is_ordered(self) -> bool:
        return self._ordered is not None

    def _to_ordered(self) -> OrderedIndex[T]:
        ordered = OrderedIndex(default_comparer)
        for member in self._members:
            ordered.add(member)
        self._ordered, self._members = ordered, set()
        logger.debug("unhashable element, index moved to natural order with %d member(s)", len(ordered))
        return ordered

    def add(self, item: T) -> bool:
        """insert ``item``; true if it was not a member yet"""
        if self._ordered is None:
            try:
                if item in self._members:
                    return False
                self._members.add(item)
                return True
            except TypeError:
                self._to_ordered()
        return self._ordered.add(item)

    def __contains__(self, item: object) -> bool:
        if self._ordered is None:
            try:
                return item in self._members
            except TypeError:
                self._to_ordered()
        return item in self._ordered

    def __len__(self) -> int:
        return len(self._members) if self._ordered is None else len(self._ordered)


def make_index(comparer: Optional[Comparer[T]] = None) -> Union[HashedIndex[T], OrderedIndex[T]]:
    return HashedIndex() if comparer is None else OrderedIndex(comparer)


class SortedLookup(Generic[T]):
    """
    membership test against a second sequence, built on the first query.
    the sequence is copied into a buffer, sorted with the comparer and then
    binary-searched. without a comparer the buffer is hashed instead, unless
    a buffered or queried element is unhashable.
    """

    def __init__(self, source: Iterable[T], comparer: Optional[Comparer[T]], label: str):
        self._source: Optional[Iterable[T]] = source
        self._comparer = comparer
        self._label = label
        self._buffer: List[T] = []
        self._sorted_keys: Optional[List[Any]] = None
        self._members: Optional[Set[T]] = None

    @property
    def is_materialized(self) -> bool:
        return self._source is None

    @property
    def is_sorted(self) -> bool:
        return self._sorted_keys is not None

    def _materialize(self) -> None:
        self._buffer = list(self._source)
        self._source = None
        if self._comparer is None:
            try:
                self._members = set(self._buffer)
            except TypeError:
                self._sort()
        else:
            self._sort()
        logger.debug("%s lookup built from %d element(s)", self._label, len(self._buffer))

    def _sort(self) -> None:
        key = sort_key(self._comparer)
        self._sorted_keys = sorted(key(item) for item in self._buffer)
        self._members = None

    def __contains__(self, item: object) -> bool:
        if self._source is not None:
            self._materialize()
        if self._members is not None:
            try:
                return item in self._members
            except TypeError:
                self._sort()
        return _bisect_wrapped(self._sorted_keys, sort_key(self._comparer)(item))[1]


class KeyedGroups(Generic[K, V]):
    """
    map from key to the values sharing it, in the order they were appended.
    with a comparer keys are kept in comparer order. otherwise they are hashed
    and ``ordered_items`` sorts them naturally; an unhashable key moves the map
    to the natural order for good.
    """

    def __init__(self, comparer: Optional[Comparer[K]] = None):
        self._hashed: Dict[K, List[V]] = {}
        self._sort_key = sort_key(comparer) if comparer is not None else None
        self._keys: List[Any] = []
        self._values: List[List[V]] = []

    def _to_ordered(self) -> None:
        self._sort_key = sort_key(default_comparer)
        for key, values in sorted(self._hashed.items(), key=lambda pair: pair[0]):
            self._keys.append(self._sort_key(key))
            self._values.append(values)
        self._hashed = {}

    def append(self, key: K, value: V) -> None:
        if self._sort_key is None:
            try:
                self._hashed.setdefault(key, []).append(value)
                return
            except TypeError:
                self._to_ordered()
        wrapped = self._sort_key(key)
        position, found = _bisect_wrapped(self._keys, wrapped)
        if found:
            self._values[position].append(value)
        else:
            self._keys.insert(position, wrapped)
            self._values.insert(position, [value])

    def get(self, key: K, default: Optional[List[V]] = None) -> Optional[List[V]]:
        if self._sort_key is None:
            try:
                return self._hashed.get(key, default)
            except TypeError:
                self._to_ordered()
        position, found = _bisect_wrapped(self._keys, self._sort_key(key))
        return self._values[position] if found else default

    def __len__(self) -> int:
        return len(self._hashed) if self._sort_key is None else len(self._keys)

    def ordered_items(self) -> List[Tuple[K, List[V]]]:
        """every (key, values) pair, in key order"""
        if self._sort_key is None:
            return sorted(self._hashed.items(), key=lambda pair: pair[0])
        return [(wrapped.obj, values) for wrapped, values in zip(self._keys, self._values)]

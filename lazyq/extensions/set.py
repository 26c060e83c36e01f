from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..index import make_index, SortedLookup

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    set-theoretic operations over sequences.

    ``comparer`` is an optional three-way function. when given, two elements
    are the same member iff it returns 0 for them, whatever else differs
    between them. when omitted, members are compared by hash and equality, or by
    their natural order once an unhashable element turns up.
    the first instance of each member, in source order, is the one kept.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, comparer: Optional[Comparer[Any]] = None,
                 key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        source = self._enumerable
        def distinct_iter():
            seen = make_index(comparer)
            for item in source:
                if seen.add(item if key_selector is None else key_selector(item)):
                    yield item
        return Enumerable(distinct_iter)

    def union(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        source, second = self._enumerable, from_iterable(other)
        def union_iter():
            # one index spans both inputs, so duplicates across them are dropped too
            seen = make_index(comparer)
            for item in chain(source, second):
                if seen.add(item):
                    yield item
        return Enumerable(union_iter)

    def intersect(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
        """return the elements of this sequence that are also in the other one, in this sequence's order."""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        source = self._enumerable
        lookup = SortedLookup(from_iterable(other), comparer, "intersect")
        def intersect_iter():
            for item in source:
                if item in lookup:
                    yield item
        return Enumerable(intersect_iter)

    def except_(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        source = self._enumerable
        lookup = SortedLookup(from_iterable(other), comparer, "except")
        def except_iter():
            for item in source:
                if item not in lookup:
                    yield item
        return Enumerable(except_iter)

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        source, second = self._enumerable, from_iterable(other)
        def concat_iter():
            yield from source
            yield from second
        return Enumerable(concat_iter)

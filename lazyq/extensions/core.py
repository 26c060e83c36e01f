from __future__ import annotations
import typing
from collections import deque
from itertools import islice
from ..types import *
from ..selectors import indexless
from ..stage import CachedResult

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        return self.where_with_index(indexless(predicate))

    def where_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate that also receives the element's index"""
        from ..enumerable import Enumerable
        def where_iter():
            for index, item in enumerate(self):
                if predicate(item, index):
                    yield item
        return Enumerable(where_iter)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        return self.select_with_index(indexless(selector))

    def select_with_index(self: 'Enumerable[T]', selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        def select_iter():
            for index, item in enumerate(self):
                yield selector(item, index)
        return Enumerable(select_iter)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        return self.select_many_with_index(indexless(selector))

    def select_many_with_index(self: 'Enumerable[T]',
                               selector: IndexedSelector[T, Iterable[U]]) -> 'Enumerable[U]':
        """
        project each element to a sub-sequence and flatten the results.
        a sub-sequence is buffered whole; the next source element is only
        pulled once the buffer has been drained.
        """
        from ..enumerable import Enumerable
        def select_many_iter():
            pending = deque()
            for index, item in enumerate(self):
                pending.extend(selector(item, index))
                while pending:
                    yield pending.popleft()
        return Enumerable(select_many_iter)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0)))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0), None))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        return self.take_while_with_index(indexless(predicate))

    def take_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """
        take elements up to the first one failing the predicate.
        the boundary is found by one forward scan on first demand; later
        elements are never looked at, even if they would satisfy the predicate.
        """
        from ..enumerable import Enumerable
        def take_iter():
            taken = []
            for index, item in enumerate(self):
                if not predicate(item, index):
                    break
                taken.append(item)
            yield from taken
        return Enumerable(take_iter)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        return self.skip_while_with_index(indexless(predicate))

    def skip_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """
        skip elements up to the first one failing the predicate, then yield the rest.
        the predicate is not evaluated again past that boundary.
        """
        from ..enumerable import Enumerable
        def skip_iter():
            cursor = iter(self)
            for index, item in enumerate(cursor):
                if not predicate(item, index):
                    yield item
                    break
            yield from cursor
        return Enumerable(skip_iter)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        if self.traits.reversible:
            # walk the source backwards directly; reversing again walks it forwards
            return Enumerable(self._iter_reversed, self.__iter__)
        stage = CachedResult(lambda: self._get_data()[::-1], "reverse")
        return Enumerable._from_cached(stage)

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        def append_iter():
            yield from self
            yield element
        return Enumerable(append_iter)

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        def prepend_iter():
            yield element
            yield from self
        return Enumerable(prepend_iter)

    def default_if_empty(self: 'Enumerable[T]', default_value: T = None) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        def default_iter():
            empty = True
            for item in self:
                empty = False
                yield item
            if empty:
                yield default_value
        return Enumerable(default_iter)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.where(lambda item: isinstance(item, type_filter))

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                 comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        return self._ordered(key_selector, comparer, False)

    def order_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                            comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        return self._ordered(key_selector, comparer, True)

    def _ordered(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                 comparer: Optional[Comparer[K]], descending: bool) -> 'OrderedEnumerable[T]':
        from ..enumerable import OrderedEnumerable
        from ..comparers import ComparatorChain, SortClause, default_comparer
        clause = SortClause(key_selector, comparer or default_comparer, descending)
        return OrderedEnumerable(self, ComparatorChain([clause]))

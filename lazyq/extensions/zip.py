from __future__ import annotations
import typing
from itertools import zip_longest
from ..types import *
from ..selectors import pair_of

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """zip two sequences with custom result selector; stops with the shorter one"""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        source, second = self._enumerable, from_iterable(other)
        def zip_iter():
            for left, right in zip(source, second):
                yield result_selector(left, right)
        return Enumerable(zip_iter)

    def zip(self, other: Iterable[U]) -> 'Enumerable[Tuple[T, U]]':
        """zip two sequences into pairs"""
        return self.zip_with(other, pair_of)

    def zip_longest_with(self, other: Iterable[U],
                         result_selector: Callable[[Optional[T], Optional[U]], V],
                         default_self: Optional[T] = None, default_other: Optional[U] = None) -> 'Enumerable[V]':
        """zip sequences padding shorter with defaults"""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        source, second = self._enumerable, from_iterable(other)
        def zip_longest_iter():
            # use a sentinel object to distinguish from a fill value of none
            sentinel = object()
            for left, right in zip_longest(source, second, fillvalue=sentinel):
                yield result_selector(default_self if left is sentinel else left,
                                      default_other if right is sentinel else right)
        return Enumerable(zip_longest_iter)

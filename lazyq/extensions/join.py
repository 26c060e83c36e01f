from __future__ import annotations
import typing
from ..types import *
from ..index import KeyedGroups
from ..selectors import pair_of
from ..stage import CachedResult

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping

def _group_inner(inner: Iterable[U], inner_key_selector: KeySelector[U, K],
                 comparer: Optional[Comparer[K]]) -> KeyedGroups[K, U]:
    """index the inner sequence by key, keeping inner order within each key"""
    lookup = KeyedGroups(comparer)
    for inner_item in inner:
        lookup.append(inner_key_selector(inner_item), inner_item)
    return lookup

class JoinAccessor(Generic[T]):
    """
    keyed joins. every join is computed in full on first demand and cached,
    so later enumerations replay the results without calling any selector.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V] = pair_of,
             comparer: Optional[Comparer[K]] = None) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        outer = self._enumerable
        inner = from_iterable(inner)
        def join_data():
            inner_lookup = _group_inner(inner, inner_key_selector, comparer)
            result = []
            for outer_item in outer:
                for inner_item in inner_lookup.get(outer_key_selector(outer_item), ()):
                    result.append(result_selector(outer_item, inner_item))
            return result
        return Enumerable._from_cached(CachedResult(join_data, "join"))

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, 'Grouping[K, U]'], V] = pair_of,
                   comparer: Optional[Comparer[K]] = None) -> 'Enumerable[V]':
        """
        group join - pairs every outer element with the group of inner elements sharing its key.
        exactly one result per outer element; the group is empty when nothing matches.
        """
        from ..enumerable import Enumerable, Grouping
        from ..factories import from_iterable
        outer = self._enumerable
        inner = from_iterable(inner)
        def group_join_data():
            inner_lookup = _group_inner(inner, inner_key_selector, comparer)
            result = []
            for outer_item in outer:
                outer_key = outer_key_selector(outer_item)
                group = Grouping(outer_key, inner_lookup.get(outer_key, []))
                result.append(result_selector(outer_item, group))
            return result
        return Enumerable._from_cached(CachedResult(group_join_data, "group_join"))

    def left_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                  inner_key_selector: KeySelector[U, K],
                  result_selector: Callable[[T, Optional[U]], V] = pair_of,
                  default_inner: Optional[U] = None,
                  comparer: Optional[Comparer[K]] = None) -> 'Enumerable[V]':
        """left outer join - includes all outer elements even without matches"""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        outer = self._enumerable
        inner = from_iterable(inner)
        def left_join_data():
            inner_lookup = _group_inner(inner, inner_key_selector, comparer)
            result = []
            for outer_item in outer:
                matched_inners = inner_lookup.get(outer_key_selector(outer_item))
                if matched_inners:
                    for inner_item in matched_inners:
                        result.append(result_selector(outer_item, inner_item))
                else:
                    result.append(result_selector(outer_item, default_inner))
            return result
        return Enumerable._from_cached(CachedResult(left_join_data, "left_join"))

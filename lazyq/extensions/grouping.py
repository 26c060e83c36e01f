from __future__ import annotations
import typing
from collections import deque
from itertools import batched, pairwise
from ..types import *
from ..index import KeyedGroups
from ..stage import CachedResult

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, U]] = None,
                 result_selector: Optional[Callable[[K, 'Grouping[K, U]'], V]] = None,
                 comparer: Optional[Comparer[K]] = None) -> 'Enumerable[V]':
        """
        group elements by a key.

        the source is read in one pass on first demand. one result is produced
        per distinct key, in key order (the comparer's, or the natural order of
        the keys); values keep their source order inside a group. without a
        result selector each result is a ``Grouping`` carrying its key.
        """
        from ..enumerable import Enumerable, Grouping
        source = self._enumerable
        def group_data():
            groups = KeyedGroups(comparer)
            for item in source:
                groups.append(key_selector(item), item if element_selector is None else element_selector(item))
            result = []
            for key, values in groups.ordered_items():
                group = Grouping(key, values)
                result.append(group if result_selector is None else result_selector(key, group))
            return result
        return Enumerable._from_cached(CachedResult(group_data, "group_by"))

    def chunk(self, size: int) -> 'Enumerable[List[T]]':
        """split into chunks of specified size; the last chunk may be shorter"""
        from ..enumerable import Enumerable
        if size <= 0:
            raise ValueError("chunk size must be positive")
        return Enumerable(lambda: (list(batch) for batch in batched(self._enumerable, size)))

    def window(self, size: int) -> 'Enumerable[List[T]]':
        """create sliding windows of specified size"""
        from ..enumerable import Enumerable
        if size <= 0:
            raise ValueError("window size must be positive")
        def window_iter():
            current = deque(maxlen=size)
            for item in self._enumerable:
                current.append(item)
                if len(current) == size:
                    yield list(current)
        return Enumerable(window_iter)

    def pairwise(self) -> 'Enumerable[Tuple[T, T]]':
        """return consecutive pairs"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: pairwise(self._enumerable))

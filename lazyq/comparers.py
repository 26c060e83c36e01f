"""
three-way comparers and the comparator chain behind order_by/then_by.

a comparer returns a negative number, zero or a positive number when its
left argument sorts before, together with, or after its right argument.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import cmp_to_key
from .types import *


def default_comparer(left: Any, right: Any) -> int:
    """natural ordering using the < operator of the compared values."""
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def sort_key(comparer: Optional[Comparer[Any]]) -> Callable[[Any], Any]:
    """wrap a comparer so its values can go through sorted() and bisect."""
    return cmp_to_key(comparer or default_comparer)


@dataclass(frozen=True)
class SortClause(Generic[T, K]):
    key_selector: KeySelector[T, K]
    comparer: Comparer[K] = default_comparer
    descending: bool = False

    def compare(self, left_key: K, right_key: K) -> int:
        result = self.comparer(left_key, right_key)
        # flip the sign, not the operands: equal keys must stay equal
        return -result if self.descending else result


class ComparatorChain(Generic[T]):
    """an ordered list of sort clauses; the first clause that tells two items apart wins."""

    def __init__(self, clauses: Iterable[SortClause[T, Any]] = ()):
        self._clauses: Tuple[SortClause[T, Any], ...] = tuple(clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[SortClause[T, Any]]:
        return iter(self._clauses)

    def __repr__(self) -> str:
        directions = ", ".join("desc" if c.descending else "asc" for c in self._clauses)
        return f"ComparatorChain([{directions}])"

    def then(self, clause: SortClause[T, Any]) -> 'ComparatorChain[T]':
        """a new chain with ``clause`` appended as the last tie-breaker"""
        return ComparatorChain(self._clauses + (clause,))

    def keys_of(self, item: T) -> Tuple[Any, ...]:
        return tuple(clause.key_selector(item) for clause in self._clauses)

    def compare_keys(self, left_keys: Tuple[Any, ...], right_keys: Tuple[Any, ...]) -> int:
        for clause, left, right in zip(self._clauses, left_keys, right_keys):
            result = clause.compare(left, right)
            if result != 0:
                return result
        return 0

    def compare(self, left: T, right: T) -> int:
        return self.compare_keys(self.keys_of(left), self.keys_of(right))

    def sort(self, items: Iterable[T]) -> List[T]:
        """
        stable sort of ``items`` under this chain.
        keys are extracted once per element, before any comparison happens.
        """
        decorated = [(self.keys_of(item), item) for item in items]
        by_keys = cmp_to_key(lambda left, right: self.compare_keys(left[0], right[0]))
        # list.sort is stable, so items with equal key chains keep their source order
        decorated.sort(key=by_keys)
        return [item for _, item in decorated]

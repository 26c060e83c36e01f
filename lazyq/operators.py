"""
configured operators, applied to a source with ``|`` or by calling them.

    from lazyq import operators as q
    names = people | q.where(lambda p: p.age > 30) | q.select(lambda p: p.name)

an operator owns what it was configured with (predicate, selectors, second
sequence, comparer) until it is applied; applying it hands all of that to the
resulting sequence, and the operator cannot be applied again.
"""
from __future__ import annotations
import logging
from .types import *
from .errors import OperatorReusedError
from .selectors import pair_of

logger = logging.getLogger(__name__)


class Operator(Generic[T, U]):
    # numpy arrays and pandas objects defer `|` to __ror__ instead of broadcasting it
    __array_ufunc__ = None
    __pandas_priority__ = 5000

    def __init__(self, name: str, apply: Callable[[Any], U]):
        self._name = name
        self._apply: Optional[Callable[[Any], U]] = apply

    @property
    def name(self) -> str:
        return self._name

    @property
    def applied(self) -> bool:
        return self._apply is None

    def __call__(self, source: Iterable[T]) -> U:
        from .factories import from_iterable
        if self._apply is None:
            raise OperatorReusedError(f"operator '{self._name}' has already been applied")
        apply, self._apply = self._apply, None
        logger.debug("applying operator %s", self._name)
        return apply(from_iterable(source))

    def __ror__(self, source: Iterable[T]) -> U:
        return self(source)

    def __repr__(self) -> str:
        return f"Operator({self._name}{', applied' if self.applied else ''})"

# --- streaming ---

def where(predicate: Predicate[T]) -> Operator:
    return Operator("where", lambda seq: seq.where(predicate))

def where_with_index(predicate: IndexedPredicate[T]) -> Operator:
    return Operator("where_with_index", lambda seq: seq.where_with_index(predicate))

def select(selector: Selector[T, U]) -> Operator:
    return Operator("select", lambda seq: seq.select(selector))

def select_with_index(selector: IndexedSelector[T, U]) -> Operator:
    return Operator("select_with_index", lambda seq: seq.select_with_index(selector))

def select_many(selector: Selector[T, Iterable[U]]) -> Operator:
    return Operator("select_many", lambda seq: seq.select_many(selector))

def select_many_with_index(selector: IndexedSelector[T, Iterable[U]]) -> Operator:
    return Operator("select_many_with_index", lambda seq: seq.select_many_with_index(selector))

def skip(count: int) -> Operator:
    return Operator("skip", lambda seq: seq.skip(count))

def skip_while(predicate: Predicate[T]) -> Operator:
    return Operator("skip_while", lambda seq: seq.skip_while(predicate))

def skip_while_with_index(predicate: IndexedPredicate[T]) -> Operator:
    return Operator("skip_while_with_index", lambda seq: seq.skip_while_with_index(predicate))

def take(count: int) -> Operator:
    return Operator("take", lambda seq: seq.take(count))

def take_while(predicate: Predicate[T]) -> Operator:
    return Operator("take_while", lambda seq: seq.take_while(predicate))

def take_while_with_index(predicate: IndexedPredicate[T]) -> Operator:
    return Operator("take_while_with_index", lambda seq: seq.take_while_with_index(predicate))

def concat(other: Iterable[T]) -> Operator:
    return Operator("concat", lambda seq: seq.set.concat(other))

def zip_with(other: Iterable[U], result_selector: Callable[[T, U], V] = pair_of) -> Operator:
    return Operator("zip_with", lambda seq: seq.zip.zip_with(other, result_selector))

def reverse() -> Operator:
    return Operator("reverse", lambda seq: seq.reverse())

# --- set-indexed ---

def distinct(comparer: Optional[Comparer[T]] = None) -> Operator:
    return Operator("distinct", lambda seq: seq.set.distinct(comparer))

def union_with(other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> Operator:
    return Operator("union_with", lambda seq: seq.set.union(other, comparer))

def except_(other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> Operator:
    return Operator("except", lambda seq: seq.set.except_(other, comparer))

def intersect(other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> Operator:
    return Operator("intersect", lambda seq: seq.set.intersect(other, comparer))

# --- relational ---

def group_by(key_selector: KeySelector[T, K],
             element_selector: Optional[Selector[T, U]] = None,
             result_selector: Optional[Callable[[K, Any], V]] = None,
             comparer: Optional[Comparer[K]] = None) -> Operator:
    return Operator("group_by", lambda seq: seq.group.group_by(
        key_selector, element_selector, result_selector, comparer))

def join(inner: Iterable[U], outer_key_selector: KeySelector[T, K],
         inner_key_selector: KeySelector[U, K],
         result_selector: Callable[[T, U], V] = pair_of,
         comparer: Optional[Comparer[K]] = None) -> Operator:
    return Operator("join", lambda seq: seq.join.join(
        inner, outer_key_selector, inner_key_selector, result_selector, comparer))

def group_join(inner: Iterable[U], outer_key_selector: KeySelector[T, K],
               inner_key_selector: KeySelector[U, K],
               result_selector: Callable[[T, Any], V] = pair_of,
               comparer: Optional[Comparer[K]] = None) -> Operator:
    return Operator("group_join", lambda seq: seq.join.group_join(
        inner, outer_key_selector, inner_key_selector, result_selector, comparer))

# --- ordering ---

def order_by(key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> Operator:
    return Operator("order_by", lambda seq: seq.order_by(key_selector, comparer))

def order_by_descending(key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> Operator:
    return Operator("order_by_descending", lambda seq: seq.order_by_descending(key_selector, comparer))

def _then(seq, key_selector, comparer, descending):
    from .enumerable import OrderedEnumerable
    if isinstance(seq, OrderedEnumerable):
        # extend the existing chain: the new clause only breaks its ties
        return seq.then_by_descending(key_selector, comparer) if descending else seq.then_by(key_selector, comparer)
    return seq.order_by_descending(key_selector, comparer) if descending else seq.order_by(key_selector, comparer)

def then_by(key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> Operator:
    return Operator("then_by", lambda seq: _then(seq, key_selector, comparer, False))

def then_by_descending(key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> Operator:
    return Operator("then_by_descending", lambda seq: _then(seq, key_selector, comparer, True))

# --- terminal ---

def last(predicate: Optional[Predicate[T]] = None) -> Operator:
    return Operator("last", lambda seq: seq.to.last(predicate))

def last_or_default(predicate: Optional[Predicate[T]] = None, default: Optional[T] = None) -> Operator:
    return Operator("last_or_default", lambda seq: seq.to.last_or_default(predicate, default))

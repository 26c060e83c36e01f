from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..errors import EmptySequenceError, OutOfRangeError
from ..traits import SequenceTraits, seq_traits, reverse_iter

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_NOT_FOUND = object()

# --- last-element search strategies ---
# each returns (saw_any_element, match or _NOT_FOUND)

def _scan_backward(source: Iterable[T], predicate: Optional[Predicate[T]]) -> Tuple[bool, Any]:
    """walk from the end; stops at the first match"""
    saw_any = False
    for item in reverse_iter(source):
        saw_any = True
        if predicate is None or predicate(item):
            return True, item
    return saw_any, _NOT_FOUND

def _scan_forward(source: Iterable[T], predicate: Optional[Predicate[T]]) -> Tuple[bool, Any]:
    """one full pass remembering the latest match"""
    saw_any = False
    found = _NOT_FOUND
    for item in source:
        saw_any = True
        if predicate is None or predicate(item):
            found = item
    return saw_any, found

def _last_strategy(traits: SequenceTraits) -> Callable[[Iterable[T], Optional[Predicate[T]]], Tuple[bool, Any]]:
    return _scan_backward if traits.reversible else _scan_forward

def find_last(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> Tuple[bool, Any]:
    """pick the scan once from the source's capabilities and run it"""
    return _last_strategy(seq_traits(source))(source, predicate)

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None:
            for _ in self._enumerable:
                return True
            return False
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        saw_any = False
        for item in self._enumerable:
            saw_any = True
            if predicate is None or predicate(item):
                return item
        if not saw_any: raise EmptySequenceError()
        raise OutOfRangeError()

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except (EmptySequenceError, OutOfRangeError): return default

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """
        get last element, or the last one satisfying the predicate.
        bidirectional sources are searched from the end; others are read in
        one forward pass keeping the latest match.
        raises EmptySequenceError for an empty source and OutOfRangeError when
        no element satisfies the predicate.
        """
        saw_any, found = find_last(self._enumerable, predicate)
        if not saw_any: raise EmptySequenceError()
        if found is _NOT_FOUND: raise OutOfRangeError()
        return found

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default; never raises for an empty source or a missed predicate"""
        _, found = find_last(self._enumerable, predicate)
        return default if found is _NOT_FOUND else found

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        saw_any = False
        matches = []
        for item in self._enumerable:
            saw_any = True
            if predicate is None or predicate(item):
                matches.append(item)
                if len(matches) > 1:
                    raise ValueError("sequence contains more than one matching element")
        if not saw_any: raise EmptySequenceError()
        if not matches: raise OutOfRangeError("sequence contains no matching elements")
        return matches[0]

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        if seed is not None:
            return reduce(accumulator, self._enumerable, seed)
        cursor = iter(self._enumerable)
        for first in cursor:
            return reduce(accumulator, cursor, first)
        raise EmptySequenceError("cannot aggregate empty sequence without seed")

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(reduce(accumulator, self._enumerable, seed))

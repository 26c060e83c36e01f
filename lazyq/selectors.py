from .types import *


def identity(item: T) -> T:
    return item


def pair_of(left: T, right: U) -> Tuple[T, U]:
    return left, right


def indexless(func: Callable[[T], U]) -> IndexedSelector[T, U]:
    """adapts a one-argument callable to the (element, index) calling convention"""
    def call_without_index(item: T, _index: int) -> U:
        return func(item)
    return call_without_index

"""
capability facts about sequences.

operators that can do better on sequences supporting backward traversal
(reverse, last, last_or_default) look the capability up once, when they are
applied, and pick their algorithm from it.
"""
from __future__ import annotations
from collections.abc import Iterator as _IteratorABC, Reversible, Sized
from dataclasses import dataclass
from .types import *


@dataclass(frozen=True)
class SequenceTraits:
    reversible: bool = False
    sized: bool = False
    one_shot: bool = False


FORWARD_ONLY = SequenceTraits()
BIDIRECTIONAL = SequenceTraits(reversible=True)


def seq_traits(seq: Iterable[Any]) -> SequenceTraits:
    """report the traversal capabilities of an enumerable or a plain iterable."""
    from .enumerable import IEnumerable
    if isinstance(seq, IEnumerable):
        return seq.traits
    # iterators are reversible only in the sense of their own type, never usefully
    if isinstance(seq, _IteratorABC):
        return SequenceTraits(one_shot=True)
    return SequenceTraits(reversible=isinstance(seq, Reversible),
                          sized=isinstance(seq, Sized))


def reverse_iter(seq: Iterable[T]) -> Iterator[T]:
    """iterate a reversible sequence from its last element to its first"""
    from .enumerable import IEnumerable
    if isinstance(seq, IEnumerable):
        return seq._iter_reversed()
    return reversed(seq)

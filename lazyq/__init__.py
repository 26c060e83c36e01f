"""
  _
 | | __ _ _____   _  __ _
 | |/ _` |_  / | | |/ _` |
 | | (_| |/ /| |_| | (_| |
 |_|\__,_/___|\__, |\__, |
              |___/    |_|
"""
import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, Grouping, IEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    from_producer,
    END,
    lazyq,
    P,
)

# expose the error signals
from .errors import (
    LazyqError,
    EmptySequenceError,
    OutOfRangeError,
    OperatorReusedError,
)

# expose supporting types
from .traits import SequenceTraits, seq_traits
from .comparers import ComparatorChain, SortClause, default_comparer
from . import operators

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "Grouping",
    "IEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "from_producer",
    "END",
    "lazyq",
    "P",
    "LazyqError",
    "EmptySequenceError",
    "OutOfRangeError",
    "OperatorReusedError",
    "SequenceTraits",
    "seq_traits",
    "ComparatorChain",
    "SortClause",
    "default_comparer",
    "operators",
]

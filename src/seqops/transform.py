## transform.py

"""mapping, folding, and chunking over sequences"""

import logging
from .exception import require_callable, require_index
from .fntypes import Combiner, Mapper, T, U, V
from .loglib import TRACE
from .naming import export
from typing import Iterable, List, Optional


logger = logging.getLogger(__name__)


def map_seq(seq: Iterable[T], mapper: Mapper[T, U]) -> List[U]:
    """return a new list with `mapper` applied to each element of `seq`, in order"""
    require_callable("mapper", mapper)
    return [mapper(elt) for elt in seq]


def reduce_seq(
    # fmt: off
    seq: Iterable[T],
    combine: Combiner[T, U],
    initial: Optional[U] = None
    # fmt: on
) -> Optional[U]:
    """fold the elements of `seq` into a single value

    ## Usage

    For each element in input order, `combine` is called with the element
    as the first argument and the accumulated value as the second:

        acc = combine(elt, acc)

    The accumulator begins as `initial`. This argument order differs from
    `functools.reduce()`, and is significant for a `combine` function that
    is not commutative, e.g

    ```python
    reduce_seq(["a", "b", "c"], lambda elt, acc: acc + elt, "")
    => "abc"
    reduce_seq(["a", "b", "c"], lambda elt, acc: elt + acc, "")
    => "cba"
    ```

    Returns `initial` for an empty `seq`
    """
    require_callable("combine", combine)
    acc = initial
    for elt in seq:
        acc = combine(elt, acc)
    return acc


def map_reduce(
    # fmt: off
    seq: Iterable[T],
    mapper: Mapper[T, U],
    combine: Combiner[U, V],
    initial: Optional[V] = None
    # fmt: on
) -> Optional[V]:
    """fold the mapped elements of `seq` into a single value

    Equivalent to `reduce_seq(map_seq(seq, mapper), combine, initial)`,
    without the intermediate list. For each element in input order,
    `mapper` is called immediately before `combine`
    """
    require_callable("mapper", mapper)
    require_callable("combine", combine)
    acc = initial
    for elt in seq:
        acc = combine(mapper(elt), acc)
    return acc


def chunk(seq: Iterable[T], size: int) -> List[List[T]]:
    """split `seq` into consecutive lists of `size` elements

    ## Usage

    The last list may hold fewer than `size` elements. Returns an empty
    list when `seq` is empty or when `size` is not positive.

    ## Exceptions

    - raises `ArgumentError` if `size` is not an integer. Any integer
      type providing `__index__` is accepted, excluding bool
    """
    size = require_index("size", size)
    out = []
    if size <= 0:
        logger.log(TRACE, "chunk size %d, no chunks produced", size)
        return out
    for elt in seq:
        if not out or len(out[-1]) == size:
            out.append([])
        out[-1].append(elt)
    return out


# autopep8: off
# fmt: off
__all__ = []
export(__name__, map_seq, reduce_seq, map_reduce, chunk)

## predicates.py

"""predicate tests and selection over sequences"""

from .exception import require_callable
from .fntypes import Predicate, T
from .naming import export
from typing import Iterable, List


def all_of(seq: Iterable[T], pred: Predicate[T]) -> bool:
    """return True if `pred` holds for every element of `seq`

    ## Usage

    `pred` is called once for each element, in order, including
    any elements after the first element for which `pred` is false.
    For a short-circuiting test, see `any_of()`

    Returns True for an empty `seq`
    """
    require_callable("pred", pred)
    out = True
    for elt in seq:
        ## evaluate pred for each element, before the conjunction
        out = pred(elt) and out
    return bool(out)


def any_of(seq: Iterable[T], pred: Predicate[T]) -> bool:
    """return True if `pred` holds for at least one element of `seq`

    ## Usage

    No element after the first element for which `pred` is true
    will be provided to `pred`

    Returns False for an empty `seq`
    """
    require_callable("pred", pred)
    for elt in seq:
        if pred(elt):
            return True
    return False


def filter_seq(seq: Iterable[T], pred: Predicate[T]) -> List[T]:
    """return a new list of the elements of `seq` for which `pred` is true,
    in input order"""
    require_callable("pred", pred)
    return [elt for elt in seq if pred(elt)]


def count(seq: Iterable[T], pred: Predicate[T]) -> int:
    """return the number of elements of `seq` for which `pred` is true"""
    require_callable("pred", pred)
    n = 0
    for elt in seq:
        if pred(elt):
            n = n + 1
    return n


# autopep8: off
# fmt: off
__all__ = []
export(__name__, all_of, any_of, filter_seq, count)

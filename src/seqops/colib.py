## colib.py

"""duplicate removal for sequences"""

from .exception import require_callable
from .fntypes import EqualityFn, H, T
from .naming import export
from typing import Iterable, List


def dedup(seq: Iterable[T]) -> List[T]:
    """collapse each run of consecutive equal elements into its first element

    ## Usage

    Only adjacent elements are compared, with `==`. Duplicates that are
    not adjacent are retained:

    ```python
    dedup([1, 2, 2, 3, 2])
    => [1, 2, 3, 2]
    ```

    Returns a new list, empty for an empty `seq`
    """
    out = []
    prev = None
    for idx, elt in enumerate(seq):
        if idx == 0 or not (elt == prev):
            out.append(elt)
        prev = elt
    return out


def dedup_func(seq: Iterable[T], equal: EqualityFn[T]) -> List[T]:
    """`dedup()` for elements without a usable `==`

    `equal` is called as `equal(current, previous)`, where `previous` is
    the input element immediately before `current`
    """
    require_callable("equal", equal)
    out = []
    prev = None
    for idx, elt in enumerate(seq):
        if idx == 0 or not equal(elt, prev):
            out.append(elt)
        prev = elt
    return out


def uniq(seq: Iterable[H]) -> List[H]:
    """
    Unique elements of a sequence of hashable values.

    ## Usage

    Returns a new list containing the first occurrence of each distinct
    element of `seq`, in input order. Unlike `dedup()`, duplicates are
    removed whether or not they are adjacent.

    For unhashable elements, see `uniq_func()`
    """
    seen = set()
    out = []
    for elt in seq:
        if elt not in seen:
            seen.add(elt)
            out.append(elt)
    return out


def uniq_func(seq: Iterable[T], equal: EqualityFn[T]) -> List[T]:
    """
    Unique elements of a sequence, given an equality function.

    ## Usage

    Each element is compared with each element already retained, as
    `equal(element, retained)`. The first occurrence of each element
    is retained, in input order.

    ## Known Limitations

    This requires quadratic time in the number of unique elements.
    `uniq()` should be preferred for hashable values.
    """
    require_callable("equal", equal)
    out = []
    for elt in seq:
        if not any(equal(elt, kept) for kept in out):
            out.append(elt)
    return out


# autopep8: off
# fmt: off
__all__ = []
export(__name__, __all__, dedup, dedup_func, uniq, uniq_func)

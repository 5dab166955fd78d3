'''Type definitions for the callables accepted by seqops functions'''

from typing import Callable, Hashable
from typing_extensions import Annotated, TypeAlias, TypeVar

from .naming import export

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)


Predicate: Annotated[
    TypeAlias, "Test applied to a single element"
] = Callable[[T], bool]

Mapper: Annotated[
    TypeAlias, "Transform applied to a single element"
] = Callable[[T], U]

Combiner: Annotated[
    TypeAlias, "Fold step, called as combine(element, accumulator)"
] = Callable[[T, U], U]

EqualityFn: Annotated[
    TypeAlias, "Equality test, called as equal(current, other)"
] = Callable[[T, T], bool]


# autopep8: off
# fmt: off
__all__ = []
export(__name__, 'T', 'U', 'V', 'H',
       'Predicate', 'Mapper', 'Combiner', 'EqualityFn')

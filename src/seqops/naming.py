## naming.py

"""utilities for the public names of seqops modules"""

import sys
from types import ModuleType
from typing import Generator, List, Optional, Sequence, Union
from typing_extensions import Annotated, TypeAlias, TypeVar


class NameError(LookupError):
    """Exception class for `LookupError` generalized to a module or object name"""

    pass


ModuleArg: Annotated[TypeAlias, "Module or module name"] = Union[str, ModuleType]


def get_module(ident: ModuleArg) -> ModuleType:
    """return a module object, given a module or a module name

    ## Exceptions

    - Raises `NameError` if `ident` is a string that does not
      identify a module in `sys.modules`.
    """
    if isinstance(ident, str):
        if ident in sys.modules:
            return sys.modules[ident]
        else:
            raise NameError(f"Module not found for name: {ident!r}", ident)
    else:
        return ident


def _name_gen(v_all: Optional[Sequence], *objects) -> Generator[str, None, None]:
    ## yield each name not already present in v_all
    ##
    ## strings are used as provided, sequences are flattened,
    ## anything else must carry a __name__
    for o in objects:
        name = None
        if isinstance(o, str):
            name = o
        elif isinstance(o, Sequence):
            yield from _name_gen(v_all, *o)
        elif hasattr(o, "__name__"):
            name = o.__name__
        else:
            raise NameError(f"Unable to determine name for {o!r}", o)
        if name is not None:
            if (v_all is None) or (name not in v_all):
                yield name


def export(module: ModuleArg, obj, *objects) -> Sequence[str]:
    """add names to the `__all__` attribute of a module

    ## Syntax

    `module`
    :   name of an existing module, or a module object

    `obj` and each element in `objects`
    :   a string name, a sequence of such values, or an object
        providing a `__name__` attribute

    ## Usage

    Names already present in the module's `__all__` list are not
    repeated. If the module has no `__all__`, a new list is bound.

    ## Exceptions

    - raises `NameError` if `module` is a string not matching a module
      under `sys.modules`

    - raises `ValueError` if any non-string item in `objects`
      does not define a `__name__` attribute

    ## Example

    ```python
    from .local import *
    export(__name__, module_all(__name__ + ".local"))
    ```
    """
    m = get_module(module)
    v_all = getattr(m, "__all__", None)
    try:
        names = list(_name_gen(v_all, obj, *objects))
    except NameError as exc:
        raise ValueError(f"Unable to export symbols from {m.__name__!s}", m) from exc
    if v_all is None:
        m.__all__ = v_all = names
    else:
        v_all.extend(names)
    return v_all


T = TypeVar("T")


def module_all(
    # fmt: off
    module: ModuleArg,
    default: Optional[T] = None
    # fmt: on
) -> Optional[Union[List[str], T]]:
    """return the `__all__` attribute of a module, or `default`
    when the module does not define one

    ## Exceptions

    - raises `NameError` if `module` is a string not matching a module
      under `sys.modules`
    """
    _m = get_module(module)
    if hasattr(_m, "__all__"):
        return _m.__all__
    else:
        return default


# autopep8: off
# fmt: off
export(__name__,
       NameError, 'ModuleArg', get_module, export, module_all
       )

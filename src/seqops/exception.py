# seqops.exception

from .naming import export

import logging
import operator
from typing import Any


logger = logging.getLogger(__name__)


class GeneralException(Exception):
    def __init__(self, *args, **kwargs):
        items = kwargs.items()
        super().__init__(*args)
        self._keywords = kwargs
        for it in items:
            setattr(self, str(it[0]), it[1])

    def _opts_str(self):
        tail_args = [str(val) for val in self.args]
        tail_args.extend(
            [str(k) + "=" + repr(self._keywords[k]) for k in self._keywords]
        )
        return ", ".join(tail_args)

    def __repr__(self):
        clsname = self.__class__.__name__
        return clsname + "(" + self._opts_str() + ")"

    def __str__(self):
        return "(" + self._opts_str() + ")"


class ArgumentError(GeneralException, TypeError):
    """Invalid argument to a seqops function

    Raised before any element of the input is visited. The keyword
    attributes `name` and `value` denote the rejected argument.
    """
    name: str
    value: Any


def require_callable(name: str, value: Any) -> None:
    """raise `ArgumentError` unless `value` is callable"""
    if not callable(value):
        logger.debug("Rejected %s argument: %r", name, value)
        raise ArgumentError("Argument is not callable", name=name, value=value)


def require_index(name: str, value: Any) -> int:
    """return `value` as an int, for any integer type other than bool

    Accepts any object providing `__index__`, as for `range()`
    """
    try:
        if isinstance(value, bool):
            raise TypeError("bool is not accepted as an integer")
        return operator.index(value)
    except TypeError as exc:
        logger.debug("Rejected %s argument: %r", name, value)
        raise ArgumentError("Argument is not an integer", name=name, value=value) from exc


# autopep8: off
# fmt: off
__all__ = []
export(__name__, __all__, GeneralException, ArgumentError,
       require_callable, require_index)

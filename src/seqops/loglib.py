## loglib - seqops

from enum import Enum, IntEnum
from .naming import export
import logging
import logging.config
## type hints
from types import ModuleType
from typing import Any, Callable, Mapping, MutableMapping, Optional, Union, Type


class LogLevel(IntEnum):
    """log level enum, extended with the trace log level

    ## Usage

    `LogLevel` values may be provided as the _log level_ argument
    in calls to `logging.Logger.log()`

    This enum defines a non-normative `TRACE` log level, at one half of
    the priority of the `DEBUG` log level. seqops functions log at
    `TRACE` for degenerate inputs, e.g a non-positive chunk size.
    """
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    ## new: TRACE log level
    TRACE = int(logging.DEBUG / 2)
    NOTSET = logging.NOTSET


TRACE = LogLevel.TRACE.value


def ensure_log_levels(level_enum: Enum = LogLevel):
    """Ensure that each log level defined in `level_enum` is registered
    by name under the `logging` module"""
    for m in level_enum.__members__.values():
        value = m.value
        if logging.getLevelName(value) != m.name:
            logging.addLevelName(value, m.name)


def merge_config(source: Mapping,
                 dest: MutableMapping,
                 callback: Optional[Callable[[Any, Any, Any, bool], Any]] = None
                 ) -> MutableMapping:
    """merge a `source` mapping into a `dest` mapping, recursively

    ## Usage

    Nested mappings present under the same key in both `source` and
    `dest` are merged in place. Otherwise the value from `source`
    replaces any value in `dest`, unless a `callback` is provided.

    A `callback` is called as `callback(key, value, dest_value, found)`,
    with `dest_value` None when `found` is false. Its return value is
    stored in `dest`.

    Returns `dest`
    """
    not_found = object()
    for key, value in source.items():
        dvalue = dest.get(key, not_found)
        if isinstance(value, Mapping) and dvalue is not not_found and isinstance(dvalue, Mapping):
            merge_config(value, dvalue, callback)
            continue
        if callback is None:
            dest[key] = value
        elif dvalue is not_found:
            dest[key] = callback(key, value, None, False)
        else:
            dest[key] = callback(key, value, dvalue, True)
    return dest


def create_logging_config(
    # fmt: off
    name: Optional[str] = "seqops",
    disable_existing_loggers: bool = False,
    incremental: bool = False,
    handler: Optional[str] = "consoleHandler",
    handler_class: Union[Type, str] = logging.StreamHandler,
    level: LogLevel = LogLevel.INFO,
    **kwargs
    # fmt: on
):
    """Return a mapping for `logging.config.dictConfig()`

    ## Usage

    `name`
    : the name of the logger to configure

    `handler`
    : if not a _falsey_ value, the name of a logging handler to create for
      the logger, of the class `handler_class` at the specified `level`.
      A string `handler_class` is passed to `dictConfig()` as provided.

    `kwargs`
    : additional configuration, merged into the returned mapping
      with `merge_config()`
    """
    config = {
        "version": 1,
        "disable_existing_loggers": disable_existing_loggers,
        "incremental": incremental,
        "loggers": {name: {"level": int(level)}},
    }
    if handler:
        config['loggers'][name]['handlers'] = [handler]
        if isinstance(handler_class, str):
            clsname = handler_class
        else:
            clsname = handler_class.__module__ + "." + handler_class.__name__
        config['handlers'] = {
            handler: {
                'class': clsname,
                'level': int(level)
            }
        }
    merge_config(kwargs, config)
    return config


def get_logger(context: Union[str, Type, ModuleType], **args) -> logging.Logger:
    """return a logger for a provided `context`, configured per `args`

    ## Usage

    `context`:
    : a string, or a class, module, or other named object, determining
      the name of the logger. A `name` in `args` takes precedence.

    `args`
    : arguments for `create_logging_config()`

    returns the logger
    """
    config = dict(**args)
    if "name" in args:
        name = args["name"]
    elif isinstance(context, str):
        name = context
    else:
        has_module = hasattr(context, "__module__")
        has_name = hasattr(context, "__name__")
        if isinstance(context, ModuleType):
            name = context.__name__
        elif has_module and has_name:
            name = "%s.%s" % (context.__module__, context.__name__)
        elif has_module:
            name = context.__module__
        elif has_name:
            name = context.__name__
        else:
            name = "seqops"
    config["name"] = name
    ensure_log_levels()
    logger = logging.getLogger(name)
    logging.config.dictConfig(create_logging_config(**config))
    return logger


## the library installs no handler of its own
logging.getLogger("seqops").addHandler(logging.NullHandler())

__all__ = []
export(__name__, LogLevel, 'TRACE', ensure_log_levels, merge_config,
       create_logging_config, get_logger)

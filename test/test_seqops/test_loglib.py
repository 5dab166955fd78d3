## tests for seqops.loglib

from assertpy import assert_that
import logging
from types import ModuleType

import seqops.loglib as subject


def test_log_levels():
    subject.ensure_log_levels()
    assert_that(subject.TRACE).is_equal_to(int(logging.DEBUG / 2))
    assert_that(logging.getLevelName(subject.TRACE)).is_equal_to("TRACE")
    assert_that(logging.getLevelName(logging.DEBUG)).is_equal_to("DEBUG")


def test_merge_config():
    source = dict(a=1, b=dict(b1="b1_src"), d=dict(d1="d1"))
    dest = dict(b=dict(b1="b1", b2="b2"), c=1, d=-1)
    rslt = subject.merge_config(source, dest)
    assert_that(rslt).is_same_as(dest)
    assert_that(rslt).is_equal_to(
        dict(a=1, b=dict(b1="b1_src", b2="b2"), c=1, d=dict(d1="d1"))
    )


def test_merge_config_callback():
    calls = []

    def callback(key, value, dvalue, found):
        calls.append((key, found))
        return (value, dvalue)

    rslt = subject.merge_config(dict(a=1, b=2), dict(b=3), callback)
    assert_that(rslt).is_equal_to(dict(a=(1, None), b=(2, 3)))
    assert_that(calls).is_equal_to([("a", False), ("b", True)])


def test_create_logging_config():
    config = subject.create_logging_config(name="tmp_config", level=subject.LogLevel.DEBUG)
    assert_that(config["loggers"]["tmp_config"]).is_equal_to(
        dict(level=logging.DEBUG, handlers=["consoleHandler"])
    )
    assert_that(config["handlers"]["consoleHandler"]["class"]).is_equal_to(
        "logging.StreamHandler"
    )


def test_create_logging_config_no_handler():
    config = subject.create_logging_config(
        name="tmp_config", handler=None,
        loggers=dict(tmp_config=dict(propagate=False))
    )
    assert_that(config).does_not_contain_key("handlers")
    assert_that(config["loggers"]["tmp_config"]).is_equal_to(
        dict(level=logging.INFO, propagate=False)
    )


def test_get_logger():
    logger = subject.get_logger("tmp_seqops.loglib", level=subject.LogLevel.TRACE)
    assert_that(logger.name).is_equal_to("tmp_seqops.loglib")
    assert_that(logger.level).is_equal_to(subject.TRACE)
    assert_that(logger.handlers).is_length(1)


def test_get_logger_context():
    class Named():
        pass

    module = ModuleType("tmp_seqops_module")
    assert_that(subject.get_logger(module, handler=None).name).is_equal_to(
        "tmp_seqops_module"
    )
    assert_that(subject.get_logger(Named, handler=None).name).is_equal_to(
        __name__ + ".Named"
    )
    assert_that(subject.get_logger(Named, name="tmp_named", handler=None).name).\
        is_equal_to("tmp_named")

## tests for seqops.exception

from assertpy import assert_that

import seqops.exception as subject


def test_general_exception():
    exc = subject.GeneralException("failed", code=5)
    assert_that(exc.code).is_equal_to(5)
    assert_that(str(exc)).is_equal_to("(failed, code=5)")
    assert_that(repr(exc)).is_equal_to("GeneralException(failed, code=5)")


def test_argument_error():
    exc = subject.ArgumentError("Argument is not callable", name="pred", value=None)
    assert_that(exc).is_instance_of(TypeError)
    assert_that(exc.name).is_equal_to("pred")
    assert_that(exc.value).is_none()


def test_require_callable(caplog):
    subject.require_callable("fn", len)
    subject.require_callable("fn", lambda: None)
    caplog.set_level("DEBUG", logger=subject.__name__)
    assert_that(subject.require_callable).raises(subject.ArgumentError).\
        when_called_with("fn", None).contains("fn")
    assert_that(subject.require_callable).raises(subject.ArgumentError).\
        when_called_with("fn", "len")
    assert_that(caplog.records).is_length(2)


def test_require_index():
    assert_that(subject.require_index("size", 0)).is_equal_to(0)
    assert_that(subject.require_index("size", -3)).is_equal_to(-3)
    for value in (1.5, "2", None, False):
        assert_that(subject.require_index).raises(subject.ArgumentError).\
            when_called_with("size", value)

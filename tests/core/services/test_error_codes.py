"""Tests for the error taxonomy and its rendering."""

from pathlib import Path

from xdgdir.core.services.error_codes import (
    ErrorCode,
    HomeNotSet,
    NotAbsolutePath,
    XdgdirError,
)


def test_home_not_set_rendering():
    error = HomeNotSet()
    assert str(error) == "$HOME is not set or empty"
    assert error.code == ErrorCode.HOME_NOT_SET
    assert error.details is None


def test_not_absolute_path_rendering():
    error = NotAbsolutePath("XDG_CONFIG_HOME", "some/dir")
    assert str(error) == 'XDG_CONFIG_HOME="some/dir" is not absolute path'
    assert error.code == ErrorCode.NOT_ABSOLUTE_PATH
    assert error.variable == "XDG_CONFIG_HOME"
    assert error.path == Path("some/dir")
    assert error.details == {"variable": "XDG_CONFIG_HOME", "path": "some/dir"}


def test_errors_compare_by_value():
    assert HomeNotSet() == HomeNotSet()
    assert NotAbsolutePath("HOME", "a") == NotAbsolutePath("HOME", Path("a"))
    assert NotAbsolutePath("HOME", "a") != NotAbsolutePath("HOME", "b")
    assert NotAbsolutePath("HOME", "a") != NotAbsolutePath("XDG_DATA_HOME", "a")
    assert HomeNotSet() != NotAbsolutePath("HOME", "a")
    assert len({HomeNotSet(), HomeNotSet()}) == 1


def test_all_errors_share_base_class():
    assert isinstance(HomeNotSet(), XdgdirError)
    assert isinstance(NotAbsolutePath("HOME", "a"), XdgdirError)


def test_not_absolute_path_keeps_raw_text():
    error = NotAbsolutePath("HOME", "some//dir/")
    assert str(error) == 'HOME="some//dir/" is not absolute path'
    assert error.raw == "some//dir/"
    assert error.path == Path("some/dir")


def test_repr():
    assert repr(HomeNotSet()) == "HomeNotSet()"
    assert repr(NotAbsolutePath("HOME", "a")) == "NotAbsolutePath('HOME', 'a')"
    generic = XdgdirError(ErrorCode.UNKNOWN_ERROR, "boom")
    assert repr(generic) == "XdgdirError(code='UNKNOWN_ERROR', message='boom', details=None)"

import pytest

from iavlkit.logger import debug, set_debugging


@pytest.fixture
def debugging():
    set_debugging(True)
    yield
    set_debugging(False)


def test_debug_silent_by_default(capsys):
    set_debugging(False)
    debug("node %d\n", 3)
    assert capsys.readouterr().out == ""


def test_debug_prints_when_enabled(debugging, capsys):
    debug("node %d of %s\n", 3, "tree")
    assert capsys.readouterr().out == "node 3 of tree\n"


def test_debug_without_args_is_literal(debugging, capsys):
    debug("100%")
    assert capsys.readouterr().out == "100%"


def test_debug_can_be_switched_off_again(capsys):
    set_debugging(True)
    set_debugging(False)
    debug("hidden")
    assert capsys.readouterr().out == ""
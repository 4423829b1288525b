import pytest

from clikit.assertions import (
    RequiredArgsError,
    environment_var_required,
    string_flag_required,
)
from clikit.entrypoint import App, Flag

FLAG = "the-answer-to-all-problems"
ENV = "THE_ANSWER_TO_ALL_PROBLEMS"


def _capturing_app(captured):
    def action(options, args):
        captured.update(options)

    return App(name="app", flags=[Flag(FLAG, default="")], action=action)


def test_string_flag_required_on_missing_flag():
    captured = {}
    _capturing_app(captured).run(["app"])
    with pytest.raises(RequiredArgsError) as excinfo:
        string_flag_required(captured, FLAG)
    assert str(excinfo.value) == f"--{FLAG} is required"


def test_string_flag_required_on_set_flag():
    captured = {}
    _capturing_app(captured).run(["app", f"--{FLAG}", "42"])
    assert string_flag_required(captured, FLAG) == "42"


def test_string_flag_required_plain_mapping():
    with pytest.raises(RequiredArgsError):
        string_flag_required({}, FLAG)


def test_environment_var_required_on_missing(monkeypatch):
    monkeypatch.delenv(ENV, raising=False)
    with pytest.raises(RequiredArgsError, match=ENV):
        environment_var_required(ENV)


def test_environment_var_required_on_set(monkeypatch):
    monkeypatch.setenv(ENV, "42")
    assert environment_var_required(ENV) == "42"
import pytest

from clikit.errors import (
    ErrorWithExitCode,
    WrappedError,
    is_error,
    print_error_with_stack_trace,
    recover,
    unwrap,
    with_panic_handling,
    with_stack_trace,
    with_stack_trace_and_prefix,
)


def _explode(message):
    raise RuntimeError(message)


def test_with_stack_trace_none_is_none():
    assert with_stack_trace(None) is None


def test_with_stack_trace_and_prefix_none_is_none():
    assert with_stack_trace_and_prefix(None, "Error reading file at path %s", "x") is None


def test_with_stack_trace_wraps_and_unwraps():
    original = ValueError("Broken")
    wrapped = with_stack_trace(original)
    assert isinstance(wrapped, WrappedError)
    assert unwrap(wrapped) is original
    assert str(wrapped) == "Broken"


def test_with_stack_trace_is_idempotent():
    wrapped = with_stack_trace(ValueError("Broken"))
    assert with_stack_trace(wrapped) is wrapped


def test_unwrap_leaves_plain_errors_unchanged():
    original = RuntimeError("Broken")
    assert unwrap(original) is original
    assert unwrap(None) is None


def test_prefix_is_prepended():
    original = OSError("boom")
    wrapped = with_stack_trace_and_prefix(original, "Error reading file at path %s", "a.txt")
    assert str(wrapped) == "Error reading file at path a.txt: boom"
    assert unwrap(wrapped) is original


def test_prefixes_accumulate_and_keep_stack():
    inner = with_stack_trace_and_prefix(KeyError("k"), "inner")
    outer = with_stack_trace_and_prefix(inner, "outer")
    assert str(outer).startswith("outer: inner: ")
    assert outer.stack == inner.stack
    assert unwrap(outer) is unwrap(inner)


def test_error_with_exit_code_message():
    err = ErrorWithExitCode(ValueError("Broken"), 127)
    assert str(err) == "Broken"
    assert err.exit_code == 127


def test_is_error_matches_through_wrapper():
    original = ValueError("Broken")
    assert is_error(with_stack_trace(original), original)
    assert is_error(original, with_stack_trace(original))
    assert not is_error(with_stack_trace(ValueError("Broken")), original)


def test_is_error_with_class():
    assert is_error(with_stack_trace(KeyError("x")), KeyError)
    assert not is_error(with_stack_trace(KeyError("x")), ValueError)


def test_print_error_with_stack_trace():
    assert print_error_with_stack_trace(None) == ""
    plain = ValueError("Broken")
    assert print_error_with_stack_trace(plain) == "Broken"
    rendered = print_error_with_stack_trace(with_stack_trace(plain))
    assert rendered.startswith("ValueError Broken\n")
    assert "test_print_error_with_stack_trace" in rendered


def test_stack_comes_from_raised_traceback():
    try:
        raise ValueError("Broken")
    except ValueError as exc:
        wrapped = with_stack_trace(exc)
    assert "test_stack_comes_from_raised_traceback" in wrapped.stack


def test_recover_passes_wrapped_error():
    seen = []
    with recover(seen.append):
        _explode("panic!")
    assert len(seen) == 1
    assert isinstance(seen[0], WrappedError)
    assert str(seen[0]) == "panic!"
    assert isinstance(unwrap(seen[0]), RuntimeError)


def test_recover_without_error_does_not_call_handler():
    seen = []
    with recover(seen.append):
        value = 1 + 1
    assert seen == []
    assert value == 2


def test_with_panic_handling_returns_result():
    handled = with_panic_handling(lambda x: x * 3)
    assert handled(4) == 12


def test_with_panic_handling_wraps_exception():
    def action():
        raise ValueError("Broken")

    with pytest.raises(WrappedError) as info:
        with_panic_handling(action)()
    assert isinstance(unwrap(info.value), ValueError)
    assert str(info.value) == "Broken"
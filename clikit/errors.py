"""Error wrappers that carry stack traces and exit codes for CLI programs."""

from __future__ import annotations

import contextlib
import functools
import traceback
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

_T = TypeVar("_T")


class ErrorWithExitCode(Exception):
    """An error that tells the program to exit with the given exit code."""

    def __init__(self, err: BaseException, exit_code: int) -> None:
        super().__init__(err, exit_code)
        self.err = err
        self.exit_code = exit_code

    def __str__(self) -> str:
        return str(self.err)


class WrappedError(Exception):
    """An error paired with the stack trace where it was first wrapped."""

    def __init__(
        self, err: BaseException, prefix: str = "", stack: str | None = None
    ) -> None:
        super().__init__(err)
        self.err = err
        self.prefix = prefix
        self.stack = stack if stack is not None else _capture_stack(err)

    def __str__(self) -> str:
        message = str(self.err)
        if self.prefix:
            return f"{self.prefix}: {message}"
        return message

    def error_stack(self) -> str:
        """Return the error's type and message followed by its stack trace."""
        return f"{type(self.err).__name__} {self}\n{self.stack}"


def _capture_stack(err: BaseException) -> str:
    if err.__traceback__ is not None:
        return "".join(traceback.format_tb(err.__traceback__))
    # Drop the frames belonging to this module so the trace starts at the caller.
    frames = traceback.extract_stack()
    while frames and frames[-1].filename == __file__:
        frames.pop()
    return "".join(traceback.format_list(frames))


def with_stack_trace(err: BaseException | None) -> WrappedError | None:
    """Wrap ``err`` with a stack trace; an already wrapped error is returned as is."""
    if err is None:
        return None
    if isinstance(err, WrappedError):
        return err
    return WrappedError(err)


def with_stack_trace_and_prefix(
    err: BaseException | None, message: str, *args: Any
) -> WrappedError | None:
    """Wrap ``err`` with a stack trace and prepend a %-formatted message to it."""
    if err is None:
        return None
    prefix = message % args if args else message
    if isinstance(err, WrappedError):
        if err.prefix:
            prefix = f"{prefix}: {err.prefix}"
        return WrappedError(err.err, prefix=prefix, stack=err.stack)
    return WrappedError(err, prefix=prefix)


def unwrap(err: BaseException | None) -> BaseException | None:
    """Return the error inside a stack-trace wrapper, or ``err`` unchanged."""
    if isinstance(err, WrappedError):
        return err.err
    return err


def is_error(actual: BaseException | None, expected: Any) -> bool:
    """Return True if ``actual`` is, or wraps, the ``expected`` error.

    ``expected`` may be an error instance or an exception class.
    """
    expected = unwrap(expected)
    current = actual
    while current is not None:
        if current is expected or current == expected:
            return True
        if isinstance(expected, type) and isinstance(current, expected):
            return True
        current = current.err if isinstance(current, WrappedError) else None
    return False


def print_error_with_stack_trace(err: BaseException | None) -> str:
    """Render ``err`` as text, including its stack trace when it carries one."""
    if err is None:
        return ""
    if isinstance(err, WrappedError):
        return err.error_stack()
    return str(err)


@contextlib.contextmanager
def recover(on_panic: Callable[[WrappedError], Any]) -> Iterator[None]:
    """Suppress any exception raised in the block and hand it, wrapped, to ``on_panic``."""
    try:
        yield
    except Exception as exc:  # noqa: BLE001 - every failure is reported
        wrapped = with_stack_trace(exc)
        assert wrapped is not None
        on_panic(wrapped)


def with_panic_handling(action: Callable[..., _T]) -> Callable[..., _T]:
    """Wrap ``action`` so that any exception it raises comes out with a stack trace."""

    @functools.wraps(action)
    def wrapper(*args: Any, **kwargs: Any) -> _T:
        try:
            return action(*args, **kwargs)
        except Exception as exc:
            wrapped = with_stack_trace(exc)
            if wrapped is exc:
                raise
            raise wrapped from exc

    return wrapper
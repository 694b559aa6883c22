"""Context-aware logging, error checking and assertions for plugin code."""

from __future__ import annotations

import io
import sys
from typing import Any, Callable, TextIO


def _sprint(args: tuple[Any, ...]) -> str:
    """Join operands, adding a space only between two non-string operands."""
    parts: list[str] = []
    previous: Any = None
    for index, arg in enumerate(args):
        if index and not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(str(arg))
        previous = arg
    return "".join(parts)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


class RootDebugger:
    """The top-level debugger: writes to a stream and exits on failure."""

    def __init__(
        self,
        stream: TextIO | None = None,
        log_debugs: bool = False,
        exit_func: Callable[[int], Any] | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self.log_debugs = log_debugs
        self._exit = exit_func if exit_func is not None else sys.exit

    def _println(self, *args: Any) -> None:
        self._stream.write(" ".join(str(arg) for arg in args) + "\n")

    def _printf(self, fmt: str, args: tuple[Any, ...]) -> None:
        message = _format(fmt, args)
        if not message.endswith("\n"):
            message += "\n"
        self._stream.write(message)

    def _on_fail(self, message: str) -> None:
        self._println(message)
        self._exit(1)

    def _on_err(self, err: BaseException, message: str) -> None:
        self._printf("[error] %s: %s", (message, err))
        self._exit(1)

    def log(self, *args: Any) -> None:
        """Write the arguments, space separated, followed by a newline."""
        self._println(*args)

    def logf(self, fmt: str, *args: Any) -> None:
        """Write a printf-style formatted message."""
        self._printf(fmt, args)

    def debug(self, *args: Any) -> None:
        """Like log, but only when debugging is enabled."""
        if self.log_debugs:
            self.log(*args)

    def debugf(self, fmt: str, *args: Any) -> None:
        """Like logf, but only when debugging is enabled."""
        if self.log_debugs:
            self.logf(fmt, *args)

    def fail(self, *args: Any) -> None:
        """Log the message and terminate with exit code 1."""
        self._on_fail(_sprint(args))

    def failf(self, fmt: str, *args: Any) -> None:
        """Log the formatted message and terminate with exit code 1."""
        self._on_fail(_format(fmt, args))

    def check_err(self, err: BaseException | None, *args: Any) -> None:
        """Fail with the error and message if err is not None."""
        if err is not None:
            self._on_err(err, _sprint(args))

    def assert_true(self, expr: Any, *args: Any) -> None:
        """Fail with the message if expr is false."""
        if not expr:
            self.fail(_sprint(args))

    def exit(self, code: int) -> None:
        """Terminate with the given code."""
        self._exit(code)

    def push(self, prefix: str) -> PrefixedDebugger:
        """Return a child debugger that prefixes its output."""
        return PrefixedDebugger(self, prefix)

    def pop(self) -> None:
        """Popping the root is an error and fails the debugger."""
        self.fail("attempted to pop the root debugger")
        return None


class PrefixedDebugger:
    """A debugger that adds a bracketed prefix before delegating to its parent."""

    def __init__(self, parent: RootDebugger | PrefixedDebugger, prefix: str) -> None:
        self.parent = parent
        self.prefix = f"[{prefix}]"

    def _prepend(self, args: tuple[Any, ...]) -> tuple[Any, ...]:
        return (self.prefix, *args)

    def _prepend_format(self, fmt: str) -> str:
        if fmt.startswith("["):
            return self.prefix + fmt
        return f"{self.prefix} {fmt}"

    def log(self, *args: Any) -> None:
        self.parent.log(*self._prepend(args))

    def logf(self, fmt: str, *args: Any) -> None:
        self.parent.logf(self._prepend_format(fmt), *args)

    def debug(self, *args: Any) -> None:
        self.parent.debug(*self._prepend(args))

    def debugf(self, fmt: str, *args: Any) -> None:
        self.parent.debugf(self._prepend_format(fmt), *args)

    def fail(self, *args: Any) -> None:
        self.parent.fail(*self._prepend(args))

    def failf(self, fmt: str, *args: Any) -> None:
        self.parent.failf(self._prepend_format(fmt), *args)

    def check_err(self, err: BaseException | None, *args: Any) -> None:
        self.parent.check_err(err, *self._prepend(args))

    def assert_true(self, expr: Any, *args: Any) -> None:
        self.parent.assert_true(expr, *self._prepend(args))

    def exit(self, code: int) -> None:
        self.parent.exit(code)

    def push(self, prefix: str) -> PrefixedDebugger:
        return PrefixedDebugger(self, prefix)

    def pop(self) -> RootDebugger | PrefixedDebugger:
        return self.parent


class MockDebugger(RootDebugger):
    """A root debugger for tests: records failures, errors and exits instead of exiting."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        super().__init__(self._buffer, True, self._record_exit)
        self._failed = False
        self._err: BaseException | None = None
        self._exited = False
        self._code = 0

    def _record_exit(self, code: int) -> None:
        self._exited = True
        self._code = code

    def _on_fail(self, message: str) -> None:
        self._failed = True
        super()._on_fail(message)

    def _on_err(self, err: BaseException, message: str) -> None:
        self._err = err
        super()._on_err(err, message)

    def output(self) -> str:
        """Everything logged so far."""
        return self._buffer.getvalue()

    def failed(self) -> bool:
        """Whether fail or failf was called on this debugger or a descendant."""
        return self._failed

    def err(self) -> BaseException | None:
        """The last error passed to check_err."""
        return self._err

    def exited(self) -> bool:
        """Whether this debugger or a descendant would have exited."""
        return self._exited

    def exit_code(self) -> int:
        """The code passed to exit; meaningless unless exited() is true."""
        return self._code
"""Build contexts tracking the output path and a prefixed debugger."""

from __future__ import annotations

import posixpath
from typing import Any, Mapping

from .debug import MockDebugger, PrefixedDebugger, RootDebugger

_Debugger = RootDebugger | PrefixedDebugger | MockDebugger


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path) if path else "."
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _join(*parts: str) -> str:
    nonempty = [part for part in parts if part]
    if not nonempty:
        return ""
    return _clean("/".join(nonempty))


class PrefixContext:
    """A build context that adds a prefix to debugger output."""

    def __init__(self, parent: Any, debugger: Any, prefix: str) -> None:
        self._parent = parent
        self._debugger = debugger.push(prefix)

    def log(self, *args: Any) -> None:
        self._debugger.log(*args)

    def logf(self, fmt: str, *args: Any) -> None:
        self._debugger.logf(fmt, *args)

    def debug(self, *args: Any) -> None:
        self._debugger.debug(*args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self._debugger.debugf(fmt, *args)

    def fail(self, *args: Any) -> None:
        self._debugger.fail(*args)

    def failf(self, fmt: str, *args: Any) -> None:
        self._debugger.failf(fmt, *args)

    def check_err(self, err: BaseException | None, *args: Any) -> None:
        self._debugger.check_err(err, *args)

    def assert_true(self, expr: Any, *args: Any) -> None:
        self._debugger.assert_true(expr, *args)

    def exit(self, code: int) -> None:
        self._debugger.exit(code)

    def parameters(self) -> Mapping[str, str]:
        """The protoc parameters of the root context."""
        return self._parent.parameters()

    def output_path(self) -> str:
        """The path where files are generated."""
        return self._parent.output_path()

    def join_path(self, *args: str) -> str:
        """Join names onto the output path."""
        return self._parent.join_path(*args)

    def push(self, prefix: str) -> PrefixContext:
        """Add a debugger prefix without changing the output path."""
        return PrefixContext(self, self._debugger, prefix)

    def push_dir(self, directory: str) -> DirContext:
        """Change the output path, relative to the current one."""
        return DirContext(self, self._debugger, directory)

    def pop(self) -> Any:
        """Return the previous context."""
        return self._parent

    def pop_dir(self) -> Any:
        """Return the context holding the previous output path."""
        return self._parent.pop_dir()


class DirContext(PrefixContext):
    """A build context that changes the output directory."""

    def __init__(self, parent: Any, debugger: Any, directory: str) -> None:
        self._parent = parent
        self._debugger = debugger
        self._path = _clean(directory)
        parent.debug("push:", parent.output_path(), "→", self.output_path())

    def output_path(self) -> str:
        return _join(self._parent.output_path(), self._path)

    def join_path(self, *args: str) -> str:
        return _join(self.output_path(), *args)

    def pop(self) -> Any:
        self.debug("pop:", self.output_path(), "→", self._parent.output_path())
        return self._parent

    def pop_dir(self) -> Any:
        return self.pop()


class RootContext(DirContext):
    """The outermost build context, holding the parameters."""

    def __init__(self, debugger: Any, params: Mapping[str, str], output: str) -> None:
        self._parent = None
        self._debugger = debugger
        self._path = _clean(output)
        self._params = params

    def output_path(self) -> str:
        return self._path

    def join_path(self, *args: str) -> str:
        return _join(self.output_path(), *args)

    def parameters(self) -> Mapping[str, str]:
        return self._params

    def pop(self) -> None:
        """Popping the root is an error and fails the debugger."""
        self.fail("attempted to pop the root build context")
        return None

    def pop_dir(self) -> RootContext:
        return self


def context(debugger: Any, params: Mapping[str, str], output: str) -> RootContext:
    """Create a root build context with the given debugger, parameters and output path."""
    return RootContext(debugger, params, output)
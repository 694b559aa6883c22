"""Base types shared by every member of the proto graph, and extension lookup."""

from __future__ import annotations

from typing import Any, Sequence

from google.protobuf.descriptor import FieldDescriptor

_PROTO2_SYNTAXES = frozenset({"", "proto2"})


class ExtensionError(ValueError):
    """Raised when an extension cannot be read from an entity's options."""


def supports_required_prefix(syntax: str | None) -> bool:
    """Whether the syntax allows fields to be labelled required (proto2 only)."""
    return (syntax or "") in _PROTO2_SYNTAXES


def extension_value(options: Any, handle: Any) -> Any:
    """Read the extension described by handle from an options message.

    Returns None when there are no options or the extension is not set.
    Raises ExtensionError if no handle is given or the handle does not
    extend the options message.
    """
    if options is None:
        return None
    if handle is None:
        raise ExtensionError("no extension handle provided")

    try:
        if getattr(handle, "label", None) == FieldDescriptor.LABEL_REPEATED:
            values = options.Extensions[handle]
            return values if len(values) else None
        if not options.HasExtension(handle):
            return None
        return options.Extensions[handle]
    except KeyError as exc:
        raise ExtensionError(f"cannot read extension from options: {exc}") from exc


class Entity:
    """Any member of the proto graph that can carry options."""

    descriptor: Any = None
    source_code_info: Any = None

    def _options(self) -> Any:
        desc = self.descriptor
        if desc is None or not desc.HasField("options"):
            return None
        return desc.options

    def extension(self, handle: Any) -> Any:
        """The value of the extension described by handle, or None if not set."""
        return extension_value(self._options(), handle)

    def child_at_path(self, path: Sequence[int]) -> Entity | None:
        """The entity at the source-code-info path relative to this one."""
        return self if not path else None

    def add_source_code_info(self, info: Any) -> None:
        self.source_code_info = info


class ParentEntity(Entity):
    """An entity that can contain messages and enums: a file or a message."""
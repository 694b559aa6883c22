"""Message fields and extensions."""

from __future__ import annotations

from typing import Any

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from .entity import Entity, supports_required_prefix


class Field(Entity):
    """A member of a message, possibly within a oneof."""

    def __init__(self, descriptor: FieldDescriptorProto, message: Any = None, fqn: str = "") -> None:
        self.descriptor = descriptor
        self.message = message
        self.oneof: Any = None
        self.type: Any = None
        self.source_code_info = None
        self._fqn = fqn

    def name(self) -> str:
        return self.descriptor.name

    def fully_qualified_name(self) -> str:
        return self._fqn

    def syntax(self) -> str:
        return self.message.syntax()

    def package(self) -> Any:
        return self.message.package()

    def imports(self) -> list:
        """Files required by this field's type."""
        return self.type.imports()

    def file(self) -> Any:
        return self.message.file()

    def build_target(self) -> bool:
        return self.message.build_target()

    def in_oneof(self) -> bool:
        return self.oneof is not None

    def required(self) -> bool:
        """True only for proto2 fields labelled required."""
        return (
            supports_required_prefix(self.syntax())
            and self.descriptor.label == FieldDescriptorProto.LABEL_REQUIRED
        )

    def add_type(self, field_type: Any) -> None:
        """Attach a field type, binding it to this field."""
        field_type.field = self
        self.type = field_type

    def child_at_path(self, path: Any) -> Field | None:
        return self if not path else None


class Extension(Field):
    """A custom option defined in a file or message, extending another message."""

    def __init__(self, descriptor: FieldDescriptorProto, parent: Any = None, fqn: str = "") -> None:
        super().__init__(descriptor, None, fqn)
        self._parent = parent
        self._extendee: Any = None

    def syntax(self) -> str:
        return self._parent.syntax()

    def package(self) -> Any:
        return self._parent.package()

    def file(self) -> Any:
        return self._parent.file()

    def build_target(self) -> bool:
        return self._parent.build_target()

    def in_oneof(self) -> bool:
        return False

    def defined_in(self) -> Any:
        """The file or message in which the extension is declared."""
        return self._parent

    def extendee(self) -> Any:
        """The message this extension extends."""
        return self._extendee

    def set_extendee(self, message: Any) -> None:
        self._extendee = message